# src/lexical_bool/dataframe/polars/cleaner.py
import logging

import polars as pl

from .parser import PolarsParser
from ...vocabulary import current_vocabulary

logger = logging.getLogger(__name__)


class PolarsCleaner:

    @staticmethod
    def clean_bool_columns(df: pl.DataFrame) -> pl.DataFrame:
        """
        Convert the string columns whose non-null values are all recognized
        tokens into Boolean columns. Other columns are returned unchanged.
        """
        vocabulary = current_vocabulary()
        converted = []
        for column in df.columns:
            if df[column].dtype != pl.Utf8:
                continue
            if df[column].null_count() == df.height:
                logger.info(f'{column} is empty skipping cleaning')
                continue
            if df.select(PolarsParser.is_boolean_expr(column, vocabulary).all()).item():
                converted.append(PolarsParser.parse_boolean_expr(column, vocabulary))
                logger.info(f'{column} was cleaned with parse_boolean_expr')
            else:
                logger.debug(f'{column} has unrecognized tokens, skipping cleaning')
        if converted:
            df = df.with_columns(converted)
        return df
