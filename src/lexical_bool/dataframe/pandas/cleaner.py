# src/lexical_bool/dataframe/pandas/cleaner.py
"""DataFrame boolean cleaning operations for Pandas."""

import logging

import pandas as pd

from .parser import Parser
from ...exception import LexicalBoolError

logger = logging.getLogger(__name__)


class Cleaner:
    """
    Provides static methods for converting token columns of a pandas DataFrame
    into nullable boolean columns. Only object and string columns are
    considered; numeric, bool and other columns are left as they are.
    """

    @staticmethod
    def clean_bools(df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean all string columns by parsing boolean values.

        Args:
            df: The DataFrame to clean.

        Returns:
            The DataFrame with every string column converted to the ``boolean`` dtype.

        Raises:
            InvalidInput: If any string column holds an unrecognized token.
            TypeError: If an object column holds a non-string value.
        """
        for column, series in df.items():
            if not Parser.is_token_series(series):
                logger.debug(f'{column} is {series.dtype} skipping cleaning')
                continue
            df[column] = Parser.parse_series(series)
        return df

    @staticmethod
    def clean_bool_columns(df: pd.DataFrame) -> pd.DataFrame:
        """
        Convert the string columns that parse completely and leave the rest untouched.

        Empty (all-null) and non-string columns are skipped.

        Args:
            df: The DataFrame to clean.

        Returns:
            The DataFrame with its boolean-like columns converted.
        """
        for column, series in df.items():
            if not Parser.is_token_series(series):
                logger.debug(f'{column} is {series.dtype} skipping cleaning')
                continue
            if series.dropna().empty:
                logger.info(f'{column} is empty skipping cleaning')
                continue
            try:
                df[column] = Parser.parse_series(series)
                logger.info(f'{column} was cleaned with {Parser.parse_boolean.__name__}')
            except (LexicalBoolError, TypeError) as error:
                logger.debug(f'{column} failed cleaning with {Parser.parse_boolean.__name__}: {error}')
        return df
