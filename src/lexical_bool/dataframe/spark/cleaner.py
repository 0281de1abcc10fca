# src/lexical_bool/dataframe/spark/cleaner.py
"""Boolean column cleaning for Spark DataFrames."""

import logging
from typing import Optional

from pyspark.sql import functions as spark_functions
from pyspark.sql import DataFrame
from pyspark.sql.types import StringType

from .type_checkers import is_boolean
from .type_parsers import parse_boolean
from ...vocabulary import current_vocabulary

logger = logging.getLogger(__name__)


class SparkCleaner:

    @staticmethod
    def count_invalid_values(df: DataFrame, column_name: str) -> int:
        """Count the non-null values of a column that are not recognized tokens."""
        vocabulary = current_vocabulary()
        column = spark_functions.col(column_name)
        return df.filter(~is_boolean(column, vocabulary)).count()

    @staticmethod
    def clean_bool_columns(df: DataFrame, column_names: Optional[list[str]] = None) -> DataFrame:
        """
        Cast string columns holding only recognized tokens (or nulls) to boolean.

        Args:
            df: The DataFrame to clean.
            column_names: Columns to consider. Defaults to every string column.

        Returns:
            The DataFrame with the qualifying columns parsed; other columns
            are left as they were.
        """
        vocabulary = current_vocabulary()
        if column_names is None:
            column_names = [field.name for field in df.schema.fields if isinstance(field.dataType, StringType)]

        for column_name in column_names:
            column = spark_functions.col(column_name)
            counts = df.agg(
                spark_functions.count(column).alias('non_null'),
                spark_functions.sum((~is_boolean(column, vocabulary)).cast('int')).alias('invalid'),
            ).first()
            if not counts['non_null']:
                logger.info(f"Column '{column_name}' is empty, skipping.")
                continue
            if counts['invalid']:
                logger.warning(f"Column '{column_name}' kept as string ({counts['invalid']} unrecognized values).")
                continue
            logger.info(f"Casting column '{column_name}' to boolean.")
            df = df.withColumn(column_name, parse_boolean(column, vocabulary))
        return df
