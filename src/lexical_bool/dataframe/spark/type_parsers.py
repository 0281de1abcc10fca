# src/lexical_bool/dataframe/spark/type_parsers.py
"""Boolean token parsing for Spark columns."""

from typing import Optional

from pyspark.sql import functions as spark_functions
from pyspark.sql import Column
from pyspark.sql.types import BooleanType

from ...vocabulary import Vocabulary, current_vocabulary


def parse_boolean(column: Column, vocabulary: Optional[Vocabulary] = None) -> Column:
    """Native Spark SQL boolean parser.

    The vocabulary is read in the calling thread and embedded in the
    expression as literals, so executors see the same tokens. Matching is
    exact; unrecognized tokens and nulls become null.

    Args:
        column: The string column to parse
        vocabulary: Tokens to match against. Defaults to the current thread's.
    """
    vocabulary = vocabulary or current_vocabulary()
    return spark_functions.when(
        column.isin(list(vocabulary.truthy)), spark_functions.lit(True)
    ).when(
        column.isin(list(vocabulary.falsey)), spark_functions.lit(False)
    ).otherwise(
        spark_functions.lit(None).cast(BooleanType())
    )
