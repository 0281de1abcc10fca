# src/lexical_bool/dataframe/spark/type_checkers.py
"""Boolean token predicates for Spark columns."""

from typing import Optional

from pyspark.sql import Column

from ...vocabulary import Vocabulary, current_vocabulary


def is_boolean(column: Column, vocabulary: Optional[Vocabulary] = None) -> Column:
    """Check if a column value is null or one of the vocabulary's tokens."""
    vocabulary = vocabulary or current_vocabulary()
    return column.isNull() | column.isin(list(vocabulary.allowed_values))
