# src/lexical_bool/dataframe/polars/parser.py
from typing import Optional

import polars as pl

from ...lexical_bool import parse
from ...vocabulary import Vocabulary, current_vocabulary


class PolarsParser:
    """
    Parser class with static methods for parsing lexical booleans in Polars.

    Expressions capture the calling thread's vocabulary when they are built,
    since Polars may evaluate them on its own worker threads.
    """

    @staticmethod
    def parse_boolean_expr(column: str, vocabulary: Optional[Vocabulary] = None) -> pl.Expr:
        """
        Create a Polars expression for parsing boolean tokens.
        Unrecognized tokens and nulls evaluate to null.
        """
        vocabulary = vocabulary or current_vocabulary()
        value = pl.col(column)
        return (
            pl.when(value.is_in(list(vocabulary.truthy))).then(pl.lit(True))
            .when(value.is_in(list(vocabulary.falsey))).then(pl.lit(False))
            .otherwise(pl.lit(None, dtype=pl.Boolean))
            .alias(column)
        )

    @staticmethod
    def is_boolean_expr(column: str, vocabulary: Optional[Vocabulary] = None) -> pl.Expr:
        """Expression that is true where the column is null or a recognized token."""
        vocabulary = vocabulary or current_vocabulary()
        value = pl.col(column)
        return value.is_null() | value.is_in(list(vocabulary.allowed_values))

    @staticmethod
    def parse_series(series: pl.Series) -> pl.Series:
        """
        Parse a Polars string series into a Boolean series, raising on the
        first unrecognized value. Non-string series raise TypeError.
        """
        if series.dtype != pl.Utf8:
            raise TypeError(f'{series.name} has dtype {series.dtype}, expected string tokens')
        values = [None if value is None else parse(value).value for value in series.to_list()]
        return pl.Series(series.name, values, dtype=pl.Boolean)
