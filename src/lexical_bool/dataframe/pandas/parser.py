# src/lexical_bool/dataframe/pandas/parser.py
"""Lexical boolean parsing for Pandas values and Series."""

import pandas as pd

from ...lexical_bool import parse


class Parser:
    """Parser class with static methods for parsing lexical booleans."""

    @staticmethod
    def is_token_series(series: pd.Series) -> bool:
        """Whether a series can hold string tokens (object or string dtype)."""
        return pd.api.types.is_object_dtype(series.dtype) or isinstance(series.dtype, pd.StringDtype)

    @staticmethod
    def parse_boolean(value) -> bool | None:
        """
        Parse a boolean value from a given input.

        Args:
            value: The string token to be parsed as a boolean.

        Returns:
            The parsed boolean value, or None if the value is null.

        Raises:
            InvalidInput: If the value is not a recognized token.
            TypeError: If the value is neither null nor a string.
        """
        if pd.isnull(value):
            return None
        return parse(value).value

    @staticmethod
    def parse_series(series: pd.Series) -> pd.Series:
        """
        Parse every element of a series into a nullable boolean series.

        Args:
            series: The pandas Series of string tokens to parse.

        Returns:
            A Series with the ``boolean`` dtype; nulls stay missing.

        Raises:
            InvalidInput: On the first value that is not a recognized token.
            TypeError: If the series does not hold strings.
        """
        if not Parser.is_token_series(series):
            raise TypeError(f'{series.name} has dtype {series.dtype}, expected string tokens')
        return series.apply(Parser.parse_boolean).astype('boolean')
