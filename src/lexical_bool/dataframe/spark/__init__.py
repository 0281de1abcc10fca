# src/lexical_bool/dataframe/spark/__init__.py
"""Spark boolean parsing utilities."""

from .cleaner import SparkCleaner
from .type_checkers import is_boolean
from .type_parsers import parse_boolean

__all__ = [
    "SparkCleaner",
    "is_boolean",
    "parse_boolean",
]
