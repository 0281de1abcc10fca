# src/lexical_bool/dataframe/polars/__init__.py
"""Polars boolean parsing utilities."""

from .cleaner import PolarsCleaner
from .parser import PolarsParser

__all__ = [
    "PolarsCleaner",
    "PolarsParser",
]
