# src/lexical_bool/dataframe/pandas/__init__.py
"""Pandas boolean parsing utilities."""

from .parser import Parser
from .cleaner import Cleaner

__all__ = [
    "Parser",
    "Cleaner",
]
