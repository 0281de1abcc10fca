# src/lexical_bool/dataframe/__init__.py
"""DataFrame adapters for lexical boolean parsing.

Subpackages:
    - pandas: Pandas Series/DataFrame parsing
    - polars: Polars expression/Series parsing
    - spark: Spark column parsing

Each subpackage imports its own DataFrame library, so import the one you need
directly.
"""
