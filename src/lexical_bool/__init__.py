# src/lexical_bool/__init__.py
"""Parse truthy and falsey tokens into a bool-like value.

The token vocabulary is thread-local: each thread may set its truthy and
falsey tokens once, and falls back to the defaults in
:mod:`lexical_bool.constants` on its first parse otherwise.

Subpackages:
    - dataframe: pandas, polars and Spark adapters
"""

from .constants import TRUTHY_VALUES, FALSEY_VALUES, ALL_BOOLEAN_VALUES
from .exception import LexicalBoolError, InvalidInput
from .lexical_bool import LexicalBool, parse
from .vocabulary import Vocabulary, initialize_true_values, initialize_false_values, current_vocabulary

__all__ = [
    "LexicalBool",
    "parse",
    "initialize_true_values",
    "initialize_false_values",
    "current_vocabulary",
    "Vocabulary",
    "LexicalBoolError",
    "InvalidInput",
    "TRUTHY_VALUES",
    "FALSEY_VALUES",
    "ALL_BOOLEAN_VALUES",
]
