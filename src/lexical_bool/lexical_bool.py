# src/lexical_bool/lexical_bool.py
"""The LexicalBool value type and the string parser that produces it."""

import dataclasses

from .exception import InvalidInput
from .vocabulary import current_vocabulary


@dataclasses.dataclass(slots=True, frozen=True, eq=False)
class LexicalBool:
    """
    A bool parsed from a truthy or falsey token.

    Compares equal to plain bools and to other LexicalBool instances holding
    the same value, and can be used anywhere a bool is expected via ``bool()``.
    Tokens come from the current thread's vocabulary, see
    :func:`lexical_bool.initialize_true_values` and
    :func:`lexical_bool.initialize_false_values`.
    """
    value: bool = False

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f'LexicalBool wraps a bool, got {type(self.value).__name__}')

    @classmethod
    def from_str(cls, text: str) -> 'LexicalBool':
        return parse(text)

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other):
        if isinstance(other, LexicalBool):
            return self.value == other.value
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return str(self.value).lower()


def parse(text: str) -> LexicalBool:
    """
    Parse a string into a LexicalBool.

    Matching is exact: no trimming or case folding. The truthy set is checked
    before the falsey set. Any set not yet fixed in this thread is fixed to
    its defaults.

    Args:
        text: The token to parse.

    Returns:
        LexicalBool(True) or LexicalBool(False).

    Raises:
        InvalidInput: If the token is in neither set.
        TypeError: If the input is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f'expected a string, got {type(text).__name__}: {text!r}')
    vocabulary = current_vocabulary()
    value = vocabulary.lookup(text)
    if value is None:
        raise InvalidInput(text, vocabulary.allowed_values)
    return LexicalBool(value)
