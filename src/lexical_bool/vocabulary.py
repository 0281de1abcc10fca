# src/lexical_bool/vocabulary.py
"""
Thread-scoped truthy/falsey vocabulary.

Each thread owns two token slots. A slot starts unset and is fixed exactly
once, either by an explicit ``initialize_*_values`` call or, on the first
parse, by the built-in defaults from :mod:`lexical_bool.constants`. A fixed
slot never changes for the rest of the thread's life.
"""

import dataclasses
import logging
import threading
from typing import Iterable

from .constants import TRUTHY_VALUES, FALSEY_VALUES

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True, frozen=True)
class Vocabulary:
    """Snapshot of the token sets fixed for one thread."""
    truthy: tuple[str, ...] = TRUTHY_VALUES
    falsey: tuple[str, ...] = FALSEY_VALUES

    @property
    def allowed_values(self) -> tuple[str, ...]:
        return self.truthy + self.falsey

    def lookup(self, token: str) -> bool | None:
        """
        Look a token up, truthy set first.

        Args:
            token: The exact string to look up.

        Returns:
            True or False when the token is recognized, otherwise None.
        """
        if token in self.truthy:
            return True
        if token in self.falsey:
            return False
        return None


class _TokenSlot:
    """Unset until fixed; the only transition is unset -> fixed."""

    __slots__ = ('name', 'tokens')

    def __init__(self, name: str):
        self.name = name
        self.tokens: tuple[str, ...] | None = None

    @property
    def is_fixed(self) -> bool:
        return self.tokens is not None

    def fix(self, tokens: tuple[str, ...]) -> bool:
        if self.is_fixed:
            return False
        self.tokens = tokens
        return True

    def get_or_fix(self, defaults: tuple[str, ...]) -> tuple[str, ...]:
        if self.fix(defaults):
            logger.debug(f'{self.name} values defaulted to {defaults} in {threading.current_thread().name}')
        return self.tokens


class _VocabularyState(threading.local):
    # threading.local runs __init__ once per thread on first access
    def __init__(self):
        self.truthy = _TokenSlot('truthy')
        self.falsey = _TokenSlot('falsey')


_state = _VocabularyState()


def _normalize_tokens(tokens: Iterable[str]) -> tuple[str, ...]:
    if isinstance(tokens, (str, bytes)):
        raise TypeError(f'expected an iterable of tokens, got a single {type(tokens).__name__}: {tokens!r}')
    return tuple(dict.fromkeys(str(token) for token in tokens))


def _initialize(slot: _TokenSlot, tokens: Iterable[str]) -> bool:
    tokens = _normalize_tokens(tokens)
    if slot.fix(tokens):
        logger.debug(f'{slot.name} values set to {tokens} in {threading.current_thread().name}')
        return True
    logger.debug(f'{slot.name} values already fixed to {slot.tokens}, ignoring {tokens}')
    return False


def initialize_true_values(tokens: Iterable[str]) -> bool:
    """
    Set the truthy tokens for the current thread.

    The truthy set can be set once per thread. If a parse already ran in this
    thread without it being set, it was fixed to the defaults at that point.

    Args:
        tokens: The strings that should parse as True.

    Returns:
        True if this call set the tokens, False if they were already fixed.
    """
    return _initialize(_state.truthy, tokens)


def initialize_false_values(tokens: Iterable[str]) -> bool:
    """
    Set the falsey tokens for the current thread.

    Args:
        tokens: The strings that should parse as False.

    Returns:
        True if this call set the tokens, False if they were already fixed.
    """
    return _initialize(_state.falsey, tokens)


def current_vocabulary() -> Vocabulary:
    """Return the current thread's vocabulary, fixing unset sets to their defaults."""
    return Vocabulary(
        truthy=_state.truthy.get_or_fix(TRUTHY_VALUES),
        falsey=_state.falsey.get_or_fix(FALSEY_VALUES),
    )
