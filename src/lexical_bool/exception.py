# src/lexical_bool/exception.py
"""Exceptions raised while parsing lexical booleans."""


class LexicalBoolError(ValueError):
    pass


class InvalidInput(LexicalBoolError):
    """Raised when a string is in neither the truthy nor the falsey token set."""

    def __init__(self, value: str, allowed_values=()):
        self.input = value
        self.allowed_values = tuple(allowed_values)
        message = f'not a boolean: {value!r}'
        if self.allowed_values:
            allowed_string = ', '.join(f"'{token}'" for token in self.allowed_values)
            message = f'{message}. only {allowed_string} are allowed'
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, InvalidInput):
            return NotImplemented
        return self.input == other.input

    def __hash__(self):
        return hash((InvalidInput, self.input))

    def __reduce__(self):
        return self.__class__, (self.input, self.allowed_values)
