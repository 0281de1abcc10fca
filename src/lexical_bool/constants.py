# src/lexical_bool/constants.py
"""Built-in token lists used when a thread has not set its own vocabulary."""

# Exact, case-sensitive tokens
TRUTHY_VALUES = ('true', 't', '1', 'yes')
FALSEY_VALUES = ('false', 'f', '0', 'no')
ALL_BOOLEAN_VALUES = TRUTHY_VALUES + FALSEY_VALUES
