"""
Error message templates for pylinreg.

This module is the SINGLE SOURCE OF TRUTH for user-facing error text.
Templates use str.format positional fields; callers supply the values.

Usage:
    from pylinreg.core.messages import SAMPLE_VECTORS_SAME_LENGTH

    raise LengthMismatchError(
        SAMPLE_VECTORS_SAME_LENGTH.format(len(x), len(y)),
        x_length=len(x), y_length=len(y),
    )
"""

# {0}: length of x, {1}: length of y
SAMPLE_VECTORS_SAME_LENGTH = (
    "The sample vectors must have the same length "
    "(x has {0} values, y has {1})."
)

# {0}: required minimum, {1}: actual number of samples
REGRESSION_NOT_ENOUGH_SAMPLES = (
    "Not enough samples for regression: at least {0} required, got {1}."
)

# {0}: parameter name, {1}: index, {2}: offending item
SAMPLE_NOT_A_PAIR = "{0}[{1}]: expected an (x, y) pair, got {2!r}."

__all__ = [
    'SAMPLE_VECTORS_SAME_LENGTH',
    'REGRESSION_NOT_ENOUGH_SAMPLES',
    'SAMPLE_NOT_A_PAIR',
]
