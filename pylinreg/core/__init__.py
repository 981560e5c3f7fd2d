"""
Core infrastructure for pylinreg.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    pairs: Single-pass unzip of (x, y) samples
    messages: Error message templates
    compute: Device detection, timing, tolerance tiers
"""

from pylinreg.core.protocols import Backend
from pylinreg.core.result import Result
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientSamplesError,
    NumericalError,
)

__all__ = [
    "Backend",
    "Result",
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "InsufficientSamplesError",
    "NumericalError",
]
