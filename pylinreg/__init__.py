"""
pylinreg: ordinary least-squares straight-line fitting for Python.

Fits y = a + b*x with a numerically stable two-pass method and reports
standard errors, residual/explained sums of squares and R-squared.

Submodules:
    regression: fit(), statistics() and their result types
    core: exceptions, validation, result envelope, compute utilities
"""

__version__ = "0.1.0"

from pylinreg import regression
from pylinreg.regression import fit, statistics
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientSamplesError,
)

__all__ = [
    "__version__",
    "regression",
    "fit",
    "statistics",
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "InsufficientSamplesError",
]
