"""
Exception hierarchy for pylinreg.

All exceptions inherit from PyLinRegError so callers can catch any
library-specific error with a single clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages report actual vs expected values
    - Degenerate-but-valid data is not an error (see Result.warnings)
"""


class PyLinRegError(Exception):
    """Base exception for all pylinreg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be interpreted as numeric data.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not 1-dimensional or a sample is not an
    (x, y) pair.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Predictor and response sequences differ in length.

    Attributes:
        x_length: Number of predictor values
        y_length: Number of response values
    """

    def __init__(self, message: str, x_length: int, y_length: int):
        super().__init__(message)
        self.x_length = x_length
        self.y_length = y_length


class InsufficientSamplesError(ValidationError):
    """
    Too few observations to determine a line.

    Attributes:
        required: Minimum number of observations
        actual: Number of observations supplied
    """

    def __init__(self, message: str, required: int, actual: int):
        super().__init__(message)
        self.required = required
        self.actual = actual


class NumericalError(PyLinRegError):
    """
    Numerical computation failed inside a backend.

    Zero variance in x or y is NOT reported this way; those cases
    propagate as inf/nan per IEEE 754.
    """
    pass
