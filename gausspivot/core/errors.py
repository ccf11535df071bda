"""Exceptions raised by the elimination pipeline."""

from typing import Optional


class GaussPivotError(RuntimeError):
    """Base class for solver failures."""


class SingularMatrixError(GaussPivotError):
    """Raised when a pivot column holds only zeros."""

    def __init__(self, column: Optional[int] = None):
        if column is None:
            message = "The matrix is singular"
        else:
            message = f"The matrix is singular (zero pivot in column {column})"
        super().__init__(message)
        self.column = column


class VerificationError(GaussPivotError):
    """Raised when a solution entry disagrees with its expected value."""

    def __init__(self, index: int, actual: float, expected: float):
        super().__init__(
            f"Solution mismatch at index {index}: got {actual!r}, expected {expected!r}"
        )
        self.index = index
        self.actual = actual
        self.expected = expected
