"""Core data types: system storage, configuration, results, errors."""

from gausspivot.core.store import MatrixStore
from gausspivot.core.config import RunConfig, DEFAULT_SIZE, DEFAULT_ATOL
from gausspivot.core.result import Status, SolveReport
from gausspivot.core.errors import (
    GaussPivotError,
    SingularMatrixError,
    VerificationError,
)

__all__ = [
    "MatrixStore",
    "RunConfig",
    "DEFAULT_SIZE",
    "DEFAULT_ATOL",
    "Status",
    "SolveReport",
    "GaussPivotError",
    "SingularMatrixError",
    "VerificationError",
]
