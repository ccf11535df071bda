"""
Gausspivot: dense Gaussian elimination with partial pivoting.

Solves square double-precision systems A x = b by:
- Partial pivoting (largest magnitude in the column, swapped into place)
- Forward elimination to unit upper-triangular form
- Back-substitution from the last unknown upward

and benchmarks the pipeline on a system with a closed-form solution.
"""

__version__ = "0.1.0"

import logging

from gausspivot.core.store import MatrixStore
from gausspivot.core.config import RunConfig
from gausspivot.core.result import Status, SolveReport
from gausspivot.core.errors import (
    GaussPivotError,
    SingularMatrixError,
    VerificationError,
)
from gausspivot.pipeline import run, solve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MatrixStore",
    "RunConfig",
    "Status",
    "SolveReport",
    "GaussPivotError",
    "SingularMatrixError",
    "VerificationError",
    "run",
    "solve",
]
