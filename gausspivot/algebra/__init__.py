"""Linear algebra backend abstractions."""

from gausspivot.algebra.protocols import LinearAlgebraBackend
from gausspivot.algebra.dense import DenseBackend
from gausspivot.algebra.gauss import GaussBackend
from gausspivot.algebra.factory import get_backend

__all__ = [
    "LinearAlgebraBackend",
    "DenseBackend",
    "GaussBackend",
    "get_backend",
]
