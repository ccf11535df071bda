"""Pipeline stages: pivoting, elimination, back-substitution."""

from gausspivot.solvers.pivot import select_pivot, normalize_row
from gausspivot.solvers.elimination import eliminate
from gausspivot.solvers.backsub import back_substitute

__all__ = [
    "select_pivot",
    "normalize_row",
    "eliminate",
    "back_substitute",
]
