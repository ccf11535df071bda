"""Backend wrapping the pivoting elimination pipeline."""

import numpy as np
from numpy.typing import NDArray

from gausspivot.pipeline import solve


class GaussBackend:
    """Gaussian elimination with partial pivoting on a private copy of A."""

    name = "gauss"

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """Solve linear system Ax = b; raises SingularMatrixError."""
        return solve(A, b)

    def norm(self, x: NDArray) -> float:
        """Compute L2 norm."""
        return float(np.linalg.norm(x))
