"""Reference dense backend using SciPy (LAPACK getrf/getrs)."""

import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from gausspivot.core.errors import SingularMatrixError


class DenseBackend:
    """SciPy implementation, used to cross-check the elimination pipeline."""

    name = "scipy"

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """Solve linear system Ax = b with scipy.linalg.solve."""
        try:
            return scipy.linalg.solve(A, b)
        except scipy.linalg.LinAlgError as exc:
            raise SingularMatrixError() from exc

    def norm(self, x: NDArray) -> float:
        """Compute L2 norm."""
        return float(np.linalg.norm(x))
