"""Back-substitution on a unit upper-triangular system."""

import numpy as np
from numpy.typing import NDArray

from gausspivot.core.store import MatrixStore


def back_substitute(store: MatrixStore) -> NDArray:
    """
    Solve U x = b where U is unit upper triangular.

    x[n-1] = b[n-1]; each earlier x[row] starts at b[row] and has
    U[row, col] * x[col] subtracted one column at a time, from col = n-1
    down to row+1. The store is only read.

    Args:
        store: System after elimination

    Returns:
        Solution x (n,)
    """
    n = store.size
    x = np.empty(n)
    x[n - 1] = store.rhs[n - 1]

    for row in range(n - 2, -1, -1):
        coeffs = store.row(row)
        value = store.rhs[row]
        for col in range(n - 1, row, -1):
            value -= coeffs[col] * x[col]
        x[row] = value

    return x
