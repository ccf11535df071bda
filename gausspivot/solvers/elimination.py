"""Forward elimination to unit upper-triangular form."""

import logging
import numpy as np

from gausspivot.core.store import MatrixStore
from gausspivot.solvers.pivot import select_pivot

logger = logging.getLogger(__name__)


def eliminate(store: MatrixStore) -> int:
    """
    Reduce the system to unit upper-triangular form in place.

    For k = 0, ..., n-1:
        1. Pivot on column k (swap + normalize)
        2. For every row j > k: f = A[j, k]; A[j, k] = 0;
           A[j, k+1:] -= f * A[k, k+1:]; b[j] -= f * b[k]

    Step 2 is applied to all rows below the pivot at once. Entries below
    the diagonal end up exactly 0.0 and the diagonal exactly 1.0.

    Args:
        store: System to reduce

    Returns:
        Number of row swaps performed

    Raises:
        SingularMatrixError: If a zero pivot column is met
    """
    n = store.size
    data = store.buffer
    swaps = 0

    for k in range(n):
        if select_pivot(store, k) != k:
            swaps += 1

        below = store.rows(k + 1)
        if below.size == 0:
            break

        pivot = store.row(k)
        factors = data[below, k]
        data[below, k] = 0.0
        data[below, k + 1:] -= np.outer(factors, pivot[k + 1:])
        store.rhs[k + 1:] -= factors * store.rhs[k]

    logger.debug("Eliminated n=%d system with %d row swaps", n, swaps)
    return swaps
