"""Partial pivoting: choose, swap and normalize the pivot row."""

import logging
import numpy as np

from gausspivot.core.store import MatrixStore
from gausspivot.core.errors import SingularMatrixError

logger = logging.getLogger(__name__)


def select_pivot(store: MatrixStore, k: int) -> int:
    """
    Bring the largest-magnitude entry of column k (rows k..n-1) onto the
    diagonal and scale row k so that A[k, k] == 1.0.

    Ties go to the first (lowest) row. The diagonal is assigned 1.0 directly
    rather than divided, so it is exact.

    Args:
        store: System being eliminated, modified in place
        k: Current elimination step, 0 <= k < n

    Returns:
        Logical row the pivot was taken from (k if no swap was needed)

    Raises:
        SingularMatrixError: If every candidate entry is exactly zero
    """
    n = store.size
    if not 0 <= k < n:
        raise IndexError(f"Pivot step {k} out of range for n={n}")

    column = np.abs(store.buffer[store.rows(k), k])
    offset = int(np.argmax(column))
    if column[offset] == 0.0:
        logger.warning("Zero pivot column at step %d", k)
        raise SingularMatrixError(k)

    pivot_row = k + offset
    if pivot_row != k:
        logger.debug("Step %d: swapping rows %d and %d", k, k, pivot_row)
        store.swap_rows(k, pivot_row)

    normalize_row(store, k)
    return pivot_row


def normalize_row(store: MatrixStore, k: int) -> None:
    """Divide row k (columns > k) and b[k] by A[k, k], then set A[k, k] = 1.0."""
    row = store.row(k)
    pivot = row[k]
    if pivot == 1.0:
        return
    row[k + 1:] /= pivot
    store.rhs[k] /= pivot
    row[k] = 1.0
