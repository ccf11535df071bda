"""Test systems with known solutions."""

from typing import Optional
import numpy as np
from numpy.typing import NDArray

from gausspivot.core.store import MatrixStore


def doubling_system(n: int) -> tuple[NDArray, NDArray]:
    """
    Benchmark system A[i, j] = 2 (min(i, j) + 1), b[i] = i.

    For n = 3:
        A = [[2, 2, 2], [2, 4, 4], [2, 4, 6]], b = [0, 1, 2]

    Returns:
        (A, b) as float64 arrays
    """
    if n < 1:
        raise ValueError(f"Dimension must be positive, got {n}")
    idx = np.arange(n)
    A = 2.0 * (np.minimum.outer(idx, idx) + 1)
    b = idx.astype(np.float64)
    return A, b


def doubling_solution(n: int) -> NDArray:
    """
    Closed-form solution of doubling_system(n).

    x[0] = -0.5, x[n-1] = 0.5 and zero elsewhere. For n = 1 the system is
    2 x = 0, so the single entry is 0.0.
    """
    if n < 1:
        raise ValueError(f"Dimension must be positive, got {n}")
    x = np.zeros(n)
    if n >= 2:
        x[0] = -0.5
        x[-1] = 0.5
    return x


def initialize(store: MatrixStore) -> None:
    """Fill an allocated store with doubling_system(store.size)."""
    A, b = doubling_system(store.size)
    store.buffer[store.rows(0)] = A
    store.rhs[:] = b


def random_system(
    n: int, seed: Optional[int] = None
) -> tuple[NDArray, NDArray, NDArray]:
    """
    Diagonally dominant random system with a known solution.

    Returns:
        (A, b, x) with A @ x = b
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(-1.0, 1.0, (n, n))
    A += n * np.eye(n)
    x = rng.uniform(-1.0, 1.0, n)
    return A, A @ x, x


def singular_system(n: int) -> tuple[NDArray, NDArray]:
    """Rank-deficient system: last row repeats the first."""
    if n < 2:
        raise ValueError(f"Need n >= 2 for a singular system, got {n}")
    A, b = doubling_system(n)
    A[-1] = A[0]
    b[-1] = b[0]
    return A, b
