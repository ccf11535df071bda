"""Solution checks."""

import numpy as np
from numpy.typing import NDArray

from gausspivot.core.config import DEFAULT_ATOL
from gausspivot.core.errors import VerificationError


def verify_solution(
    x: NDArray,
    expected: NDArray,
    atol: float = DEFAULT_ATOL,
    rtol: float = 0.0,
) -> None:
    """
    Check x against expected entry by entry.

    Args:
        x: Computed solution
        expected: Reference solution, same shape
        atol: Absolute tolerance (0.0 requires exact equality)
        rtol: Relative tolerance

    Raises:
        VerificationError: At the first index outside tolerance
        ValueError: On mismatched shapes or an invalid tolerance
    """
    for name, tol in (("atol", atol), ("rtol", rtol)):
        if not np.isfinite(tol) or tol < 0:
            raise ValueError(f"{name} must be finite and non-negative, got {tol}")

    x = np.asarray(x, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)
    if x.shape != expected.shape:
        raise ValueError(f"Shape mismatch: {x.shape} vs {expected.shape}")

    bad = np.flatnonzero(np.abs(x - expected) > atol + rtol * np.abs(expected))
    # NaN compares false above
    bad = np.union1d(bad, np.flatnonzero(np.isnan(x)))
    if bad.size:
        i = int(bad[0])
        raise VerificationError(i, float(x[i]), float(expected[i]))


def residual_norm(A: NDArray, x: NDArray, b: NDArray) -> float:
    """Compute ||A x - b||_2."""
    return float(np.linalg.norm(A @ x - b))
