"""Row-addressable storage for a dense square system."""

from typing import Optional
import numpy as np
from numpy.typing import NDArray, ArrayLike


class MatrixStore:
    """
    Coefficient matrix and right-hand side of one system A x = b.

    Entries live in a single contiguous (n, n) buffer. Logical rows are
    reached through a row map, so exchanging two rows swaps two integers
    instead of copying row data. The right-hand side is kept in logical
    order and swapped alongside the rows.
    """

    def __init__(self, A: ArrayLike, b: ArrayLike):
        """
        Copy a system into a new store.

        Args:
            A: Square coefficient matrix (n, n)
            b: Right-hand side (n,)

        Raises:
            ValueError: If A is not square, b does not match, or n < 1
        """
        data = np.array(A, dtype=np.float64)
        rhs = np.array(b, dtype=np.float64).reshape(-1)

        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        if data.shape[0] < 1:
            raise ValueError("Matrix must have at least one row")
        if rhs.shape[0] != data.shape[0]:
            raise ValueError(
                f"Right-hand side has {rhs.shape[0]} entries, expected {data.shape[0]}"
            )

        self._data = data
        self._order = np.arange(data.shape[0])
        self.rhs = rhs

    @classmethod
    def zeros(cls, n: int) -> "MatrixStore":
        """Allocate a zero-filled store of dimension n."""
        if n < 1:
            raise ValueError(f"Dimension must be positive, got {n}")
        return cls(np.zeros((n, n)), np.zeros(n))

    @property
    def size(self) -> int:
        """Dimension n of the system."""
        return self._data.shape[0]

    @property
    def order(self) -> NDArray:
        """Buffer row holding each logical row (read-only copy)."""
        return self._order.copy()

    def row(self, i: int) -> NDArray:
        """Writable view of logical row i."""
        return self._data[self._order[i]]

    def rows(self, start: int, stop: Optional[int] = None) -> NDArray:
        """Buffer indices of logical rows start..stop-1 (copy)."""
        return self._order[start:stop].copy()

    @property
    def buffer(self) -> NDArray:
        """Underlying (n, n) buffer in storage order."""
        return self._data

    def swap_rows(self, i: int, j: int) -> None:
        """Exchange logical rows i and j together with their RHS entries."""
        if i == j:
            return
        self._order[i], self._order[j] = self._order[j], self._order[i]
        self.rhs[i], self.rhs[j] = self.rhs[j], self.rhs[i]

    def matrix(self) -> NDArray:
        """Dense copy of the coefficients in logical row order."""
        return self._data[self._order]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return float(self._data[self._order[i], j])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[self._order[i], j] = value

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"MatrixStore(n={self.size})"
