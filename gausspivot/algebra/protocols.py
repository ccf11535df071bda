"""Linear system backend protocol."""

from typing import Protocol
from numpy.typing import NDArray


class LinearAlgebraBackend(Protocol):
    """
    Protocol for dense linear solves.
    Allows swapping the elimination pipeline for a reference library.
    """

    name: str

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """
        Solve linear system Ax = b.

        Args:
            A: Square system matrix (not modified)
            b: Right-hand side

        Returns:
            Solution x
        """
        ...

    def norm(self, x: NDArray) -> float:
        """
        Compute vector norm.

        Args:
            x: Vector

        Returns:
            Norm value
        """
        ...
