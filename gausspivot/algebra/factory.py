"""Backend lookup by name."""

from gausspivot.algebra.protocols import LinearAlgebraBackend
from gausspivot.algebra.dense import DenseBackend
from gausspivot.algebra.gauss import GaussBackend

_BACKENDS = {
    "gauss": GaussBackend,
    "scipy": DenseBackend,
}


def get_backend(name: str = "gauss") -> LinearAlgebraBackend:
    """
    Create a backend.

    Args:
        name: "gauss" (this package) or "scipy" (reference)

    Returns:
        Backend instance
    """
    try:
        return _BACKENDS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown backend {name!r}; choose from {sorted(_BACKENDS)}"
        ) from None
