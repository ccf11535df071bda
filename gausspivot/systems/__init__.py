"""Library of test systems."""

from gausspivot.systems.library import (
    doubling_system,
    doubling_solution,
    initialize,
    random_system,
    singular_system,
)

__all__ = [
    "doubling_system",
    "doubling_solution",
    "initialize",
    "random_system",
    "singular_system",
]
