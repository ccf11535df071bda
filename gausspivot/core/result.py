"""Outcome of a timed solve."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
from numpy.typing import NDArray


class Status(Enum):
    """How a run ended."""
    SOLVED = auto()     # Solution found and verified
    SINGULAR = auto()   # Zero pivot column, no solution
    MISMATCH = auto()   # Solution disagrees with the closed form


@dataclass
class SolveReport:
    """Result of one pipeline run, success or failure."""

    size: int
    status: Status
    elapsed: float                      # seconds spent in the timed region
    solution: Optional[NDArray] = None  # None when SINGULAR
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is Status.SOLVED
