"""Run configuration."""

from dataclasses import dataclass
import numpy as np

DEFAULT_SIZE = 1024
DEFAULT_ATOL = 1e-9


@dataclass(frozen=True)
class RunConfig:
    """Settings for one benchmark run of the elimination pipeline."""

    size: int = DEFAULT_SIZE
    atol: float = DEFAULT_ATOL  # 0.0 demands exact agreement
    verify: bool = True

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"size must be positive, got {self.size}")
        if not np.isfinite(self.atol) or self.atol < 0:
            raise ValueError(f"atol must be finite and non-negative, got {self.atol}")
