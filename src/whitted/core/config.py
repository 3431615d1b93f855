"""Render configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Recursion budget for reflected and refracted rays. This is the only thing
# that terminates tracing between facing mirrors.
DEFAULT_MAX_DEPTH = 5

# Bands per worker when rows_per_band is not given, for load balancing
BANDS_PER_WORKER = 4


@dataclass(frozen=True)
class RenderSettings:
    """Settings for one frame.

    Attributes:
        max_depth: Remaining recursion budget given to each primary ray.
            0 disables reflection and refraction entirely.
        workers: Number of worker processes. 1 traces in-process; None uses
            every CPU.
        rows_per_band: Rows traced per unit of work. None derives a size from
            the image height and worker count.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int | None = 1
    rows_per_band: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.rows_per_band is not None and self.rows_per_band < 1:
            raise ValueError(f"rows_per_band must be >= 1, got {self.rows_per_band}")

    @property
    def worker_count(self) -> int:
        """The resolved number of workers."""
        if self.workers is None:
            return os.cpu_count() or 1
        return self.workers

    def band_size(self, height: int) -> int:
        """Rows per band for an image of the given height."""
        if self.rows_per_band is not None:
            return self.rows_per_band
        return max(1, height // (self.worker_count * BANDS_PER_WORKER))
