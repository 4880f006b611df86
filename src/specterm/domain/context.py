"""Run context passed explicitly to reporters."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RunContext:
    """Facts about the run fixed at start.

    Attributes:
        started_at: time.perf_counter() value at run start
        cwd: Working directory; stripped from reported file paths
        total: Number of specs planned. None = unknown.
    """

    started_at: float = field(default_factory=time.perf_counter)
    cwd: str = field(default_factory=os.getcwd)
    total: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total is not None and self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")

    def elapsed(self, now: float | None = None) -> float:
        """Seconds since start."""
        if now is None:
            now = time.perf_counter()
        return max(0.0, now - self.started_at)
