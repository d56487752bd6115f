"""
Lightweight helpers for measuring per-stage timings.

Stage timers accumulate elapsed wall-clock seconds per named stage so that
the orchestrator can log a duration for classification, extraction and
matching.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict


class StageTimers:
    """
    Accumulate elapsed time per logical stage name.

    Use `timer(name)` as a context manager around stage blocks;
    each exit adds the elapsed seconds to `totals[name]`.
    """

    def __init__(self) -> None:
        self.totals: Dict[str, float] = {}

    @contextmanager
    def timer(self, name: str):
        start_time = time.perf_counter()
        try:
            yield
        finally:
            elapsed_time = time.perf_counter() - start_time
            self.totals[name] = self.totals.get(name, 0.0) + elapsed_time

    def total_ms(self) -> float:
        """Sum of all stage totals in milliseconds."""
        return round(sum(self.totals.values()) * 1000, 3)
