"""
Overall extraction confidence.
"""

from __future__ import annotations

from collections.abc import Iterable


def aggregate(confidences: Iterable[float | None]) -> float:
    """
    Arithmetic mean of the confidences actually recorded.

    Fields never attempted (None) do not count towards the denominator.
    Returns 0.0 when nothing was recorded.
    """
    recorded = [float(score) for score in confidences if score is not None]
    if not recorded:
        return 0.0
    return sum(recorded) / len(recorded)
