"""Name comparison strategies - one small function per comparison mode.

Every strategy compares canonical forms, so case, script (Latin/Cyrillic)
and diacritics never matter. Empty values never match anything.
"""

from __future__ import annotations

from typing import Callable

from rapidfuzz import fuzz

from idverify.core.settings import app_settings
from idverify.models.dto import NameComparison
from idverify.processors.script_normalizer import to_canonical


def equals_canonical(a: str | None, b: str | None) -> bool:
    """Exact equality of canonical forms."""
    ca, cb = to_canonical(a), to_canonical(b)
    return bool(ca) and ca == cb


def contains_either_direction(a: str | None, b: str | None) -> bool:
    """True if either canonical form contains the other.

    Tolerates OCR capturing only part of a name, or the user typing one of
    several given names.
    """
    ca, cb = to_canonical(a), to_canonical(b)
    if not ca or not cb:
        return False
    return ca in cb or cb in ca


def fuzzy_score(a: str | None, b: str | None) -> int:
    """rapidfuzz ratio (0-100) of canonical forms."""
    ca, cb = to_canonical(a), to_canonical(b)
    if not ca or not cb:
        return 0
    return int(fuzz.ratio(ca, cb))


def fuzzy_match(a: str | None, b: str | None, threshold: int | None = None) -> bool:
    """Containment either way, else a fuzzy ratio at or above ``threshold``."""
    if contains_either_direction(a, b):
        return True
    limit = app_settings.NAME_FUZZY_THRESHOLD if threshold is None else threshold
    return fuzzy_score(a, b) >= limit


_STRATEGIES: dict[NameComparison, Callable[[str | None, str | None], bool]] = {
    NameComparison.EXACT: equals_canonical,
    NameComparison.CONTAINS_EITHER_DIRECTION: contains_either_direction,
    NameComparison.FUZZY: fuzzy_match,
}


def compare_names(
    a: str | None, b: str | None, mode: NameComparison = NameComparison.CONTAINS_EITHER_DIRECTION
) -> bool:
    return _STRATEGIES[mode](a, b)


def default_mode() -> NameComparison:
    """Comparison mode configured through ``IDVERIFY_NAME_MATCH_MODE``."""
    return app_settings.NAME_MATCH_MODE
