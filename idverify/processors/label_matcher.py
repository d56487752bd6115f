"""
Field label detection within single OCR lines.

Matching is case-insensitive substring containment, not anchored: OCR often
prepends stray characters to a label (``"|PREZIME/SURNAME"``).
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from functools import lru_cache

from idverify.core.const import BOSNIAN_STANDARD_LABELS
from idverify.models.dto import LabelHit, LabelSet
from idverify.processors.script_normalizer import to_search_form

# Separators OCR leaves between a label and its value
_LEADING_SEPARATORS = " \t:;/|\\-–—.,"


@lru_cache(maxsize=512)
def _label_regex(label: str) -> re.Pattern[str]:
    return re.compile(re.escape(label), re.IGNORECASE)


def _starts_inside_word(line: str, start: int) -> bool:
    return 0 < start < len(line) and line[start].isalnum() and line[start - 1].isalnum()


def find_label(
    line: str, label_set: LabelSet, *, skip_inside_word: bool = False
) -> LabelHit | None:
    """
    Find a field label inside ``line``.

    When several labels occur (``"IME/GIVEN NAME"``), the one ending furthest
    right wins so the remainder holds only the value; ties go to the longest.
    With ``skip_inside_word`` a hit starting inside a longer word (``IME`` in
    ``SPECIMEN``) is not a candidate for that choice.

    Returns:
      LabelHit with the label, the offset after it and the stripped remainder,
      or None if no label occurs.
    """
    if not line:
        return None

    best: tuple[int, int, str] | None = None
    for label in label_set.all():
        for match in _label_regex(label).finditer(line):
            if skip_inside_word and _starts_inside_word(line, match.start()):
                continue
            key = (match.end(), len(label), label)
            if best is None or key[:2] > best[:2]:
                best = key

    if best is None:
        return None

    end, _, label = best
    remainder = line[end:].strip(_LEADING_SEPARATORS)
    return LabelHit(label=label, offset_after_label=end, remainder=remainder)


@lru_cache(maxsize=32)
def _standard_forms(standard_labels: tuple[str, ...]) -> frozenset[str]:
    return frozenset(to_search_form(label) for label in standard_labels)


def is_standard_label(line: str, standard_labels: tuple[str, ...] = BOSNIAN_STANDARD_LABELS) -> bool:
    """
    True if the line is nothing but printed label text, e.g. ``"PREZIME"`` or
    the bilingual ``"PREZIME/SURNAME"``.
    """
    parts = [to_search_form(part) for part in line.split("/")]
    parts = [part for part in parts if part]
    if not parts:
        return False
    known = _standard_forms(standard_labels)
    return all(part in known for part in parts)


def value_regions(
    lines: list[str],
    index: int,
    hit: LabelHit,
    lookahead: int,
    standard_labels: tuple[str, ...] = BOSNIAN_STANDARD_LABELS,
) -> Iterator[tuple[int, str]]:
    """
    Yield ``(line_distance, text)`` regions that may hold the labelled value.

    The same-line remainder comes first; then up to ``lookahead`` following
    lines, skipping blanks and lines that are nothing but printed label text
    (``"SPOL/SEX"``); those still count towards the lookahead.
    """
    if hit.remainder:
        yield 0, hit.remainder

    for distance in range(1, lookahead + 1):
        position = index + distance
        if position >= len(lines):
            return
        text = lines[position].strip()
        if not text or is_standard_label(text, standard_labels):
            continue
        yield distance, text
