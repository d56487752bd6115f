"""
Ranked candidate search for a single identity field.

Two phases:
  A. label-adjacent: every line carrying one of the field's labels is
     followed to its value (same line, then the next 1-2 lines);
     hits get priority 1.
  B. blind scan: only when phase A found nothing, every line not carrying a
     noise token is tested against the field's patterns; hits get priority 2.

Every candidate must pass the field's validity predicate before it is
returned; rejected candidates are logged at DEBUG and scanning continues.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Pattern

from idverify.core.config import LABEL_LOOKAHEAD_LINES
from idverify.core.const import BOSNIAN_STANDARD_LABELS
from idverify.core.errors import ErrorCode
from idverify.models.dto import ExtractionMethod, FieldCandidate, LabelHit, LabelSet
from idverify.processors.label_matcher import find_label, is_standard_label, value_regions
from idverify.processors.script_normalizer import contains_token

logger = logging.getLogger(__name__)

_WS = re.compile(r"\s+")


def _strip(value: str) -> str | None:
    return value.strip() or None


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True)
class FieldRule:
    """
    Everything the scanner needs to know about one field of one profile.

    Attributes:
      field: Field name, used for logging and confidence lookup.
      labels: Labels naming the field.
      validity: Final acceptance predicate applied to the normalized value.
      normalize: Turns matched text into the field value (None rejects).
      prepare: Applied to a value region before pattern matching.
      patterns: Shape patterns searched inside a region.
      accept_whole_line: Accept a whole label-adjacent region when no
        pattern matches.
      max_line_length: Longest region accepted as a whole line.
      excluded: Noise tokens; a region carrying one is rejected.
      blind_excluded: Noise tokens for the blind scan (defaults to ``excluded``).
      label_conflicts: A label line carrying one of these is ignored
        (``IME`` inside ``PREZIME``).
      standard_labels: Printed labels that are never values.
      lookahead: How many lines past the label to inspect.
      allow_glued_value: Accept a same-line value glued to the label
        without a separator (``BROJ2A141A80K``).
      blind_scan: Whether phase B runs for this field.
    """

    field: str
    labels: LabelSet
    validity: Callable[[str], bool]
    normalize: Callable[[str], str | None] = _strip
    prepare: Callable[[str], str] = _identity
    patterns: tuple[Pattern[str], ...] = ()
    accept_whole_line: bool = False
    max_line_length: int | None = None
    excluded: tuple[str, ...] = ()
    blind_excluded: tuple[str, ...] | None = None
    label_conflicts: tuple[str, ...] = ()
    standard_labels: tuple[str, ...] = BOSNIAN_STANDARD_LABELS
    lookahead: int = LABEL_LOOKAHEAD_LINES
    allow_glued_value: bool = False
    blind_scan: bool = True


def split_lines(raw_text: str) -> list[str]:
    return [line.strip() for line in raw_text.splitlines()]


def _compact_len(text: str) -> int:
    return len(_WS.sub("", text))


def _ratio(value: str, region: str) -> float:
    region_len = _compact_len(region)
    if region_len == 0:
        return 0.0
    return min(1.0, _compact_len(value) / region_len)


def _accept(value: str | None, rule: FieldRule, method: ExtractionMethod) -> bool:
    if value and rule.validity(value):
        return True
    logger.debug(
        "Candidate rejected by validity check",
        extra={
            "field": rule.field,
            "method": method.value,
            "error_code": ErrorCode.INVALID_CANDIDATE.value.code,
        },
    )
    return False


def evaluate_region(
    region: str, rule: FieldRule, *, label_adjacent: bool
) -> tuple[str, ExtractionMethod, float] | None:
    """
    Try to read a valid value from one region of text.

    Returns:
      ``(value, method, match_ratio)`` or None.
    """
    text = rule.prepare(region).strip()
    if not text:
        return None

    pattern_method = (
        ExtractionMethod.LABEL_PATTERN if label_adjacent else ExtractionMethod.BLIND_PATTERN
    )
    for pattern in rule.patterns:
        for match in pattern.finditer(text):
            value = rule.normalize(match.group(0))
            if _accept(value, rule, pattern_method):
                return value, pattern_method, _ratio(match.group(0), text)

    if label_adjacent and rule.accept_whole_line:
        if rule.max_line_length is not None and len(text) > rule.max_line_length:
            return None
        value = rule.normalize(text)
        if _accept(value, rule, ExtractionMethod.LABEL_LINE):
            return value, ExtractionMethod.LABEL_LINE, _ratio(value, text)
    return None


def _is_glued(line: str, offset: int) -> bool:
    return 0 < offset < len(line) and line[offset].isalnum() and line[offset - 1].isalnum()


def _find_label(line: str, rule: FieldRule) -> LabelHit | None:
    return find_label(line, rule.labels, skip_inside_word=not rule.allow_glued_value)


def _label_adjacent(lines: list[str], rule: FieldRule) -> list[FieldCandidate]:
    candidates: list[FieldCandidate] = []
    for index, line in enumerate(lines):
        hit = _find_label(line, rule)
        if hit is None:
            continue
        if rule.label_conflicts and contains_token(line, rule.label_conflicts):
            continue

        for distance, region in value_regions(
            lines, index, hit, rule.lookahead, rule.standard_labels
        ):
            if distance == 0:
                if not rule.allow_glued_value and _is_glued(line, hit.offset_after_label):
                    continue
                if is_standard_label(region, rule.standard_labels):
                    continue
            elif _find_label(region, rule) is not None:
                # Another label of this field; that line is scanned on its own
                continue
            if rule.excluded and contains_token(region, rule.excluded):
                continue
            found = evaluate_region(region, rule, label_adjacent=True)
            if found is None:
                continue
            value, method, ratio = found
            candidates.append(
                FieldCandidate(
                    value=value,
                    priority=1,
                    match_ratio=ratio,
                    method=method,
                    line_index=index + distance,
                    line_distance=distance,
                )
            )
            break
    return candidates


def _blind(lines: list[str], rule: FieldRule) -> list[FieldCandidate]:
    noise = rule.excluded if rule.blind_excluded is None else rule.blind_excluded
    candidates: list[FieldCandidate] = []
    for index, line in enumerate(lines):
        if not line or (noise and contains_token(line, noise)):
            continue
        found = evaluate_region(line, rule, label_adjacent=False)
        if found is None:
            continue
        value, method, ratio = found
        candidates.append(
            FieldCandidate(
                value=value, priority=2, match_ratio=ratio, method=method, line_index=index
            )
        )
    return candidates


def rank_candidates(candidates: list[FieldCandidate]) -> list[FieldCandidate]:
    """Ascending priority, then descending match ratio; stable on line order."""
    return sorted(candidates, key=lambda c: (c.priority, -c.match_ratio))


def scan(lines: list[str], rule: FieldRule) -> list[FieldCandidate]:
    """
    Produce the ranked, already-validated candidates for ``rule.field``.
    """
    candidates = _label_adjacent(lines, rule)
    if not candidates and rule.blind_scan and rule.patterns:
        candidates = _blind(lines, rule)
    if not candidates:
        logger.debug(
            "No candidate found",
            extra={"field": rule.field, "error_code": ErrorCode.FIELD_NOT_FOUND.value.code},
        )
    return rank_candidates(candidates)


def best_candidate(lines: list[str], rule: FieldRule) -> FieldCandidate | None:
    ranked = scan(lines, rule)
    return ranked[0] if ranked else None
