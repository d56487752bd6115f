"""
Fallback profile for documents no country signature recognises.

Only a full name, an ID-looking token and a date of birth are attempted, and
weights are lower than for a known layout.
"""

from __future__ import annotations

import re
from dataclasses import replace

from idverify.core.config import (
    GENERIC_CONFIDENCE,
    GENERIC_ID_MIN_LENGTH,
    HEURISTIC_NAME_MAX_WORDS,
    HEURISTIC_NAME_MIN_WORDS,
    ID_LINE_MAX_LENGTH,
)
from idverify.core.const import (
    DATE_OF_BIRTH_LABELS,
    GENERIC_ID_LABELS,
    GENERIC_ID_PATTERN,
    GENERIC_NAME_LABELS,
    GENERIC_NAME_NOISE,
)
from idverify.models.dto import DocumentProfile, ExtractionMethod
from idverify.processors.candidate_scanner import FieldRule, best_candidate
from idverify.processors.field_extractors import (
    FieldResult,
    ProfileExtractor,
    is_valid_name,
    labels_for,
    normalize_name,
    register_extractor,
)
from idverify.processors.script_normalizer import contains_token

GENERIC_STANDARD_LABELS: tuple[str, ...] = tuple(
    label
    for table in (GENERIC_NAME_LABELS, GENERIC_ID_LABELS, DATE_OF_BIRTH_LABELS)
    for labels in table.values()
    for label in labels
)

_ID_SEPARATORS = re.compile(r"[\s\-]+")
_CAPITALIZED_WORD = re.compile(r"^[^\W\d_][^\W\d_'\-]*$")


def normalize_generic_id(text: str) -> str | None:
    return _ID_SEPARATORS.sub("", text).upper() or None


def is_valid_generic_id(value: str) -> bool:
    return (
        len(value) >= GENERIC_ID_MIN_LENGTH
        and value.isalnum()
        and any(ch.isalpha() for ch in value)
        and any(ch.isdigit() for ch in value)
    )


def looks_like_name_line(line: str) -> bool:
    """2-4 alphabetic words, each starting with a capital, and no noise token."""
    words = line.split()
    if not (HEURISTIC_NAME_MIN_WORDS <= len(words) <= HEURISTIC_NAME_MAX_WORDS):
        return False
    if not all(_CAPITALIZED_WORD.match(word) and word[0].isupper() for word in words):
        return False
    return not contains_token(line, GENERIC_NAME_NOISE)


@register_extractor
class GenericExtractor(ProfileExtractor):
    profile = DocumentProfile.GENERIC
    country = ""
    confidence_table = GENERIC_CONFIDENCE

    def full_name_rule(self) -> FieldRule:
        return FieldRule(
            field="full_name",
            labels=labels_for(self.options, "name", GENERIC_NAME_LABELS),
            validity=is_valid_name,
            normalize=normalize_name,
            accept_whole_line=True,
            excluded=GENERIC_NAME_NOISE,
            standard_labels=GENERIC_STANDARD_LABELS,
            blind_scan=False,
        )

    def id_number_rule(self) -> FieldRule:
        return FieldRule(
            field="id_number",
            labels=labels_for(self.options, "id_number", GENERIC_ID_LABELS),
            validity=is_valid_generic_id,
            normalize=normalize_generic_id,
            prepare=str.upper,
            patterns=(GENERIC_ID_PATTERN,),
            accept_whole_line=True,
            max_line_length=ID_LINE_MAX_LENGTH,
            standard_labels=GENERIC_STANDARD_LABELS,
            allow_glued_value=True,
        )

    def date_of_birth_rule(self) -> FieldRule:
        return replace(super().date_of_birth_rule(), standard_labels=GENERIC_STANDARD_LABELS)

    def _name_from_layout(self, lines: list[str]) -> FieldResult | None:
        for line in lines:
            if not line or not looks_like_name_line(line):
                continue
            value = normalize_name(line)
            if value and is_valid_name(value):
                return FieldResult(
                    value,
                    ExtractionMethod.HEURISTIC,
                    self.weight("full_name", ExtractionMethod.HEURISTIC.value),
                )
        return None

    def extract_fields(self, lines: list[str]) -> dict[str, FieldResult]:
        fields: dict[str, FieldResult] = {}

        if self.options.extract_name:
            candidate = best_candidate(lines, self.full_name_rule())
            if candidate is not None:
                key = "label_line" if candidate.line_distance == 0 else "label_line_below"
                full_name = self.accept("full_name", candidate, key)
            else:
                full_name = self._name_from_layout(lines)
            if full_name is not None:
                fields["full_name"] = full_name

        if self.options.extract_id_number:
            id_number = self.accept("id_number", best_candidate(lines, self.id_number_rule()))
            if id_number is not None:
                fields["id_number"] = id_number

        if self.options.extract_date_of_birth:
            date_of_birth = self.extract_date_of_birth(lines)
            if date_of_birth is not None:
                fields["date_of_birth"] = date_of_birth

        return fields
