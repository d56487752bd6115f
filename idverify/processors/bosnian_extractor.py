"""
Bosnia and Herzegovina national identity card.

Cards print every label in Latin and Cyrillic (``PREZIME/SURNAME``,
``ПРЕЗИМЕ``) with values on the same or a following line, and a serial
number shaped like ``2A141A80K``.
"""

from __future__ import annotations

import re

from idverify.core.config import (
    BOSNIAN_CONFIDENCE,
    BOSNIAN_ID_MAX_LENGTH,
    BOSNIAN_ID_MIN_LENGTH,
    ID_LINE_MAX_LENGTH,
    LABEL_LOOKAHEAD_LINES,
)
from idverify.core.const import (
    BOSNIAN_COUNTRY_CODE,
    BOSNIAN_FIRST_NAME_LABEL_CONFLICTS,
    BOSNIAN_FIRST_NAME_LABELS,
    BOSNIAN_ID_BANNED_WORDS,
    BOSNIAN_ID_LABELS,
    BOSNIAN_ID_LINE_NOISE,
    BOSNIAN_ID_PATTERNS,
    BOSNIAN_ID_SHAPE,
    BOSNIAN_LAST_NAME_LABELS,
    BOSNIAN_NAME_NOISE,
    BOSNIAN_SIGNATURE_LABELS,
    BOSNIAN_STANDARD_LABELS,
)
from idverify.models.dto import DocumentProfile, ExtractionMethod, LabelSet
from idverify.processors.candidate_scanner import FieldRule, best_candidate
from idverify.processors.field_extractors import (
    FieldResult,
    ProfileExtractor,
    first_slash_part,
    is_valid_name,
    labels_for,
    normalize_name,
    register_extractor,
)
from idverify.processors.label_matcher import find_label, is_standard_label
from idverify.processors.script_normalizer import contains_token

_ID_SEPARATORS = re.compile(r"[\s\-]+")
_ALNUM_UPPER = re.compile(r"^[0-9A-Z]+$")


def normalize_bosnian_id(text: str) -> str | None:
    return _ID_SEPARATORS.sub("", text).upper() or None


def is_valid_bosnian_id(value: str) -> bool:
    """
    Serial number validity: 7-12 upper-case alphanumerics with at least one
    letter and one digit, in the digit-letter-digits-letter-digits-letter
    shape, and free of label words OCR may have glued on.
    """
    if not (BOSNIAN_ID_MIN_LENGTH <= len(value) <= BOSNIAN_ID_MAX_LENGTH):
        return False
    if not _ALNUM_UPPER.match(value):
        return False
    if not (any(ch.isalpha() for ch in value) and any(ch.isdigit() for ch in value)):
        return False
    if not BOSNIAN_ID_SHAPE.fullmatch(value):
        return False
    upper = value.upper()
    return not any(word.upper() in upper for word in BOSNIAN_ID_BANNED_WORDS)


@register_extractor
class BosnianIdExtractor(ProfileExtractor):
    profile = DocumentProfile.BOSNIAN_NATIONAL_ID
    country = BOSNIAN_COUNTRY_CODE
    confidence_table = BOSNIAN_CONFIDENCE

    def _name_rule(self, field_name: str, labels: LabelSet, conflicts: tuple[str, ...] = ()) -> FieldRule:
        return FieldRule(
            field=field_name,
            labels=labels,
            validity=is_valid_name,
            normalize=normalize_name,
            prepare=first_slash_part,
            accept_whole_line=True,
            excluded=BOSNIAN_NAME_NOISE,
            label_conflicts=conflicts,
            blind_scan=False,
        )

    def first_name_rule(self) -> FieldRule:
        return self._name_rule(
            "first_name",
            labels_for(self.options, "first_name", BOSNIAN_FIRST_NAME_LABELS),
            BOSNIAN_FIRST_NAME_LABEL_CONFLICTS,
        )

    def last_name_rule(self) -> FieldRule:
        return self._name_rule(
            "last_name", labels_for(self.options, "last_name", BOSNIAN_LAST_NAME_LABELS)
        )

    def id_number_rule(self) -> FieldRule:
        return FieldRule(
            field="id_number",
            labels=labels_for(self.options, "id_number", BOSNIAN_ID_LABELS),
            validity=is_valid_bosnian_id,
            normalize=normalize_bosnian_id,
            prepare=str.upper,
            patterns=BOSNIAN_ID_PATTERNS,
            accept_whole_line=True,
            max_line_length=ID_LINE_MAX_LENGTH,
            excluded=BOSNIAN_STANDARD_LABELS,
            blind_excluded=BOSNIAN_ID_LINE_NOISE,
            allow_glued_value=True,
        )

    def _names_from_signature(self, lines: list[str]) -> tuple[str | None, str | None]:
        """
        Last-resort name source: the signature line below ``POTPIS/SIGNATURE``,
        printed as "LastName FirstName".
        """
        signature_labels = LabelSet.from_config(BOSNIAN_SIGNATURE_LABELS)
        for index, line in enumerate(lines):
            if find_label(line, signature_labels) is None:
                continue
            for following in lines[index + 1 : index + 1 + LABEL_LOOKAHEAD_LINES]:
                if not following:
                    continue
                if is_standard_label(following) or contains_token(following, BOSNIAN_NAME_NOISE):
                    return None, None
                cleaned = normalize_name(following)
                if not cleaned or not is_valid_name(cleaned):
                    return None, None
                parts = cleaned.split(" ")
                if len(parts) < 2:
                    return None, None
                return " ".join(parts[1:]), parts[0]
            return None, None
        return None, None

    def extract_fields(self, lines: list[str]) -> dict[str, FieldResult]:
        fields: dict[str, FieldResult] = {}

        if self.options.extract_name:
            first = self.accept("first_name", best_candidate(lines, self.first_name_rule()))
            last = self.accept("last_name", best_candidate(lines, self.last_name_rule()))

            if first is None or last is None:
                sig_first, sig_last = self._names_from_signature(lines)
                weight_first = self.weight("first_name", ExtractionMethod.HEURISTIC.value)
                weight_last = self.weight("last_name", ExtractionMethod.HEURISTIC.value)
                if first is None and sig_first:
                    first = FieldResult(sig_first, ExtractionMethod.HEURISTIC, weight_first)
                if last is None and sig_last:
                    last = FieldResult(sig_last, ExtractionMethod.HEURISTIC, weight_last)

            if first is not None:
                fields["first_name"] = first
            if last is not None:
                fields["last_name"] = last

        if self.options.extract_id_number:
            id_number = self.accept("id_number", best_candidate(lines, self.id_number_rule()))
            if id_number is not None:
                fields["id_number"] = id_number

        if self.options.extract_date_of_birth:
            date_of_birth = self.extract_date_of_birth(lines)
            if date_of_birth is not None:
                fields["date_of_birth"] = date_of_birth

        return fields
