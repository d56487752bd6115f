"""
Per-profile field extraction strategies.

Each ``DocumentProfile`` has one ``ProfileExtractor`` subclass registered
with ``@register_extractor``; new countries are added by registering a new
class, never by editing a conditional chain. ``GENERIC`` is the default.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from idverify.core.config import NAME_MIN_LETTERS
from idverify.core.const import (
    DATE_OF_BIRTH_LABELS,
    DATE_OF_BIRTH_PATTERNS,
    SPECIMEN_MARKERS,
)
from idverify.models.dto import (
    DocumentProfile,
    ExtractedIdentity,
    ExtractionMethod,
    ExtractionOptions,
    FieldCandidate,
    LabelSet,
)
from idverify.processors.candidate_scanner import FieldRule, best_candidate
from idverify.processors.confidence import aggregate
from idverify.utils.dates import is_birth_date

logger = logging.getLogger(__name__)

_SPECIMEN = re.compile("|".join(re.escape(m) for m in SPECIMEN_MARKERS), re.IGNORECASE)
_DIGITS_AND_SLASHES = re.compile(r"[0-9/\\]")
_WS = re.compile(r"\s+")
_NAME_CHARS = re.compile(r"^[^\W\d_]+(?:[ '\-.][^\W\d_]+)*$")
_EDGE_PUNCTUATION = " .,:;-_'|"


@dataclass(frozen=True)
class FieldResult:
    """Accepted value of one field and the confidence its method earned."""

    value: str
    method: ExtractionMethod
    confidence: float


def _title_word(word: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in word.split("-"))


def clean_name(name: str | None) -> str | None:
    """
    Strip sample-card watermarks, digits and slashes, collapse whitespace
    and title-case each word.
    """
    if not name:
        return None
    cleaned = _SPECIMEN.sub(" ", name)
    cleaned = _DIGITS_AND_SLASHES.sub("", cleaned)
    cleaned = _WS.sub(" ", cleaned).strip(_EDGE_PUNCTUATION)
    if not cleaned:
        return None
    return " ".join(_title_word(word) for word in cleaned.split(" "))


def normalize_name(text: str) -> str | None:
    """``clean_name`` for a value region; regions that are mostly digits are not names."""
    digits = sum(1 for ch in text if ch.isdigit())
    letters = sum(1 for ch in text if ch.isalpha())
    if digits and digits >= letters:
        return None
    return clean_name(text)


def is_valid_name(value: str) -> bool:
    letters = sum(1 for ch in value if ch.isalpha())
    return letters >= NAME_MIN_LETTERS and bool(_NAME_CHARS.match(value))


def first_slash_part(text: str) -> str:
    """Keep the Latin half of a bilingual value line (``EDHEM / ЕДХЕМ``)."""
    for part in text.split("/"):
        if part.strip():
            return part
    return ""


def labels_for(options: ExtractionOptions, field_name: str, default: dict[str, tuple[str, ...]]) -> LabelSet:
    override = options.label_override(field_name)
    return override if override is not None else LabelSet.from_config(default)


class ProfileExtractor(ABC):
    """
    Extraction strategy for one document profile.

    Subclasses set ``profile``/``country``, a confidence table keyed by field
    then method, and implement ``extract_fields``.
    """

    profile: ClassVar[DocumentProfile]
    country: ClassVar[str] = ""
    confidence_table: ClassVar[dict[str, dict[str, float]]] = {}

    def __init__(self, options: ExtractionOptions | None = None) -> None:
        self.options = options or ExtractionOptions()

    @abstractmethod
    def extract_fields(self, lines: list[str]) -> dict[str, FieldResult]:
        """Return accepted fields keyed by ExtractedIdentity field name."""

    def weight(self, field_name: str, method_key: str) -> float:
        return self.confidence_table.get(field_name, {}).get(method_key, 0.0)

    def accept(self, field_name: str, candidate: FieldCandidate | None, method_key: str | None = None) -> FieldResult | None:
        if candidate is None:
            return None
        key = method_key or candidate.method.value
        result = FieldResult(candidate.value, candidate.method, self.weight(field_name, key))
        logger.debug(
            "Field extracted",
            extra={
                "profile": self.profile.value,
                "field": field_name,
                "method": key,
                "confidence": result.confidence,
            },
        )
        return result

    def date_of_birth_rule(self) -> FieldRule:
        return FieldRule(
            field="date_of_birth",
            labels=labels_for(self.options, "date_of_birth", DATE_OF_BIRTH_LABELS),
            validity=is_birth_date,
            normalize=lambda value: value.strip().rstrip(".") or None,
            patterns=DATE_OF_BIRTH_PATTERNS,
            allow_glued_value=True,
            blind_scan=False,
        )

    def extract_date_of_birth(self, lines: list[str]) -> FieldResult | None:
        return self.accept("date_of_birth", best_candidate(lines, self.date_of_birth_rule()))

    def extract(self, lines: list[str]) -> ExtractedIdentity:
        if self.options.extract_address:
            logger.warning(
                "Address extraction requested but is never performed",
                extra={"profile": self.profile.value},
            )

        fields = self.extract_fields(lines)
        values = {name: result.value for name, result in fields.items()}

        first_name = values.get("first_name")
        last_name = values.get("last_name")
        if first_name and last_name:
            full_name = f"{first_name} {last_name}"
        else:
            full_name = values.get("full_name")

        field_confidences = {name: result.confidence for name, result in fields.items()}
        return ExtractedIdentity(
            id_number=values.get("id_number"),
            first_name=first_name,
            last_name=last_name,
            full_name=full_name,
            date_of_birth=values.get("date_of_birth"),
            document_country=self.country,
            document_profile=self.profile,
            confidence=aggregate(field_confidences.values()),
            field_confidences=field_confidences,
        )


_REGISTRY: dict[DocumentProfile, type[ProfileExtractor]] = {}


def register_extractor(cls: type[ProfileExtractor]) -> type[ProfileExtractor]:
    _REGISTRY[cls.profile] = cls
    return cls


def get_extractor(
    profile: DocumentProfile, options: ExtractionOptions | None = None
) -> ProfileExtractor:
    """Instantiate the extractor registered for ``profile`` (GENERIC if none)."""
    extractor_cls = _REGISTRY.get(profile) or _REGISTRY[DocumentProfile.GENERIC]
    return extractor_cls(options)


def registered_profiles() -> tuple[DocumentProfile, ...]:
    return tuple(_REGISTRY)
