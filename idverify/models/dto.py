"""
Typed contracts flowing through the extraction and verification pipeline.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CYRILLIC = re.compile(r"[Ѐ-ӿ]")


class Script(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"


class DocumentProfile(str, Enum):
    """Layout profile selected by the document classifier."""

    GENERIC = "generic"
    BOSNIAN_NATIONAL_ID = "bosnian_national_id"


class ExtractionMethod(str, Enum):
    """How a candidate was found; selects its confidence weight."""

    LABEL_PATTERN = "label_pattern"  # next to a label and matched a shape pattern
    LABEL_LINE = "label_line"  # next to a label, whole value region accepted
    BLIND_PATTERN = "blind_pattern"  # pattern scan over all lines
    HEURISTIC = "heuristic"  # last-resort layout heuristic


class NameComparison(str, Enum):
    """Comparison mode applied to one name field."""

    EXACT = "exact"
    CONTAINS_EITHER_DIRECTION = "contains_either_direction"
    FUZZY = "fuzzy"


class LabelSet(BaseModel):
    """
    Per-script label strings naming one field.
    """

    model_config = ConfigDict(frozen=True)

    labels: dict[Script, tuple[str, ...]] = Field(default_factory=dict)

    @classmethod
    def from_config(cls, labels: dict[str, tuple[str, ...]]) -> LabelSet:
        return cls(labels={Script(script): tuple(items) for script, items in labels.items()})

    @classmethod
    def from_strings(cls, labels: list[str] | tuple[str, ...]) -> LabelSet:
        """Build a label set from plain strings, tagging each by its script."""
        grouped: dict[Script, list[str]] = {}
        for label in labels:
            label = label.strip()
            if not label:
                continue
            script = Script.CYRILLIC if _CYRILLIC.search(label) else Script.LATIN
            grouped.setdefault(script, []).append(label)
        return cls(labels={script: tuple(items) for script, items in grouped.items()})

    def all(self) -> tuple[str, ...]:
        return tuple(label for items in self.labels.values() for label in items)

    def for_script(self, script: Script) -> tuple[str, ...]:
        return self.labels.get(script, ())


class LabelHit(BaseModel):
    """A label found inside a line, with the offset right after it."""

    model_config = ConfigDict(frozen=True)

    label: str
    offset_after_label: int
    remainder: str = ""


class FieldCandidate(BaseModel):
    """
    Provisionally extracted field value plus ranking metadata.

    Ranked ascending by ``priority`` (1 = label-adjacent, 2 = blind scan),
    ties broken by descending ``match_ratio``.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    priority: int
    match_ratio: float = Field(ge=0.0, le=1.0)
    method: ExtractionMethod
    line_index: int
    line_distance: int = 0


class ExtractionOptions(BaseModel):
    """
    Which fields to extract and optional label overrides.
    """

    extract_name: bool = True
    extract_id_number: bool = True
    extract_date_of_birth: bool = True
    # Address is sensitive and never extracted, whatever this flag says
    extract_address: bool = False

    name_labels: list[str] | None = None
    first_name_labels: list[str] | None = None
    last_name_labels: list[str] | None = None
    id_number_labels: list[str] | None = None
    date_of_birth_labels: list[str] | None = None
    address_labels: list[str] | None = None

    def label_override(self, field_name: str) -> LabelSet | None:
        labels = getattr(self, f"{field_name}_labels", None)
        if not labels:
            return None
        label_set = LabelSet.from_strings(labels)
        return label_set if label_set.all() else None


class ExtractedIdentity(BaseModel):
    """
    Structured identity recovered from OCR text. Immutable once produced.
    """

    model_config = ConfigDict(frozen=True)

    id_number: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    date_of_birth: str | None = None
    document_country: str = ""
    document_profile: DocumentProfile = DocumentProfile.GENERIC
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    field_confidences: dict[str, float] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.id_number, self.first_name, self.last_name, self.full_name, self.date_of_birth)
        )


class ClaimedIdentity(BaseModel):
    """
    Identity typed by the user, compared against the extracted identity.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    id_number: str = Field(min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class MatchResult(BaseModel):
    """
    Verification verdict. ``success`` holds iff both ``id_match`` and
    ``name_match`` hold.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    id_match: bool
    name_match: bool
    mismatches: list[str] = Field(default_factory=list)
    code: str
    message: str

    @field_validator("mismatches")
    @classmethod
    def _unique_sorted(cls, value: list[str]) -> list[str]:
        return sorted(set(value))
