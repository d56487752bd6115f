"""Identity extraction and verification over OCR text of ID cards.

This package provides:
- Extraction: classify the card, then read name, ID number and birth date
- Verification: compare a claimed identity with the extracted one
"""

from idverify.models.dto import (
    ClaimedIdentity,
    DocumentProfile,
    ExtractedIdentity,
    ExtractionOptions,
    MatchResult,
    NameComparison,
)
from idverify.orchestrator import extract_identity, verify_identity
from idverify.processors.identity_matcher import match

__all__ = [
    "ClaimedIdentity",
    "DocumentProfile",
    "ExtractedIdentity",
    "ExtractionOptions",
    "MatchResult",
    "NameComparison",
    "extract_identity",
    "match",
    "verify_identity",
]
