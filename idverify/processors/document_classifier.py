"""
Document profile selection from raw OCR text.

Ordered signature checks: the first profile whose country name or
characteristic printed label occurs in the text (in either script) wins; no
signature means ``GENERIC``.
"""

from __future__ import annotations

import logging

from idverify.core.const import BOSNIAN_COUNTRY_MARKERS, BOSNIAN_LAYOUT_MARKERS
from idverify.models.dto import DocumentProfile
from idverify.processors.script_normalizer import contains_token

logger = logging.getLogger(__name__)

# Checked in order; add new countries here
PROFILE_SIGNATURES: tuple[tuple[DocumentProfile, tuple[str, ...]], ...] = (
    (
        DocumentProfile.BOSNIAN_NATIONAL_ID,
        BOSNIAN_COUNTRY_MARKERS + BOSNIAN_LAYOUT_MARKERS,
    ),
)


def classify(raw_text: str) -> DocumentProfile:
    """Return the profile whose signature is found first, else GENERIC."""
    for profile, markers in PROFILE_SIGNATURES:
        if contains_token(raw_text, markers):
            logger.debug("Document signature matched", extra={"profile": profile.value})
            return profile
    return DocumentProfile.GENERIC
