"""
End-to-end identity extraction and verification over raw OCR text.

raw text -> classify -> profile extractor -> ExtractedIdentity
         -> identity matcher (claim) -> MatchResult

Every stage is a pure function of its input; nothing is kept between calls.
"""

from __future__ import annotations

import logging
from typing import Optional

from idverify.core.errors import ErrorCode
from idverify.core.exceptions import ValidationError
from idverify.models.dto import (
    ClaimedIdentity,
    ExtractedIdentity,
    ExtractionOptions,
    MatchResult,
    NameComparison,
)
from idverify.processors import classify, get_extractor
from idverify.processors.candidate_scanner import split_lines
from idverify.processors.identity_matcher import match
from idverify.utils.timing import StageTimers

logger = logging.getLogger(__name__)


def _extract(
    raw_text: str,
    options: Optional[ExtractionOptions],
    timers: StageTimers,
    trace_id: Optional[str],
) -> ExtractedIdentity:
    if not isinstance(raw_text, str):
        raise ValidationError("raw_text must be a string", field="raw_text")

    if not raw_text.strip():
        logger.info(
            "No text detected",
            extra={"trace_id": trace_id, "error_code": ErrorCode.NO_TEXT_DETECTED.value.code},
        )
        return ExtractedIdentity()

    with timers.timer("classify"):
        profile = classify(raw_text)

    with timers.timer("extract"):
        extractor = get_extractor(profile, options)
        identity = extractor.extract(split_lines(raw_text))

    missing = [
        name
        for name in ("id_number", "first_name", "last_name", "full_name")
        if getattr(identity, name) is None
    ]
    for name in missing:
        logger.debug(
            "Field not found",
            extra={
                "trace_id": trace_id,
                "field": name,
                "error_code": ErrorCode.FIELD_NOT_FOUND.value.code,
            },
        )
    return identity


def extract_identity(
    raw_text: str,
    options: Optional[ExtractionOptions] = None,
    trace_id: Optional[str] = None,
) -> ExtractedIdentity:
    """
    Read an identity from OCR text.

    Sparse or noisy text yields absent fields and low confidence, never an
    exception.

    Raises:
      ValidationError: If ``raw_text`` is not a string.
    """
    timers = StageTimers()
    identity = _extract(raw_text, options, timers, trace_id)
    logger.info(
        "Identity extracted",
        extra={
            "trace_id": trace_id,
            "profile": identity.document_profile.value,
            "confidence": identity.confidence,
            "duration_ms": timers.total_ms(),
        },
    )
    return identity


def verify_identity(
    claim: ClaimedIdentity,
    raw_text: str,
    options: Optional[ExtractionOptions] = None,
    mode: Optional[NameComparison] = None,
    trace_id: Optional[str] = None,
) -> tuple[ExtractedIdentity, MatchResult]:
    """
    Extract an identity from ``raw_text`` and verify ``claim`` against it.

    Returns:
      The extracted identity (for display) and the verdict.
    """
    timers = StageTimers()
    identity = _extract(raw_text, options, timers, trace_id)

    with timers.timer("match"):
        result = match(claim, identity, mode)

    logger.info(
        "Identity verified",
        extra={
            "trace_id": trace_id,
            "profile": identity.document_profile.value,
            "confidence": identity.confidence,
            "error_code": result.code,
            "duration_ms": timers.total_ms(),
        },
    )
    return identity, result
