"""
Verification of a claimed identity against the one read from the card.

Names are compared with a configurable ``NameComparison`` mode (containment
in either direction by default) because OCR often captures a name only
partly. ID numbers always need exact equality of their canonical forms.
``success`` holds only when both the name and the ID match.
"""

from __future__ import annotations

import logging

from idverify.core.errors import ErrorCode
from idverify.core.exceptions import ValidationError
from idverify.models.dto import ClaimedIdentity, ExtractedIdentity, MatchResult, NameComparison
from idverify.processors.name_comparison import compare_names, default_mode
from idverify.processors.script_normalizer import to_canonical

logger = logging.getLogger(__name__)

FIRST_NAME = "firstName"
LAST_NAME = "lastName"
ID_NUMBER = "idNumber"
NAME = "name"


def canonical_id(value: str | None) -> str:
    """Case-, script- and separator-insensitive form of an ID number."""
    return to_canonical(value).replace(" ", "")


def ids_match(claimed: str | None, extracted: str | None) -> bool:
    a, b = canonical_id(claimed), canonical_id(extracted)
    return bool(a) and a == b


def _match_name_fields(
    claim: ClaimedIdentity, extracted: ExtractedIdentity, mode: NameComparison
) -> tuple[bool, list[str]]:
    """
    Field-by-field comparison: the combined ``first last`` strings first,
    then each part on its own; one matching part is enough.
    """
    if extracted.first_name and extracted.last_name:
        combined = f"{extracted.first_name} {extracted.last_name}"
        if compare_names(claim.full_name, combined, mode):
            return True, []

    failed: list[str] = []
    matched = False
    for label, claimed_part, extracted_part in (
        (FIRST_NAME, claim.first_name, extracted.first_name),
        (LAST_NAME, claim.last_name, extracted.last_name),
    ):
        if not extracted_part:
            continue
        if compare_names(claimed_part, extracted_part, mode):
            matched = True
        else:
            failed.append(label)
    return matched, failed


def match_names(
    claim: ClaimedIdentity, extracted: ExtractedIdentity, mode: NameComparison
) -> tuple[bool, list[str]]:
    """
    Returns:
      ``(name_match, mismatched_fields)``; the list is empty on a match.
    """
    if extracted.first_name or extracted.last_name:
        matched, failed = _match_name_fields(claim, extracted, mode)
        return matched, [] if matched else failed

    if extracted.full_name:
        if compare_names(claim.full_name, extracted.full_name, mode):
            return True, []
        return False, [NAME]

    # Nothing to compare against
    return False, [NAME]


def _outcome(id_match: bool, name_match: bool) -> ErrorCode:
    if not id_match and not name_match:
        return ErrorCode.ID_AND_NAME_MISMATCH
    if not id_match:
        return ErrorCode.ID_MISMATCH
    if not name_match:
        return ErrorCode.NAME_MISMATCH
    return ErrorCode.VERIFICATION_OK


def match(
    claim: ClaimedIdentity,
    extracted: ExtractedIdentity,
    mode: NameComparison | None = None,
) -> MatchResult:
    """
    Compare ``claim`` with ``extracted``.

    Args:
      claim: Identity typed by the user.
      extracted: Identity read from the card.
      mode: Name comparison mode; defaults to ``IDVERIFY_NAME_MATCH_MODE``.

    Raises:
      ValidationError: If an argument is not of the expected model type.
    """
    if not isinstance(claim, ClaimedIdentity):
        raise ValidationError("claim must be a ClaimedIdentity", field="claim")
    if not isinstance(extracted, ExtractedIdentity):
        raise ValidationError("extracted must be an ExtractedIdentity", field="extracted")

    mode = mode or default_mode()

    name_match, mismatches = match_names(claim, extracted, mode)
    id_match = ids_match(claim.id_number, extracted.id_number)
    if not id_match:
        mismatches.append(ID_NUMBER)

    outcome = _outcome(id_match, name_match).value
    result = MatchResult(
        success=id_match and name_match,
        id_match=id_match,
        name_match=name_match,
        mismatches=mismatches,
        code=outcome.code,
        message=outcome.message,
    )

    logger.info(
        "Identity verification finished",
        extra={
            "profile": extracted.document_profile.value,
            "error_code": result.code,
            "mismatches": result.mismatches,
        },
    )
    return result
