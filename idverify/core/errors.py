"""
Centralized outcome code registry with specifications.

Single source of truth for verification messages and the codes attached to
extraction outcomes, including their category and retryability.
"""

from enum import Enum
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorSpec:
    """Specification for a single outcome code."""
    code: str
    message: str                 # User-facing message
    category: str                # "client_error", "server_error" or "ok"
    retryable: bool              # True if a new photo may fix it


class ErrorCode(Enum):
    """Centralized outcome code registry.

    Usage:
        spec = ErrorCode.get_spec("ID_MISMATCH")
        print(spec.message, spec.category, spec.retryable)
    """

    # ========================================
    # VERIFICATION OUTCOMES
    # ========================================
    VERIFICATION_OK = ErrorSpec(
        "VERIFICATION_OK",
        "Verification successful",
        "ok",
        False,
    )
    ID_AND_NAME_MISMATCH = ErrorSpec(
        "ID_AND_NAME_MISMATCH",
        "Both name and ID number don't match the uploaded ID card",
        "client_error",
        True,
    )
    ID_MISMATCH = ErrorSpec(
        "ID_MISMATCH",
        "ID number doesn't match the uploaded ID card",
        "client_error",
        True,
    )
    NAME_MISMATCH = ErrorSpec(
        "NAME_MISMATCH",
        "Name doesn't match the uploaded ID card",
        "client_error",
        True,
    )

    # ========================================
    # EXTRACTION OUTCOMES (reported, never raised)
    # ========================================
    NO_TEXT_DETECTED = ErrorSpec(
        "NO_TEXT_DETECTED",
        "No text detected in image",
        "client_error",
        True,
    )
    FIELD_NOT_FOUND = ErrorSpec(
        "FIELD_NOT_FOUND",
        "Field could not be read from the ID card",
        "client_error",
        True,
    )
    INVALID_CANDIDATE = ErrorSpec(
        "INVALID_CANDIDATE",
        "Candidate value failed validation",
        "client_error",
        False,
    )

    # ========================================
    # CONTRACT VIOLATIONS
    # ========================================
    INVALID_INPUT = ErrorSpec(
        "INVALID_INPUT",
        "Invalid input",
        "client_error",
        False,
    )

    @classmethod
    def get_spec(cls, code: str) -> ErrorSpec:
        """Get specification by code string.

        Returns:
            ErrorSpec with category, message, and retryability.
            Returns default spec for unknown codes.
        """
        for error in cls:
            if error.value.code == code:
                return error.value
        return ErrorSpec(code, f"Error: {code}", "server_error", False)


def message_for(code: str) -> str:
    """Get user-facing message for a code."""
    return ErrorCode.get_spec(code).message
