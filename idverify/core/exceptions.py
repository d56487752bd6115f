"""Custom exception hierarchy for idverify.

Extraction degrades to absent fields instead of raising; exceptions are
reserved for caller contract violations. All exceptions inherit from
BaseError and convert to RFC 7807 Problem Details.
"""

from typing import Any, Optional
from enum import Enum

from idverify.core.errors import ErrorCode


class ErrorCategory(str, Enum):
    """Error categories for classification and monitoring."""

    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    VALIDATION = "validation"


class BaseError(Exception):
    """Base exception for all idverify errors.

    Attributes:
        message: Human-readable error message
        error_code: Application-specific error code
        category: Error category for classification
        http_status: HTTP status code a calling layer should return
        details: Additional context (dict)
        retryable: Whether the operation can be retried
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        http_status: int,
        details: Optional[dict[str, Any]] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.http_status = http_status
        self.details = details or {}
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to RFC 7807 Problem Details format."""
        return {
            "type": f"/errors/{self.error_code}",
            "title": self.message,
            "status": self.http_status,
            "code": self.error_code,
            "detail": self.details.get("detail"),
            "category": self.category.value,
            "retryable": self.retryable,
        }


class ClientError(BaseError):
    """Base for errors caused by the caller (4xx). Never retryable."""

    def __init__(self, message: str, error_code: str, **kwargs):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CLIENT_ERROR,
            http_status=kwargs.pop("http_status", 400),
            retryable=False,
            **kwargs,
        )


class ValidationError(ClientError):
    """Precondition failed (422 Unprocessable Entity).

    Raised when an argument has the wrong type, e.g. raw OCR text that is
    not a string.

    Args:
        message: Validation error description
        field: Name of the argument that failed validation
        details: Additional validation context
    """

    def __init__(self, message: str, field: str, **kwargs):
        additional_details = kwargs.pop("details", {})
        additional_details["field"] = field
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_INPUT.value.code,
            http_status=422,
            details=additional_details,
            **kwargs,
        )
        self.field = field
