"""
Custom exceptions for Hevy Trainer.

This module defines the exception hierarchy shared by the API client,
the pagination layer and the tool surface. Each exception includes:
- A descriptive message
- An error code for tool responses
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent tool error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Upstream API errors
    UPSTREAM_FETCH_ERROR = "UPSTREAM_FETCH_ERROR"
    UPSTREAM_RATE_LIMITED = "UPSTREAM_RATE_LIMITED"
    UPSTREAM_MALFORMED_RESPONSE = "UPSTREAM_MALFORMED_RESPONSE"


class HevyTrainerError(Exception):
    """
    Base exception for all Hevy Trainer errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for a tool response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class InvalidInputError(HevyTrainerError):
    """Raised when a parameter is out of range, before any network call."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


# ============================================================================
# Upstream Errors
# ============================================================================

class UpstreamFetchError(HevyTrainerError):
    """
    Raised when a request to the Hevy API fails.

    Covers transport failures, non-2xx responses and bodies that cannot be
    parsed. The original exception, when there is one, is chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        code: ErrorCode = ErrorCode.UPSTREAM_FETCH_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        error_details = details or {}
        if endpoint:
            error_details["endpoint"] = endpoint
        if status_code is not None:
            error_details["status_code"] = status_code
        super().__init__(message=message, code=code, details=error_details)


class RateLimitError(UpstreamFetchError):
    """Raised when the Hevy API keeps answering 429 after all retries."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.retry_after = retry_after
        error_details = details or {}
        if retry_after is not None:
            error_details["retry_after_seconds"] = retry_after
        super().__init__(
            message="Hevy API rate limit exceeded. Please wait before retrying.",
            endpoint=endpoint,
            status_code=429,
            code=ErrorCode.UPSTREAM_RATE_LIMITED,
            details=error_details,
        )


class MalformedResponseError(UpstreamFetchError):
    """Raised when a Hevy API response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            endpoint=endpoint,
            code=ErrorCode.UPSTREAM_MALFORMED_RESPONSE,
            details=details,
        )
