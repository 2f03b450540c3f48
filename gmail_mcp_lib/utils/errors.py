"""Custom exception hierarchy for the Gmail MCP library.

Credential problems surface as
``TokenResolutionError`` with a ``TokenErrorReason``, and every failure of a
remote Gmail call surfaces as ``GmailAPIError``.
"""

from __future__ import annotations

from enum import Enum

from googleapiclient.errors import HttpError

UNKNOWN_API_ERROR = "Unknown Gmail API error"


class GmailMCPError(Exception):
    """Base exception for all Gmail MCP library errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthenticationError(GmailMCPError):
    """Exception raised for credential-related errors."""

    pass


class TokenErrorReason(str, Enum):
    """Why a credential bundle could not be resolved."""

    NOT_FOUND = "not_found"
    INVALID_JSON = "invalid_json"
    FILE_UNREADABLE = "file_unreadable"


class TokenResolutionError(AuthenticationError):
    """Exception raised when no usable credential bundle can be resolved.

    Attributes:
        reason: Which resolution step failed.
        source: The environment variable name or file path involved, if any.
    """

    def __init__(
        self,
        message: str,
        reason: TokenErrorReason,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.source = source


class GmailAPIError(GmailMCPError):
    """Exception raised for errors from Gmail API calls.

    Attributes:
        status_code: HTTP status code from the API response, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code

    @classmethod
    def from_exception(cls, error: BaseException) -> GmailAPIError:
        """Normalize an arbitrary failure into a ``GmailAPIError``.

        ``HttpError`` contributes its parsed reason and status code. Any other
        exception contributes its message. Failures without a message map to
        the generic unknown-error message.
        """
        if isinstance(error, GmailAPIError):
            return error

        status_code: int | None = None
        message = ""
        if isinstance(error, HttpError):
            status_code = error.resp.status
            message = error.reason or ""
        if not message:
            message = str(error)

        return cls(message or UNKNOWN_API_ERROR, status_code=status_code)


__all__ = [
    "UNKNOWN_API_ERROR",
    "GmailMCPError",
    "AuthenticationError",
    "TokenErrorReason",
    "TokenResolutionError",
    "GmailAPIError",
]
