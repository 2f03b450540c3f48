"""Tests for the exception hierarchy."""

from __future__ import annotations

from unittest.mock import MagicMock

from googleapiclient.errors import HttpError

from gmail_mcp_lib.utils.errors import (
    UNKNOWN_API_ERROR,
    AuthenticationError,
    GmailAPIError,
    GmailMCPError,
    TokenErrorReason,
    TokenResolutionError,
)


class TestGmailMCPError:
    """Tests for the base error."""

    def test_str_without_details(self):
        assert str(GmailMCPError("Something failed")) == "Something failed"

    def test_str_with_details(self):
        error = GmailMCPError("Something failed", details={"id": "msg1"})
        assert str(error) == "Something failed | Details: {'id': 'msg1'}"

    def test_token_resolution_error_is_authentication_error(self):
        error = TokenResolutionError(
            "missing", TokenErrorReason.NOT_FOUND, source="GMAIL_TOKEN"
        )

        assert isinstance(error, AuthenticationError)
        assert isinstance(error, GmailMCPError)
        assert error.reason == "not_found"
        assert error.source == "GMAIL_TOKEN"


class TestGmailAPIErrorFromException:
    """Tests for GmailAPIError.from_exception."""

    def test_plain_exception_message(self):
        error = GmailAPIError.from_exception(Exception("boom"))

        assert error.message == "boom"
        assert error.status_code is None

    def test_exception_without_message(self):
        error = GmailAPIError.from_exception(Exception())

        assert error.message == UNKNOWN_API_ERROR

    def test_http_error_uses_api_message(self):
        resp = MagicMock(status=404, reason="Not Found")
        content = b'{"error": {"code": 404, "message": "Requested entity was not found."}}'

        error = GmailAPIError.from_exception(HttpError(resp, content))

        assert error.status_code == 404
        assert error.message == "Requested entity was not found."

    def test_http_error_without_json_body(self):
        resp = MagicMock(status=500, reason="Internal Server Error")

        error = GmailAPIError.from_exception(HttpError(resp, b"oops"))

        assert error.status_code == 500
        assert error.message == "Internal Server Error"

    def test_existing_api_error_returned_unchanged(self):
        original = GmailAPIError("already normalized", status_code=429)

        assert GmailAPIError.from_exception(original) is original
