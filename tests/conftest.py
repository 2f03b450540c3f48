"""Pytest configuration and fixtures for Gmail MCP library tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep real tokens and ./token.json out of every test."""
    for var in (
        "GMAIL_TOKEN",
        "GMAIL_TOKEN_FILE",
        "GOOGLE_CLIENT_ID",
        "GOOGLE_CLIENT_SECRET",
        "GOOGLE_REDIRECT_URL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_token() -> dict[str, Any]:
    """Fixture providing snake_case OAuth token data."""
    return {
        "access_token": "test-access-token",
        "refresh_token": "test-refresh-token",
        "expiry_date": 1234567890,
    }


@pytest.fixture
def camel_token() -> dict[str, Any]:
    """Fixture providing camelCase OAuth token data."""
    return {
        "accessToken": "camel-access-token",
        "refreshToken": "camel-refresh-token",
        "expiryDate": 9999999999,
        "tokenType": "Bearer",
    }


@pytest.fixture
def sample_email() -> dict[str, Any]:
    """Fixture providing sample email data for testing."""
    return {
        "id": "18abc123def",
        "threadId": "18abc123def",
        "labelIds": ["INBOX", "UNREAD"],
        "snippet": "This is a test email snippet...",
        "payload": {
            "headers": [
                {"name": "From", "value": "sender@example.com"},
                {"name": "To", "value": "recipient@example.com"},
                {"name": "Subject", "value": "Test Email Subject"},
            ],
            "mimeType": "text/plain",
            "body": {"size": 26, "data": "VGhpcyBpcyB0aGUgZW1haWwgYm9keSBjb250ZW50Lg=="},
        },
    }


@pytest.fixture
def mock_gmail_service() -> MagicMock:
    """Mock Gmail API service."""
    return MagicMock()


@pytest.fixture
def mock_build(mock_gmail_service: MagicMock):
    """Patch discovery ``build`` so clients get the mock service."""
    with patch("gmail_mcp_lib.gmail.client.build") as mock:
        mock.return_value = mock_gmail_service
        yield mock
