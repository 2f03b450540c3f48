"""Fixtures for tool tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

import pytest


@pytest.fixture
def mock_audit_logger():
    """Mock audit_logger.log_tool_call()."""
    with patch("gmail_mcp_lib.tools.base.audit_logger") as mock:
        yield mock


@pytest.fixture
def sample_message_list() -> list[dict[str, str]]:
    """Sample message list response."""
    return [
        {"id": "msg1", "threadId": "thread1"},
        {"id": "msg2", "threadId": "thread2"},
    ]


@pytest.fixture
def sample_labels() -> list[dict[str, Any]]:
    """Sample label list response."""
    return [
        {"id": "INBOX", "name": "INBOX", "type": "system"},
        {"id": "Label_1", "name": "Work", "type": "user"},
    ]


@pytest.fixture
def sample_thread() -> dict[str, Any]:
    """Sample thread with two messages."""
    return {
        "id": "thread1",
        "historyId": "12345",
        "messages": [
            {"id": "msg1", "threadId": "thread1", "snippet": "First message"},
            {"id": "msg2", "threadId": "thread1", "snippet": "Reply"},
        ],
    }
