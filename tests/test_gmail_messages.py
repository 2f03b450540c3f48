"""Tests for Gmail message operations."""

from __future__ import annotations

import base64
import email
import logging
from typing import Any
from unittest.mock import MagicMock

import pytest

from gmail_mcp_lib.gmail.messages import (
    DEFAULT_SUBJECT,
    build_message,
    encode_message,
    get_message,
    list_messages,
    modify_message,
    search_messages,
    send_message,
    trash_message,
    untrash_message,
)
from gmail_mcp_lib.schemas.options import (
    CreateDraftOptions,
    ListMessagesOptions,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
)
from gmail_mcp_lib.utils.errors import UNKNOWN_API_ERROR, GmailAPIError


def _decode_raw(raw: str) -> email.message.Message:
    return email.message_from_bytes(base64.urlsafe_b64decode(raw))


@pytest.fixture
def mock_service() -> MagicMock:
    """Create a mock Gmail API service with one listed message."""
    service = MagicMock()
    service.users().messages().list().execute.return_value = {
        "messages": [{"id": "msg1", "threadId": "t1"}],
    }
    return service


class TestBuildMessage:
    """Tests for MIME construction."""

    def test_single_recipient(self) -> None:
        message = build_message(
            CreateDraftOptions(to="a@example.com", subject="Hi", body="Hello")
        )

        assert message["To"] == "a@example.com"
        assert message["Subject"] == "Hi"
        assert message.get_content_type() == "text/plain"
        assert message.get_payload(decode=True).decode() == "Hello"

    def test_multiple_recipients_joined_with_commas(self) -> None:
        message = build_message(
            CreateDraftOptions(to=["a@example.com", "b@example.com"])
        )

        assert message["To"] == "a@example.com,b@example.com"

    def test_defaults(self) -> None:
        message = build_message(CreateDraftOptions(to="a@example.com"))

        assert message["Subject"] == DEFAULT_SUBJECT
        assert message.get_payload(decode=True) == b""
        assert message["In-Reply-To"] is None

    def test_html_body(self) -> None:
        message = build_message(
            CreateDraftOptions(to="a@example.com", body="<p>Hi</p>", html=True)
        )

        assert message.get_content_type() == "text/html"
        assert message.get_content_charset() == "utf-8"

    def test_reply_headers(self) -> None:
        message = build_message(
            CreateDraftOptions(to="a@example.com", in_reply_to="<orig@mail.gmail.com>")
        )

        assert message["In-Reply-To"] == "<orig@mail.gmail.com>"
        assert message["References"] == "<orig@mail.gmail.com>"

    def test_encode_is_url_safe_base64(self) -> None:
        raw = encode_message(
            build_message(CreateDraftOptions(to="a@example.com", subject="Encoded"))
        )

        assert "+" not in raw
        assert "/" not in raw
        assert _decode_raw(raw)["Subject"] == "Encoded"


class TestListMessages:
    """Tests for list_messages and search_messages."""

    def test_forwards_options(self, mock_service: MagicMock) -> None:
        options = ListMessagesOptions(
            q="is:unread",
            max_results=10,
            page_token="next-page",
            include_spam_trash=True,
            label_ids=["INBOX"],
        )

        result = list_messages(mock_service, options)

        assert result == [{"id": "msg1", "threadId": "t1"}]
        mock_service.users().messages().list.assert_called_with(
            userId="me",
            q="is:unread",
            maxResults=10,
            pageToken="next-page",
            includeSpamTrash=True,
            labelIds=["INBOX"],
        )

    def test_missing_messages_yield_empty_list(self, mock_service: MagicMock) -> None:
        mock_service.users().messages().list().execute.return_value = {
            "resultSizeEstimate": 0
        }

        assert list_messages(mock_service, ListMessagesOptions()) == []

    def test_camel_case_options(self, mock_service: MagicMock) -> None:
        options = ListMessagesOptions.model_validate(
            {"maxResults": 5, "pageToken": "p2", "unknownKey": "ignored"}
        )

        list_messages(mock_service, options, user_id="user@example.com")

        call_kwargs = mock_service.users().messages().list.call_args.kwargs
        assert call_kwargs["userId"] == "user@example.com"
        assert call_kwargs["maxResults"] == 5
        assert call_kwargs["pageToken"] == "p2"
        assert "unknownKey" not in call_kwargs

    def test_search_uses_query(self, mock_service: MagicMock) -> None:
        result = search_messages(
            mock_service, "from:boss@example.com", SearchMessagesOptions(max_results=3)
        )

        assert result == [{"id": "msg1", "threadId": "t1"}]
        call_kwargs = mock_service.users().messages().list.call_args.kwargs
        assert call_kwargs["q"] == "from:boss@example.com"
        assert call_kwargs["maxResults"] == 3

    def test_failure_is_logged_and_normalized(
        self, mock_service: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_service.users().messages().list().execute.side_effect = Exception(
            "quota exceeded"
        )

        with caplog.at_level(logging.ERROR), pytest.raises(GmailAPIError) as exc_info:
            list_messages(mock_service, ListMessagesOptions())

        assert exc_info.value.message == "quota exceeded"
        assert "Failed to list messages: quota exceeded" in caplog.text

    def test_failure_without_message(self, mock_service: MagicMock) -> None:
        mock_service.users().messages().list().execute.side_effect = Exception()

        with pytest.raises(GmailAPIError, match=UNKNOWN_API_ERROR):
            search_messages(mock_service, "is:starred", SearchMessagesOptions())


class TestSingleMessageOperations:
    """Tests for get, send, modify, trash and untrash."""

    def test_get_message(self, sample_email: dict[str, Any]) -> None:
        service = MagicMock()
        service.users().messages().get().execute.return_value = sample_email

        result = get_message(service, "18abc123def", format="metadata")

        assert result == sample_email
        service.users().messages().get.assert_called_with(
            userId="me", id="18abc123def", format="metadata"
        )

    def test_get_message_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        service = MagicMock()
        service.users().messages().get().execute.side_effect = Exception("not found")

        with caplog.at_level(logging.ERROR), pytest.raises(GmailAPIError):
            get_message(service, "missing")

        assert "Failed to get message missing" in caplog.text

    def test_send_message_body(self) -> None:
        service = MagicMock()
        service.users().messages().send().execute.return_value = {
            "id": "sent1",
            "labelIds": ["SENT"],
        }
        options = SendMessageOptions(
            to="a@example.com",
            subject="Report",
            body="Attached",
            thread_id="t1",
            label_ids=["IMPORTANT"],
        )

        result = send_message(service, options)

        assert result["id"] == "sent1"
        body = service.users().messages().send.call_args.kwargs["body"]
        assert body["threadId"] == "t1"
        assert body["labelIds"] == ["IMPORTANT"]
        assert _decode_raw(body["raw"])["Subject"] == "Report"

    def test_send_message_minimal_body(self) -> None:
        service = MagicMock()
        service.users().messages().send().execute.return_value = {"id": "sent2"}

        send_message(service, SendMessageOptions(to="a@example.com"))

        body = service.users().messages().send.call_args.kwargs["body"]
        assert set(body) == {"raw"}

    def test_modify_message_only_sends_given_lists(self) -> None:
        service = MagicMock()
        service.users().messages().modify().execute.return_value = {
            "id": "msg1",
            "labelIds": ["INBOX"],
        }

        modify_message(service, "msg1", ModifyLabelsOptions(remove_label_ids=["UNREAD"]))

        service.users().messages().modify.assert_called_with(
            userId="me", id="msg1", body={"removeLabelIds": ["UNREAD"]}
        )

    def test_modify_message_with_both_lists(self) -> None:
        service = MagicMock()
        options = ModifyLabelsOptions.model_validate(
            {"addLabelIds": ["STARRED"], "removeLabelIds": ["INBOX"]}
        )

        modify_message(service, "msg1", options)

        body = service.users().messages().modify.call_args.kwargs["body"]
        assert body == {"addLabelIds": ["STARRED"], "removeLabelIds": ["INBOX"]}

    def test_trash_and_untrash(self) -> None:
        service = MagicMock()
        service.users().messages().trash().execute.return_value = {
            "id": "msg1",
            "labelIds": ["TRASH"],
        }
        service.users().messages().untrash().execute.return_value = {
            "id": "msg1",
            "labelIds": ["INBOX"],
        }

        assert trash_message(service, "msg1")["labelIds"] == ["TRASH"]
        assert untrash_message(service, "msg1")["labelIds"] == ["INBOX"]
        service.users().messages().trash.assert_called_with(userId="me", id="msg1")
        service.users().messages().untrash.assert_called_with(userId="me", id="msg1")

    def test_trash_failure(self) -> None:
        service = MagicMock()
        service.users().messages().trash().execute.side_effect = Exception("forbidden")

        with pytest.raises(GmailAPIError, match="forbidden"):
            trash_message(service, "msg1")
