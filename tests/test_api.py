"""Tests for the standalone library functions."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

import gmail_mcp_lib
from gmail_mcp_lib import api
from gmail_mcp_lib.utils.errors import TokenResolutionError


class TestStandaloneFunctions:
    """Each function resolves tokens and builds a client for one call."""

    @pytest.mark.asyncio
    async def test_list_labels_from_token_file(
        self,
        tmp_path: Path,
        mock_build: MagicMock,
        mock_gmail_service: MagicMock,
    ) -> None:
        (tmp_path / "token.json").write_text(
            json.dumps({"accessToken": "X", "refreshToken": "Y"}), encoding="utf-8"
        )
        mock_gmail_service.users().labels().list().execute.return_value = {
            "labels": [{"id": "INBOX", "name": "INBOX"}]
        }

        result = await api.list_labels()

        assert result == [{"id": "INBOX", "name": "INBOX"}]
        credentials = mock_build.call_args.kwargs["credentials"]
        assert credentials.token == "X"
        assert credentials.refresh_token == "Y"

    @pytest.mark.asyncio
    async def test_explicit_tokens_override_environment(
        self,
        monkeypatch: pytest.MonkeyPatch,
        mock_build: MagicMock,
        mock_gmail_service: MagicMock,
        mock_token: dict[str, Any],
    ) -> None:
        monkeypatch.setenv("GMAIL_TOKEN", json.dumps({"access_token": "env-token"}))
        mock_gmail_service.users().messages().list().execute.return_value = {}

        await api.list_messages({"maxResults": 1}, tokens=mock_token)

        credentials = mock_build.call_args.kwargs["credentials"]
        assert credentials.token == "test-access-token"

    @pytest.mark.asyncio
    async def test_delegates_to_fresh_client(
        self, mocker, mock_token: dict[str, Any]
    ) -> None:
        client = mocker.MagicMock()
        client.list_labels = mocker.AsyncMock(return_value=[])
        factory = mocker.patch(
            "gmail_mcp_lib.api.create_gmail_client", return_value=client
        )

        await api.list_labels(user_id="shared@example.com", tokens=mock_token)

        factory.assert_called_once_with(mock_token)
        client.list_labels.assert_awaited_once_with(user_id="shared@example.com")

    @pytest.mark.asyncio
    async def test_no_tokens(self) -> None:
        with pytest.raises(TokenResolutionError):
            await api.get_message("msg1")

    @pytest.mark.asyncio
    async def test_message_operations(
        self,
        mock_build: MagicMock,
        mock_gmail_service: MagicMock,
        mock_token: dict[str, Any],
        sample_email: dict[str, Any],
    ) -> None:
        messages = mock_gmail_service.users().messages()
        messages.get().execute.return_value = sample_email
        messages.list().execute.return_value = {"messages": [{"id": "msg1"}]}
        messages.send().execute.return_value = {"id": "sent1"}
        messages.modify().execute.return_value = {"id": "msg1"}
        messages.trash().execute.return_value = {"id": "msg1"}
        messages.untrash().execute.return_value = {"id": "msg1"}

        fetched = await api.get_message("18abc123def", tokens=mock_token)
        found = await api.search_messages("is:unread", tokens=mock_token)
        sent = await api.send_message({"to": "a@example.com"}, tokens=mock_token)
        modified = await api.modify_message_labels(
            "msg1", {"remove_label_ids": ["UNREAD"]}, tokens=mock_token
        )
        trashed = await api.trash_message("msg1", tokens=mock_token)
        restored = await api.untrash_message("msg1", tokens=mock_token)

        assert fetched == sample_email
        assert found == [{"id": "msg1"}]
        assert sent == {"id": "sent1"}
        assert modified == trashed == restored == {"id": "msg1"}
        assert mock_build.call_count == 6

    @pytest.mark.asyncio
    async def test_draft_and_thread_operations(
        self,
        mock_build: MagicMock,
        mock_gmail_service: MagicMock,
        mock_token: dict[str, Any],
    ) -> None:
        mock_gmail_service.users().drafts().create().execute.return_value = {
            "id": "draft1"
        }
        mock_gmail_service.users().threads().list().execute.return_value = {
            "threads": [{"id": "t1"}]
        }
        mock_gmail_service.users().threads().get().execute.return_value = {"id": "t1"}

        draft = await api.create_draft(
            {"to": "a@example.com", "subject": "Later"}, tokens=mock_token
        )
        listed = await api.list_threads(tokens=mock_token)
        thread = await api.get_thread("t1", format="metadata", tokens=mock_token)

        assert draft == {"id": "draft1"}
        assert listed == [{"id": "t1"}]
        assert thread == {"id": "t1"}
        mock_gmail_service.users().threads().get.assert_called_with(
            userId="me", id="t1", format="metadata"
        )


class TestPackageExports:
    """Tests for the package surface."""

    def test_exports_library_functions(self) -> None:
        for name in (
            "list_messages",
            "get_message",
            "search_messages",
            "send_message",
            "create_draft",
            "list_labels",
            "modify_message_labels",
            "trash_message",
            "untrash_message",
            "list_threads",
            "get_thread",
            "resolve_tokens",
            "normalize_tokens",
            "GmailClient",
            "create_gmail_client",
        ):
            assert hasattr(gmail_mcp_lib, name), name

    def test_version(self) -> None:
        assert gmail_mcp_lib.__version__ == "1.0.0"


class TestPackaging:
    """Tests for the declared runtime requirements."""

    def test_mcp_requirement_excludes_next_major(self) -> None:
        pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
        with pyproject.open("rb") as f:
            dependencies = tomllib.load(f)["project"]["dependencies"]

        assert "mcp>=1.9.0,<2" in dependencies

    def test_transport_libraries_are_declared(self) -> None:
        pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
        with pyproject.open("rb") as f:
            dependencies = tomllib.load(f)["project"]["dependencies"]
        names = {dep.split(">")[0].split("<")[0].split("=")[0] for dep in dependencies}

        assert {"httplib2", "google-auth-httplib2"} <= names
