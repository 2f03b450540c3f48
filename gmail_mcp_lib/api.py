"""Standalone Gmail operations.

Each function resolves tokens and builds a short-lived ``GmailClient`` for a
single call. Reuse a ``GmailClient`` directly to make several calls with the
same credentials.
"""

from __future__ import annotations

from gmail_mcp_lib.auth.tokens import Tokens
from gmail_mcp_lib.gmail.client import Options, create_gmail_client
from gmail_mcp_lib.schemas.types import (
    Draft,
    Label,
    Message,
    MessageFormat,
    Thread,
    ThreadFormat,
)


async def list_messages(
    options: Options | None = None,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> list[Message]:
    """List one page of messages."""
    client = create_gmail_client(tokens)
    return await client.list_messages(options, user_id=user_id)


async def get_message(
    message_id: str,
    *,
    format: MessageFormat = "full",
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> Message:
    """Get a message by ID."""
    client = create_gmail_client(tokens)
    return await client.get_message(message_id, format=format, user_id=user_id)


async def search_messages(
    query: str,
    options: Options | None = None,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> list[Message]:
    """Search messages with Gmail query syntax."""
    client = create_gmail_client(tokens)
    return await client.search_messages(query, options, user_id=user_id)


async def send_message(
    options: Options,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> Message:
    """Send an email message."""
    client = create_gmail_client(tokens)
    return await client.send_message(options, user_id=user_id)


async def create_draft(
    options: Options,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> Draft:
    """Create a draft email message."""
    client = create_gmail_client(tokens)
    return await client.create_draft(options, user_id=user_id)


async def list_labels(
    *, user_id: str = "me", tokens: Tokens | None = None
) -> list[Label]:
    """List all labels in the mailbox."""
    client = create_gmail_client(tokens)
    return await client.list_labels(user_id=user_id)


async def modify_message_labels(
    message_id: str,
    options: Options,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> Message:
    """Add or remove labels from a message."""
    client = create_gmail_client(tokens)
    return await client.modify_message_labels(message_id, options, user_id=user_id)


async def trash_message(
    message_id: str, *, user_id: str = "me", tokens: Tokens | None = None
) -> Message:
    """Move a message to trash."""
    client = create_gmail_client(tokens)
    return await client.trash_message(message_id, user_id=user_id)


async def untrash_message(
    message_id: str, *, user_id: str = "me", tokens: Tokens | None = None
) -> Message:
    """Restore a message from trash."""
    client = create_gmail_client(tokens)
    return await client.untrash_message(message_id, user_id=user_id)


async def list_threads(
    options: Options | None = None,
    *,
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> list[Thread]:
    """List one page of threads."""
    client = create_gmail_client(tokens)
    return await client.list_threads(options, user_id=user_id)


async def get_thread(
    thread_id: str,
    *,
    format: ThreadFormat = "full",
    user_id: str = "me",
    tokens: Tokens | None = None,
) -> Thread:
    """Get a thread by ID."""
    client = create_gmail_client(tokens)
    return await client.get_thread(thread_id, format=format, user_id=user_id)
