"""Gmail API operations module."""

from gmail_mcp_lib.gmail.drafts import create_draft
from gmail_mcp_lib.gmail.labels import list_labels
from gmail_mcp_lib.gmail.messages import (
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
from gmail_mcp_lib.gmail.threads import get_thread, list_threads
from gmail_mcp_lib.gmail.client import GmailClient, create_gmail_client  # noqa: I001

__all__ = [
    "GmailClient",
    "create_gmail_client",
    "list_messages",
    "search_messages",
    "get_message",
    "send_message",
    "modify_message",
    "trash_message",
    "untrash_message",
    "build_message",
    "encode_message",
    "create_draft",
    "list_labels",
    "list_threads",
    "get_thread",
]
