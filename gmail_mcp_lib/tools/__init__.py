"""Gmail MCP tools package.

One tool per Gmail façade operation. Each tool resolves tokens, builds a
short-lived client and returns the JSON-serialized result.
"""

from gmail_mcp_lib.tools.base import execute_tool
from gmail_mcp_lib.tools.messages import (
    gmail_create_draft,
    gmail_get_message,
    gmail_list_messages,
    gmail_modify_message_labels,
    gmail_search_messages,
    gmail_send_message,
    gmail_trash_message,
    gmail_untrash_message,
)
from gmail_mcp_lib.tools.threads import (
    gmail_get_thread,
    gmail_list_labels,
    gmail_list_threads,
)

__all__ = [
    "execute_tool",
    # Message tools
    "gmail_list_messages",
    "gmail_get_message",
    "gmail_search_messages",
    "gmail_send_message",
    "gmail_create_draft",
    "gmail_modify_message_labels",
    "gmail_trash_message",
    "gmail_untrash_message",
    # Label and thread tools
    "gmail_list_labels",
    "gmail_list_threads",
    "gmail_get_thread",
]
