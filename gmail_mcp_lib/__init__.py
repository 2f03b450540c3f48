"""Gmail API library and MCP tool server.

Usage:
    >>> from gmail_mcp_lib import create_gmail_client, list_labels
    >>>
    >>> client = create_gmail_client({"accessToken": "ya29..."})
    >>> messages = await client.list_messages({"q": "is:unread"})
    >>>
    >>> # Or one call, resolving GMAIL_TOKEN / GMAIL_TOKEN_FILE
    >>> labels = await list_labels()
"""

from gmail_mcp_lib.api import (
    create_draft,
    get_message,
    get_thread,
    list_labels,
    list_messages,
    list_threads,
    modify_message_labels,
    search_messages,
    send_message,
    trash_message,
    untrash_message,
)
from gmail_mcp_lib.auth import (
    NormalizedTokens,
    OAuthSettings,
    Tokens,
    normalize_tokens,
    resolve_tokens,
)
from gmail_mcp_lib.gmail.client import GmailClient, create_gmail_client
from gmail_mcp_lib.schemas import (
    CreateDraftOptions,
    Draft,
    Label,
    ListMessagesOptions,
    ListThreadsOptions,
    Message,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
    Thread,
)
from gmail_mcp_lib.utils.errors import (
    AuthenticationError,
    GmailAPIError,
    GmailMCPError,
    TokenErrorReason,
    TokenResolutionError,
)

__version__ = "1.0.0"

__all__ = [
    # Client
    "GmailClient",
    "create_gmail_client",
    # Standalone operations
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
    # Tokens
    "Tokens",
    "NormalizedTokens",
    "OAuthSettings",
    "resolve_tokens",
    "normalize_tokens",
    # Types
    "Message",
    "Thread",
    "Label",
    "Draft",
    "ListMessagesOptions",
    "SearchMessagesOptions",
    "ListThreadsOptions",
    "ModifyLabelsOptions",
    "SendMessageOptions",
    "CreateDraftOptions",
    # Errors
    "GmailMCPError",
    "AuthenticationError",
    "TokenErrorReason",
    "TokenResolutionError",
    "GmailAPIError",
]
