"""Schemas for the Gmail MCP library.

Exports Gmail payload types, façade option records and tool parameter models.
"""

from gmail_mcp_lib.schemas.options import (
    CreateDraftOptions,
    ListMessagesOptions,
    ListThreadsOptions,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
)
from gmail_mcp_lib.schemas.tools import (
    CreateDraftParams,
    GetMessageParams,
    GetThreadParams,
    ListLabelsParams,
    ListMessagesParams,
    ListThreadsParams,
    MessageIdParams,
    ModifyLabelsParams,
    SearchMessagesParams,
    SendMessageParams,
    TokenBundle,
)
from gmail_mcp_lib.schemas.types import (
    Draft,
    Label,
    Message,
    MessageFormat,
    MessageHeader,
    MessagePartBody,
    MessagePayload,
    Thread,
    ThreadFormat,
)

__all__ = [
    # Payloads
    "Message",
    "MessageHeader",
    "MessagePartBody",
    "MessagePayload",
    "Thread",
    "Label",
    "Draft",
    "MessageFormat",
    "ThreadFormat",
    # Options
    "ListMessagesOptions",
    "SearchMessagesOptions",
    "ListThreadsOptions",
    "ModifyLabelsOptions",
    "SendMessageOptions",
    "CreateDraftOptions",
    # Tool params
    "TokenBundle",
    "ListMessagesParams",
    "GetMessageParams",
    "SearchMessagesParams",
    "SendMessageParams",
    "CreateDraftParams",
    "ModifyLabelsParams",
    "MessageIdParams",
    "ListLabelsParams",
    "ListThreadsParams",
    "GetThreadParams",
]
