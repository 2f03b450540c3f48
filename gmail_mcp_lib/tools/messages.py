"""Gmail message tools."""

from __future__ import annotations

from gmail_mcp_lib.schemas.tools import (
    CreateDraftParams,
    GetMessageParams,
    ListMessagesParams,
    MessageIdParams,
    ModifyLabelsParams,
    SearchMessagesParams,
    SendMessageParams,
)
from gmail_mcp_lib.tools.base import execute_tool


async def gmail_list_messages(params: ListMessagesParams) -> str:
    """List messages in the mailbox."""
    return await execute_tool(
        tool_name="gmail_list_messages",
        params=params,
        operation=lambda client: client.list_messages(params),
    )


async def gmail_get_message(params: GetMessageParams) -> str:
    """Get a specific message by ID."""
    return await execute_tool(
        tool_name="gmail_get_message",
        params=params,
        operation=lambda client: client.get_message(
            params.message_id, format=params.format
        ),
    )


async def gmail_search_messages(params: SearchMessagesParams) -> str:
    """Search for messages using Gmail search syntax."""
    return await execute_tool(
        tool_name="gmail_search_messages",
        params=params,
        operation=lambda client: client.search_messages(params.query, params),
    )


async def gmail_send_message(params: SendMessageParams) -> str:
    """Send an email message."""
    return await execute_tool(
        tool_name="gmail_send_message",
        params=params,
        operation=lambda client: client.send_message(params),
    )


async def gmail_create_draft(params: CreateDraftParams) -> str:
    """Create a draft email message."""
    return await execute_tool(
        tool_name="gmail_create_draft",
        params=params,
        operation=lambda client: client.create_draft(params),
    )


async def gmail_modify_message_labels(params: ModifyLabelsParams) -> str:
    """Add or remove labels from a message."""
    return await execute_tool(
        tool_name="gmail_modify_message_labels",
        params=params,
        operation=lambda client: client.modify_message_labels(
            params.message_id, params
        ),
    )


async def gmail_trash_message(params: MessageIdParams) -> str:
    """Move a message to trash."""
    return await execute_tool(
        tool_name="gmail_trash_message",
        params=params,
        operation=lambda client: client.trash_message(params.message_id),
    )


async def gmail_untrash_message(params: MessageIdParams) -> str:
    """Restore a message from trash."""
    return await execute_tool(
        tool_name="gmail_untrash_message",
        params=params,
        operation=lambda client: client.untrash_message(params.message_id),
    )
