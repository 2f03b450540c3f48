"""FastMCP server for the Gmail MCP library.

This module provides the FastMCP server instance with 11 tool registrations:

- Message Tools (8): list, get, search, send, draft, modify labels,
  trash, untrash
- Label and Thread Tools (3): list labels, list threads, get thread

Every tool accepts an optional ``tokens`` object (``TokenBundle``) in either
snake_case (``access_token``) or camelCase (``accessToken``). Without it, tokens
come from ``GMAIL_TOKEN`` or the JSON file at ``GMAIL_TOKEN_FILE``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

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
from gmail_mcp_lib.schemas.types import MessageFormat, ThreadFormat
from gmail_mcp_lib.tools import (
    gmail_create_draft,
    gmail_get_message,
    gmail_get_thread,
    gmail_list_labels,
    gmail_list_messages,
    gmail_list_threads,
    gmail_modify_message_labels,
    gmail_search_messages,
    gmail_send_message,
    gmail_trash_message,
    gmail_untrash_message,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "gmail-mcp-lib"

READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
)


@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log server startup and shutdown. No shared state is kept."""
    logger.info("Gmail MCP server ready")
    yield {}
    logger.info("Gmail MCP server shutting down...")


# =============================================================================
# Message Tool Wrappers
# =============================================================================


def _register_message_tools(mcp: FastMCP) -> None:
    """Register message and draft tools with the FastMCP server."""

    @mcp.tool(name="gmail_list_messages", annotations=READ_ONLY)
    async def gmail_list_messages_tool(
        q: str | None = None,
        max_results: int | None = None,
        page_token: str | None = None,
        include_spam_trash: bool | None = None,
        label_ids: list[str] | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """List messages in the mailbox.

        Returns a single page; pass page_token to continue.

        Args:
            q: Gmail search query.
            max_results: Max results to return.
            page_token: Pagination token.
            include_spam_trash: Include spam and trash.
            label_ids: Label IDs to filter by.
            tokens: Gmail authentication tokens.
        """
        params = ListMessagesParams(
            q=q,
            max_results=max_results,
            page_token=page_token,
            include_spam_trash=include_spam_trash,
            label_ids=label_ids,
            tokens=tokens,
        )
        return await gmail_list_messages(params)

    @mcp.tool(name="gmail_get_message", annotations=READ_ONLY)
    async def gmail_get_message_tool(
        message_id: str,
        format: MessageFormat = "full",
        tokens: TokenBundle | None = None,
    ) -> str:
        """Get a specific message by ID.

        Args:
            message_id: The message ID.
            format: Message format (full, minimal, raw, metadata).
            tokens: Gmail authentication tokens.
        """
        params = GetMessageParams(message_id=message_id, format=format, tokens=tokens)
        return await gmail_get_message(params)

    @mcp.tool(name="gmail_search_messages", annotations=READ_ONLY)
    async def gmail_search_messages_tool(
        query: str,
        max_results: int | None = None,
        page_token: str | None = None,
        include_spam_trash: bool | None = None,
        label_ids: list[str] | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Search for messages using Gmail search syntax.

        Gmail query syntax examples:
        - from:sender@example.com - Messages from specific sender
        - subject:keyword - Messages with keyword in subject
        - is:unread - Unread messages

        Args:
            query: Gmail search query.
            max_results: Max results to return.
            page_token: Pagination token.
            include_spam_trash: Include spam and trash.
            label_ids: Label IDs to filter by.
            tokens: Gmail authentication tokens.
        """
        params = SearchMessagesParams(
            query=query,
            max_results=max_results,
            page_token=page_token,
            include_spam_trash=include_spam_trash,
            label_ids=label_ids,
            tokens=tokens,
        )
        return await gmail_search_messages(params)

    @mcp.tool(
        name="gmail_send_message",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=True,
        ),
    )
    async def gmail_send_message_tool(
        to: str | list[str],
        subject: str | None = None,
        body: str | None = None,
        html: bool = False,
        thread_id: str | None = None,
        in_reply_to: str | None = None,
        label_ids: list[str] | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Send an email message.

        Args:
            to: Recipient(s); several recipients are joined with commas.
            subject: Email subject (defaults to "(no subject)").
            body: Email body.
            html: Whether body is HTML.
            thread_id: Thread to send the message in.
            in_reply_to: Message-ID header of the message being replied to.
            label_ids: Labels to apply to the sent message.
            tokens: Gmail authentication tokens.
        """
        params = SendMessageParams(
            to=to,
            subject=subject,
            body=body,
            html=html,
            thread_id=thread_id,
            in_reply_to=in_reply_to,
            label_ids=label_ids,
            tokens=tokens,
        )
        return await gmail_send_message(params)

    @mcp.tool(
        name="gmail_create_draft",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
        ),
    )
    async def gmail_create_draft_tool(
        to: str | list[str],
        subject: str | None = None,
        body: str | None = None,
        html: bool = False,
        thread_id: str | None = None,
        in_reply_to: str | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Create a draft email message.

        Args:
            to: Recipient(s); several recipients are joined with commas.
            subject: Email subject (defaults to "(no subject)").
            body: Email body.
            html: Whether body is HTML.
            thread_id: Thread to place the draft in.
            in_reply_to: Message-ID header of the message being replied to.
            tokens: Gmail authentication tokens.
        """
        params = CreateDraftParams(
            to=to,
            subject=subject,
            body=body,
            html=html,
            thread_id=thread_id,
            in_reply_to=in_reply_to,
            tokens=tokens,
        )
        return await gmail_create_draft(params)

    @mcp.tool(
        name="gmail_modify_message_labels",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
        ),
    )
    async def gmail_modify_message_labels_tool(
        message_id: str,
        add_label_ids: list[str] | None = None,
        remove_label_ids: list[str] | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Add or remove labels from a message.

        Args:
            message_id: The message ID.
            add_label_ids: Labels to add.
            remove_label_ids: Labels to remove.
            tokens: Gmail authentication tokens.
        """
        params = ModifyLabelsParams(
            message_id=message_id,
            add_label_ids=add_label_ids,
            remove_label_ids=remove_label_ids,
            tokens=tokens,
        )
        return await gmail_modify_message_labels(params)

    @mcp.tool(
        name="gmail_trash_message",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
        ),
    )
    async def gmail_trash_message_tool(
        message_id: str,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Move a message to trash.

        Args:
            message_id: The message ID.
            tokens: Gmail authentication tokens.
        """
        params = MessageIdParams(message_id=message_id, tokens=tokens)
        return await gmail_trash_message(params)

    @mcp.tool(
        name="gmail_untrash_message",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
        ),
    )
    async def gmail_untrash_message_tool(
        message_id: str,
        tokens: TokenBundle | None = None,
    ) -> str:
        """Restore a message from trash.

        Args:
            message_id: The message ID.
            tokens: Gmail authentication tokens.
        """
        params = MessageIdParams(message_id=message_id, tokens=tokens)
        return await gmail_untrash_message(params)


# =============================================================================
# Label and Thread Tool Wrappers
# =============================================================================


def _register_thread_tools(mcp: FastMCP) -> None:
    """Register label and thread tools with the FastMCP server."""

    @mcp.tool(name="gmail_list_labels", annotations=READ_ONLY)
    async def gmail_list_labels_tool(tokens: TokenBundle | None = None) -> str:
        """List all labels in the mailbox.

        Args:
            tokens: Gmail authentication tokens.
        """
        return await gmail_list_labels(ListLabelsParams(tokens=tokens))

    @mcp.tool(name="gmail_list_threads", annotations=READ_ONLY)
    async def gmail_list_threads_tool(
        q: str | None = None,
        max_results: int | None = None,
        page_token: str | None = None,
        include_spam_trash: bool | None = None,
        label_ids: list[str] | None = None,
        tokens: TokenBundle | None = None,
    ) -> str:
        """List threads in the mailbox.

        Args:
            q: Gmail search query.
            max_results: Max results to return.
            page_token: Pagination token.
            include_spam_trash: Include spam and trash.
            label_ids: Label IDs to filter by.
            tokens: Gmail authentication tokens.
        """
        params = ListThreadsParams(
            q=q,
            max_results=max_results,
            page_token=page_token,
            include_spam_trash=include_spam_trash,
            label_ids=label_ids,
            tokens=tokens,
        )
        return await gmail_list_threads(params)

    @mcp.tool(name="gmail_get_thread", annotations=READ_ONLY)
    async def gmail_get_thread_tool(
        thread_id: str,
        format: ThreadFormat = "full",
        tokens: TokenBundle | None = None,
    ) -> str:
        """Get a specific thread by ID.

        Args:
            thread_id: The thread ID.
            format: Thread format (full, minimal, metadata).
            tokens: Gmail authentication tokens.
        """
        params = GetThreadParams(thread_id=thread_id, format=format, tokens=tokens)
        return await gmail_get_thread(params)


# =============================================================================
# Server Factory
# =============================================================================


def create_server() -> FastMCP:
    """Create and configure the FastMCP server instance.

    Returns:
        FastMCP server with all Gmail tools registered.
    """
    server = FastMCP(name=SERVER_NAME, lifespan=server_lifespan)

    _register_message_tools(server)
    _register_thread_tools(server)

    logger.debug("Gmail MCP server created with 11 tools registered")
    return server


# Create the global server instance for use by __main__.py
mcp = create_server()
