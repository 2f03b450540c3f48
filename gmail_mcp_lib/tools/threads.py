"""Gmail thread and label tools."""

from __future__ import annotations

from gmail_mcp_lib.schemas.tools import (
    GetThreadParams,
    ListLabelsParams,
    ListThreadsParams,
)
from gmail_mcp_lib.tools.base import execute_tool


async def gmail_list_labels(params: ListLabelsParams) -> str:
    """List all labels in the mailbox."""
    return await execute_tool(
        tool_name="gmail_list_labels",
        params=params,
        operation=lambda client: client.list_labels(),
    )


async def gmail_list_threads(params: ListThreadsParams) -> str:
    """List threads in the mailbox."""
    return await execute_tool(
        tool_name="gmail_list_threads",
        params=params,
        operation=lambda client: client.list_threads(params),
    )


async def gmail_get_thread(params: GetThreadParams) -> str:
    """Get a specific thread by ID."""
    return await execute_tool(
        tool_name="gmail_get_thread",
        params=params,
        operation=lambda client: client.get_thread(
            params.thread_id, format=params.format
        ),
    )
