"""Base utilities for Gmail MCP tools.

Every tool follows the same path: resolve tokens, build a ``GmailClient``,
run one operation, and return the result as JSON text. Failures are logged
and re-raised as ``ToolError`` so FastMCP returns an error-flagged result
instead of crashing the server.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp.exceptions import ToolError

from gmail_mcp_lib.gmail.client import GmailClient, create_gmail_client
from gmail_mcp_lib.middleware.audit_logger import CallStatus, audit_logger
from gmail_mcp_lib.schemas.tools import TokenParams

logger = logging.getLogger(__name__)


async def execute_tool(
    tool_name: str,
    params: TokenParams,
    operation: Callable[[GmailClient], Awaitable[Any]],
) -> str:
    """Execute a tool against a freshly built client with audit logging.

    Args:
        tool_name: Name of the tool being executed.
        params: Tool parameters, including the optional ``tokens`` bundle.
        operation: Coroutine function receiving the client.

    Returns:
        JSON-serialized operation result.

    Raises:
        ToolError: If token resolution or the Gmail call fails. The message is
            ``"Error: <reason>"``.
    """
    start_time = time.perf_counter()
    status: CallStatus = "success"
    error_message: str | None = None

    try:
        tokens = params.tokens.to_tokens() if params.tokens is not None else None
        client = create_gmail_client(tokens)
        result = await operation(client)
        return json.dumps(result)

    except Exception as e:
        status = "error"
        error_message = str(e)
        logger.error("Tool error: %s", error_message)
        raise ToolError(f"Error: {error_message}") from e
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        audit_logger.log_tool_call(
            tool_name=tool_name,
            parameters=params.model_dump(exclude_none=True),
            status=status,
            token_source="environment" if params.tokens is None else "parameter",
            error=error_message,
            duration_ms=duration_ms,
        )
