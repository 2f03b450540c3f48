"""Shared helpers for the Gmail MCP library."""

from gmail_mcp_lib.utils.errors import (
    UNKNOWN_API_ERROR,
    AuthenticationError,
    GmailAPIError,
    GmailMCPError,
    TokenErrorReason,
    TokenResolutionError,
)

__all__ = [
    "UNKNOWN_API_ERROR",
    "GmailMCPError",
    "AuthenticationError",
    "TokenErrorReason",
    "TokenResolutionError",
    "GmailAPIError",
]
