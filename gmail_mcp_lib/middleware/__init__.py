"""Middleware for Gmail MCP tool calls."""

from gmail_mcp_lib.middleware.audit_logger import (
    AuditEntry,
    AuditLogger,
    audit_logger,
    is_audit_enabled,
    redact,
)

__all__ = [
    "AuditEntry",
    "AuditLogger",
    "audit_logger",
    "is_audit_enabled",
    "redact",
]
