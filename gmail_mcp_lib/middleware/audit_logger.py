"""JSON-line audit trail for Gmail tool calls.

One line per tool call is written to stderr, never stdout, which carries the
STDIO transport. Credential bundles and message bodies are masked before the
line is built.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"

# Matched after lowercasing and dropping underscores,
# so access_token and accessToken hit the same entry.
SENSITIVE_KEYS = frozenset(
    {
        "tokens",
        "token",
        "accesstoken",
        "refreshtoken",
        "clientsecret",
        "authorization",
        "body",
        "raw",
    }
)

CallStatus = Literal["success", "error"]
TokenSource = Literal["parameter", "environment"]


def redact(value: Any) -> Any:
    """Return ``value`` with sensitive mapping entries masked, recursively."""
    if isinstance(value, dict):
        return {
            key: REDACTED
            if str(key).lower().replace("_", "") in SENSITIVE_KEYS
            else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact(item) for item in value]
    return value


class AuditEntry(BaseModel):
    """One tool call."""

    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="ISO 8601 time the entry was built",
    )
    tool_name: str = Field(..., description="Registered tool name")
    token_source: TokenSource | None = Field(
        default=None,
        description="Whether tokens came from the call or from the environment",
    )
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Redacted call arguments"
    )
    status: CallStatus | None = None
    error: str | None = None
    duration_ms: float | None = None


class AuditLogger:
    """Writes ``{"audit": {...}}`` lines to stderr when enabled."""

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log(self, entry: AuditEntry) -> None:
        if not self._enabled:
            return
        try:
            line = json.dumps({"audit": entry.model_dump(exclude_none=True)}, default=str)
        except (TypeError, ValueError) as e:
            logger.error("Failed to serialize audit entry for %s: %s", entry.tool_name, e)
            return
        print(line, file=sys.stderr, flush=True)

    def log_tool_call(
        self,
        tool_name: str,
        parameters: dict[str, Any],
        status: CallStatus,
        *,
        token_source: TokenSource | None = None,
        error: str | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Record a finished tool call.

        Args:
            tool_name: Registered tool name.
            parameters: Call arguments; masked with ``redact`` before writing.
            status: ``"success"`` or ``"error"``.
            token_source: ``"parameter"`` when the call carried its own tokens,
                ``"environment"`` when they were resolved from env or file.
            error: Failure message for error calls.
            duration_ms: Wall time of the call.
        """
        self.log(
            AuditEntry(
                tool_name=tool_name,
                token_source=token_source,
                parameters=redact(parameters),
                status=status,
                error=error,
                duration_ms=round(duration_ms, 2) if duration_ms is not None else None,
            )
        )


def is_audit_enabled() -> bool:
    """Read ``AUDIT_LOG``; anything but false/0/no/off keeps auditing on."""
    return os.getenv("AUDIT_LOG", "true").strip().lower() not in ("false", "0", "no", "off")


audit_logger = AuditLogger(enabled=is_audit_enabled())
