"""Credential bundle resolution.

Tokens are resolved from the first available source, in priority order:

1. Tokens passed directly by the caller
2. JSON in the ``GMAIL_TOKEN`` environment variable
3. A JSON file at ``GMAIL_TOKEN_FILE`` (default ``./token.json``)

Sources are never merged, and nothing is cached: the environment and the
filesystem are read again on every call.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gmail_mcp_lib.utils.errors import TokenErrorReason, TokenResolutionError

logger = logging.getLogger(__name__)

GMAIL_TOKEN_ENV = "GMAIL_TOKEN"
GMAIL_TOKEN_FILE_ENV = "GMAIL_TOKEN_FILE"
DEFAULT_TOKEN_FILE = "./token.json"

# Credential bundle in either naming convention, e.g.
# {"access_token": ...} or {"accessToken": ...}
Tokens = Mapping[str, Any]


def _parse_bundle(content: str) -> dict[str, Any]:
    """Parse JSON content that must decode to an object."""
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def resolve_tokens(
    provided: Tokens | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Tokens:
    """Resolve the effective credential bundle.

    Args:
        provided: Tokens supplied directly by the caller. Returned as-is,
            even when empty.
        environ: Environment mapping to read from. Defaults to the live
            ``os.environ``.

    Returns:
        The credential bundle from the highest-priority source present.

    Raises:
        TokenResolutionError: If the environment or file source holds invalid
            JSON, the file cannot be read, or no source is present.
    """
    if provided is not None:
        logger.debug("Using directly provided tokens")
        return provided

    env = os.environ if environ is None else environ

    env_token = env.get(GMAIL_TOKEN_ENV)
    if env_token:
        try:
            tokens = _parse_bundle(env_token)
        except ValueError as e:
            raise TokenResolutionError(
                f"{GMAIL_TOKEN_ENV} environment variable is not valid JSON",
                reason=TokenErrorReason.INVALID_JSON,
                source=GMAIL_TOKEN_ENV,
            ) from e
        logger.debug("Using tokens from %s", GMAIL_TOKEN_ENV)
        return tokens

    token_path = Path(env.get(GMAIL_TOKEN_FILE_ENV) or DEFAULT_TOKEN_FILE).resolve()
    if token_path.exists():
        try:
            content = token_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TokenResolutionError(
                f"Failed to read token file at {token_path}",
                reason=TokenErrorReason.FILE_UNREADABLE,
                source=str(token_path),
            ) from e
        try:
            tokens = _parse_bundle(content)
        except ValueError as e:
            raise TokenResolutionError(
                f"Token file at {token_path} is not valid JSON",
                reason=TokenErrorReason.INVALID_JSON,
                source=str(token_path),
            ) from e
        logger.debug("Using tokens from %s", token_path)
        return tokens

    raise TokenResolutionError(
        "No Gmail tokens found. Provide tokens via: "
        f"1) {GMAIL_TOKEN_ENV} env var, "
        f"2) {GMAIL_TOKEN_FILE_ENV} env var pointing to JSON file, "
        "3) direct function parameter",
        reason=TokenErrorReason.NOT_FOUND,
    )
