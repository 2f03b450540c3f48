"""Authentication module for the Gmail MCP library.

Token acquisition is left to the caller. This package only finds an existing
credential bundle and turns it into Google credentials:

Usage:
    >>> from gmail_mcp_lib.auth import build_credentials, normalize_tokens, resolve_tokens
    >>>
    >>> tokens = resolve_tokens()  # GMAIL_TOKEN, then GMAIL_TOKEN_FILE
    >>> credentials = build_credentials(normalize_tokens(tokens))
"""

from gmail_mcp_lib.auth.credentials import (
    DEFAULT_REDIRECT_URL,
    GOOGLE_TOKEN_URI,
    NormalizedTokens,
    OAuthSettings,
    build_credentials,
    normalize_tokens,
)
from gmail_mcp_lib.auth.tokens import (
    DEFAULT_TOKEN_FILE,
    GMAIL_TOKEN_ENV,
    GMAIL_TOKEN_FILE_ENV,
    Tokens,
    resolve_tokens,
)

__all__ = [
    # Resolution
    "Tokens",
    "resolve_tokens",
    "GMAIL_TOKEN_ENV",
    "GMAIL_TOKEN_FILE_ENV",
    "DEFAULT_TOKEN_FILE",
    # Normalization
    "NormalizedTokens",
    "OAuthSettings",
    "normalize_tokens",
    "build_credentials",
    "GOOGLE_TOKEN_URI",
    "DEFAULT_REDIRECT_URL",
]
