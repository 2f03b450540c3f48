"""Credential normalization and Google credential construction.

Credential bundles arrive in either the OAuth2 snake_case convention
(``access_token``) or camelCase (``accessToken``). They are normalized field
by field into ``NormalizedTokens`` and then turned into
``google.oauth2.credentials.Credentials`` for the Gmail service.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from google.oauth2.credentials import Credentials
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
DEFAULT_REDIRECT_URL = "http://localhost:3000/callback"

# canonical name -> camelCase alternative
TOKEN_FIELDS: dict[str, str] = {
    "access_token": "accessToken",
    "refresh_token": "refreshToken",
    "expiry_date": "expiryDate",
    "token_type": "tokenType",
}


class NormalizedTokens(BaseModel):
    """Credential bundle in canonical snake_case form.

    Values are carried through unvalidated; only the field names are fixed.
    """

    model_config = ConfigDict(frozen=True)

    access_token: Any = Field(default=None, description="OAuth access token")
    refresh_token: Any = Field(default=None, description="OAuth refresh token")
    expiry_date: Any = Field(default=None, description="Expiry as epoch milliseconds")
    token_type: Any = Field(default=None, description="Token type, e.g. Bearer")


class OAuthSettings(BaseModel):
    """OAuth application settings used to build credentials.

    Only ``client_id``, ``client_secret`` and ``token_uri`` matter for
    refreshing an access token. ``redirect_url`` is carried for callers that
    run their own consent flow against the same application.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str | None = None
    client_secret: str | None = None
    redirect_url: str = DEFAULT_REDIRECT_URL
    token_uri: str = GOOGLE_TOKEN_URI

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OAuthSettings:
        """Read settings from ``GOOGLE_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            client_id=env.get("GOOGLE_CLIENT_ID") or None,
            client_secret=env.get("GOOGLE_CLIENT_SECRET") or None,
            redirect_url=env.get("GOOGLE_REDIRECT_URL") or DEFAULT_REDIRECT_URL,
        )


def _pick(tokens: Mapping[str, Any], name: str, alternative: str) -> Any:
    value = tokens.get(name)
    if value is None or value == "":
        value = tokens.get(alternative)
    return value


def normalize_tokens(tokens: Mapping[str, Any]) -> NormalizedTokens:
    """Map a bundle in either naming convention to canonical field names.

    Each field prefers its snake_case key and falls back to the camelCase key.
    Fields are resolved independently, so mixed bundles are fine. Absent
    fields stay ``None``; this never raises on missing data.
    """
    return NormalizedTokens(
        **{name: _pick(tokens, name, camel) for name, camel in TOKEN_FIELDS.items()}
    )


def _parse_expiry(expiry_date: Any) -> datetime | None:
    """Convert epoch milliseconds to the naive UTC datetime google-auth uses."""
    if expiry_date is None:
        return None
    try:
        expiry = datetime.fromtimestamp(float(expiry_date) / 1000, tz=UTC)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        logger.warning("Failed to parse token expiry '%s': %s", expiry_date, e)
        return None
    return expiry.replace(tzinfo=None)


def build_credentials(
    tokens: NormalizedTokens,
    settings: OAuthSettings | None = None,
) -> Credentials:
    """Build Google credentials from normalized tokens.

    Args:
        tokens: Canonical credential bundle.
        settings: OAuth application settings. Read from the environment when
            omitted.

    Returns:
        Credentials ready to pass to the Gmail discovery client.
    """
    if settings is None:
        settings = OAuthSettings.from_env()

    return Credentials(  # type: ignore[no-untyped-call]
        token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_uri=settings.token_uri,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        expiry=_parse_expiry(tokens.expiry_date),
    )
