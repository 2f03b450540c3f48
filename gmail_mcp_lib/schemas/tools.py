"""Pydantic parameter models for Gmail MCP tools.

Every tool accepts an optional ``tokens`` bundle. When it is omitted the
server falls back to ``GMAIL_TOKEN`` and then ``GMAIL_TOKEN_FILE``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from gmail_mcp_lib.schemas.options import (
    CreateDraftOptions,
    GmailOptions,
    ListMessagesOptions,
    ListThreadsOptions,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
)
from gmail_mcp_lib.schemas.types import MessageFormat, ThreadFormat


class TokenBundle(BaseModel):
    """OAuth credential bundle as supplied with a tool call.

    The published schema names the camelCase keys; snake_case keys are
    accepted too, and a non-empty snake_case value wins over its camelCase
    twin. Unrecognized keys are kept.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    access_token: str | None = Field(None, description="OAuth access token")
    refresh_token: str | None = Field(None, description="OAuth refresh token")
    expiry_date: int | float | None = Field(
        None, description="Access token expiry in epoch milliseconds"
    )
    token_type: str | None = Field(None, description="Token type, usually Bearer")

    @model_validator(mode="before")
    @classmethod
    def _prefer_snake_case(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        for name in cls.model_fields:
            if data.get(name) not in (None, ""):
                data.pop(to_camel(name), None)
        return data

    def to_tokens(self) -> dict[str, Any]:
        """Plain mapping for token normalization, without unset fields."""
        return self.model_dump(exclude_none=True)


class TokenParams(GmailOptions):
    """Common ``tokens`` parameter shared by all tools."""

    tokens: TokenBundle | None = Field(
        None,
        description="Gmail authentication tokens",
    )


# =============================================================================
# Message Tools
# =============================================================================


class ListMessagesParams(ListMessagesOptions, TokenParams):
    """Parameters for gmail_list_messages tool."""


class GetMessageParams(TokenParams):
    """Parameters for gmail_get_message tool."""

    message_id: str = Field(..., description="The message ID")
    format: MessageFormat = Field("full", description="Message format")


class SearchMessagesParams(SearchMessagesOptions, TokenParams):
    """Parameters for gmail_search_messages tool."""

    query: str = Field(..., description="Gmail search query")


class SendMessageParams(SendMessageOptions, TokenParams):
    """Parameters for gmail_send_message tool."""


class CreateDraftParams(CreateDraftOptions, TokenParams):
    """Parameters for gmail_create_draft tool."""


class ModifyLabelsParams(ModifyLabelsOptions, TokenParams):
    """Parameters for gmail_modify_message_labels tool."""

    message_id: str = Field(..., description="The message ID")


class MessageIdParams(TokenParams):
    """Parameters for gmail_trash_message and gmail_untrash_message tools."""

    message_id: str = Field(..., description="The message ID")


# =============================================================================
# Label and Thread Tools
# =============================================================================


class ListLabelsParams(TokenParams):
    """Parameters for gmail_list_labels tool."""


class ListThreadsParams(ListThreadsOptions, TokenParams):
    """Parameters for gmail_list_threads tool."""


class GetThreadParams(TokenParams):
    """Parameters for gmail_get_thread tool."""

    thread_id: str = Field(..., description="The thread ID")
    format: ThreadFormat = Field("full", description="Thread format")
