"""Option records for Gmail façade operations.

Options accept snake_case or camelCase keys (``max_results`` or
``maxResults``). Unknown keys are ignored rather than rejected, so callers can
pass a wider mapping and only the recognized fields are forwarded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GmailOptions(BaseModel):
    """Base for option records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SearchMessagesOptions(GmailOptions):
    """Options for searching messages (the query is passed separately)."""

    max_results: int | None = Field(None, description="Max results to return")
    page_token: str | None = Field(None, description="Pagination token")
    include_spam_trash: bool | None = Field(
        None, description="Include spam and trash"
    )
    label_ids: list[str] | None = Field(None, description="Label IDs to filter by")


class ListMessagesOptions(SearchMessagesOptions):
    """Options for listing messages."""

    q: str | None = Field(None, description="Gmail search query")


class ListThreadsOptions(ListMessagesOptions):
    """Options for listing threads."""


class ModifyLabelsOptions(GmailOptions):
    """Labels to add to and remove from a message."""

    add_label_ids: list[str] | None = Field(None, description="Labels to add")
    remove_label_ids: list[str] | None = Field(None, description="Labels to remove")


class CreateDraftOptions(GmailOptions):
    """Envelope fields for a new draft."""

    to: str | list[str] = Field(..., description="Recipient(s)")
    subject: str | None = Field(None, description="Email subject")
    body: str | None = Field(None, description="Email body")
    html: bool = Field(False, description="Whether body is HTML")
    thread_id: str | None = Field(None, description="Thread to place the draft in")
    in_reply_to: str | None = Field(None, description="In-Reply-To message ID")


class SendMessageOptions(CreateDraftOptions):
    """Envelope fields for sending a message."""

    label_ids: list[str] | None = Field(None, description="Labels to apply")
