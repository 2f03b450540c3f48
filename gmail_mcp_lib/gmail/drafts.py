"""Gmail draft operations."""

from __future__ import annotations

import logging
from typing import Any, cast

from googleapiclient.discovery import Resource

from gmail_mcp_lib.gmail.messages import build_message, encode_message
from gmail_mcp_lib.schemas.options import CreateDraftOptions
from gmail_mcp_lib.schemas.types import Draft
from gmail_mcp_lib.utils.errors import GmailAPIError

logger = logging.getLogger(__name__)


def create_draft(
    service: Resource,
    options: CreateDraftOptions,
    user_id: str = "me",
) -> Draft:
    """Create a draft from envelope options."""
    try:
        message: dict[str, Any] = {"raw": encode_message(build_message(options))}
        if options.thread_id:
            message["threadId"] = options.thread_id

        draft = (
            service.users()
            .drafts()
            .create(userId=user_id, body={"message": message})
            .execute()
        )
        logger.info("Created draft %s", draft.get("id"))
        return cast(Draft, draft)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to create draft: %s", error.message)
        raise error from e
