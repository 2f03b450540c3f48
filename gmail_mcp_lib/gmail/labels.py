"""Gmail label operations."""

from __future__ import annotations

import logging
from typing import cast

from googleapiclient.discovery import Resource

from gmail_mcp_lib.schemas.types import Label
from gmail_mcp_lib.utils.errors import GmailAPIError

logger = logging.getLogger(__name__)


def list_labels(service: Resource, user_id: str = "me") -> list[Label]:
    """List all labels in the mailbox."""
    try:
        response = service.users().labels().list(userId=user_id).execute()
        labels = cast(list[Label], response.get("labels") or [])
        logger.debug("Listed %d labels", len(labels))
        return labels
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to list labels: %s", error.message)
        raise error from e
