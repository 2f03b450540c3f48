"""Gmail thread operations."""

from __future__ import annotations

import logging
from typing import cast

from googleapiclient.discovery import Resource

from gmail_mcp_lib.schemas.options import ListThreadsOptions
from gmail_mcp_lib.schemas.types import Thread, ThreadFormat
from gmail_mcp_lib.utils.errors import GmailAPIError

logger = logging.getLogger(__name__)


def list_threads(
    service: Resource,
    options: ListThreadsOptions,
    user_id: str = "me",
) -> list[Thread]:
    """List one page of threads matching query and labels."""
    try:
        response = (
            service.users()
            .threads()
            .list(
                userId=user_id,
                q=options.q,
                maxResults=options.max_results,
                pageToken=options.page_token,
                includeSpamTrash=options.include_spam_trash,
                labelIds=options.label_ids,
            )
            .execute()
        )
        threads = cast(list[Thread], response.get("threads") or [])
        logger.debug("Listed %d threads", len(threads))
        return threads
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to list threads: %s", error.message)
        raise error from e


def get_thread(
    service: Resource,
    thread_id: str,
    format: ThreadFormat = "full",
    user_id: str = "me",
) -> Thread:
    """Get a thread with all its messages."""
    try:
        thread = (
            service.users()
            .threads()
            .get(userId=user_id, id=thread_id, format=format)
            .execute()
        )
        msg_count = len(thread.get("messages", []))
        logger.debug("Retrieved thread %s with %d messages", thread_id, msg_count)
        return cast(Thread, thread)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to get thread %s: %s", thread_id, error.message)
        raise error from e
