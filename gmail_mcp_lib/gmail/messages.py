"""Gmail message operations."""

from __future__ import annotations

import base64
import logging
from email.mime.text import MIMEText
from typing import Any, cast

from googleapiclient.discovery import Resource

from gmail_mcp_lib.schemas.options import (
    CreateDraftOptions,
    ListMessagesOptions,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
)
from gmail_mcp_lib.schemas.types import Message, MessageFormat
from gmail_mcp_lib.utils.errors import GmailAPIError

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "(no subject)"


def build_message(options: CreateDraftOptions) -> MIMEText:
    """Build a minimal single-part email from envelope options."""
    to = ",".join(options.to) if isinstance(options.to, list) else options.to
    subtype = "html" if options.html else "plain"

    message = MIMEText(options.body or "", subtype, "utf-8")
    message["To"] = to
    message["Subject"] = options.subject or DEFAULT_SUBJECT

    if options.in_reply_to:
        message["In-Reply-To"] = options.in_reply_to
        message["References"] = options.in_reply_to

    return message


def encode_message(message: MIMEText) -> str:
    """Encode a message as the URL-safe base64 ``raw`` field Gmail expects."""
    return base64.urlsafe_b64encode(message.as_bytes()).decode()


def _list(
    service: Resource,
    user_id: str,
    query: str | None,
    options: SearchMessagesOptions,
) -> list[Message]:
    response = (
        service.users()
        .messages()
        .list(
            userId=user_id,
            q=query,
            maxResults=options.max_results,
            pageToken=options.page_token,
            includeSpamTrash=options.include_spam_trash,
            labelIds=options.label_ids,
        )
        .execute()
    )
    return cast(list[Message], response.get("messages") or [])


def list_messages(
    service: Resource,
    options: ListMessagesOptions,
    user_id: str = "me",
) -> list[Message]:
    """List one page of messages."""
    try:
        messages = _list(service, user_id, options.q, options)
        logger.debug("Listed %d messages", len(messages))
        return messages
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to list messages: %s", error.message)
        raise error from e


def search_messages(
    service: Resource,
    query: str,
    options: SearchMessagesOptions,
    user_id: str = "me",
) -> list[Message]:
    """List one page of messages matching a Gmail search query."""
    try:
        messages = _list(service, user_id, query, options)
        logger.debug("Found %d messages for query %r", len(messages), query)
        return messages
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to search messages: %s", error.message)
        raise error from e


def get_message(
    service: Resource,
    message_id: str,
    format: MessageFormat = "full",
    user_id: str = "me",
) -> Message:
    """Get a specific message by ID."""
    try:
        message = (
            service.users()
            .messages()
            .get(userId=user_id, id=message_id, format=format)
            .execute()
        )
        logger.debug("Retrieved message %s", message_id)
        return cast(Message, message)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to get message %s: %s", message_id, error.message)
        raise error from e


def send_message(
    service: Resource,
    options: SendMessageOptions,
    user_id: str = "me",
) -> Message:
    """Send an email message."""
    try:
        body: dict[str, Any] = {"raw": encode_message(build_message(options))}
        if options.thread_id:
            body["threadId"] = options.thread_id
        if options.label_ids:
            body["labelIds"] = options.label_ids

        sent = service.users().messages().send(userId=user_id, body=body).execute()
        logger.info("Sent message %s", sent.get("id"))
        return cast(Message, sent)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to send message: %s", error.message)
        raise error from e


def modify_message(
    service: Resource,
    message_id: str,
    options: ModifyLabelsOptions,
    user_id: str = "me",
) -> Message:
    """Add and remove labels on a message."""
    try:
        body: dict[str, Any] = {}
        if options.add_label_ids is not None:
            body["addLabelIds"] = options.add_label_ids
        if options.remove_label_ids is not None:
            body["removeLabelIds"] = options.remove_label_ids

        modified = (
            service.users()
            .messages()
            .modify(userId=user_id, id=message_id, body=body)
            .execute()
        )
        logger.debug("Modified labels on message %s", message_id)
        return cast(Message, modified)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to modify message %s: %s", message_id, error.message)
        raise error from e


def trash_message(
    service: Resource, message_id: str, user_id: str = "me"
) -> Message:
    """Move message to trash."""
    try:
        trashed = (
            service.users().messages().trash(userId=user_id, id=message_id).execute()
        )
        logger.info("Trashed message %s", message_id)
        return cast(Message, trashed)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to trash message %s: %s", message_id, error.message)
        raise error from e


def untrash_message(
    service: Resource, message_id: str, user_id: str = "me"
) -> Message:
    """Restore message from trash."""
    try:
        restored = (
            service.users().messages().untrash(userId=user_id, id=message_id).execute()
        )
        logger.info("Untrashed message %s", message_id)
        return cast(Message, restored)
    except Exception as e:
        error = GmailAPIError.from_exception(e)
        logger.error("Failed to untrash message %s: %s", message_id, error.message)
        raise error from e
