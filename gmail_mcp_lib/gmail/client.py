"""Authenticated Gmail API façade."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import Resource, build
from googleapiclient.http import HttpRequest
from pydantic import BaseModel

from gmail_mcp_lib.auth.credentials import (
    OAuthSettings,
    build_credentials,
    normalize_tokens,
)
from gmail_mcp_lib.auth.tokens import Tokens, resolve_tokens
from gmail_mcp_lib.gmail import drafts, labels, messages, threads
from gmail_mcp_lib.schemas.options import (
    CreateDraftOptions,
    ListMessagesOptions,
    ListThreadsOptions,
    ModifyLabelsOptions,
    SearchMessagesOptions,
    SendMessageOptions,
)
from gmail_mcp_lib.schemas.types import (
    Draft,
    Label,
    Message,
    MessageFormat,
    Thread,
    ThreadFormat,
)

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseModel)

Options = BaseModel | Mapping[str, Any]


def _coerce_options(model: type[OptionsT], options: Options | None) -> OptionsT:
    """Validate options into ``model``, dropping unrecognized fields."""
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        options = options.model_dump()
    return model.model_validate(options or {})


class GmailClient:
    """One authenticated Gmail service plus one method per operation.

    The credential bundle may use snake_case or camelCase field names. Every
    method is an independent round trip; the blocking SDK call runs in a
    worker thread so the event loop is never held. Each request gets its own
    ``httplib2.Http``, which is not safe to share between threads.

    Example:
        >>> client = GmailClient({"accessToken": "ya29..."})
        >>> labels = await client.list_labels()
    """

    def __init__(self, tokens: Tokens, settings: OAuthSettings | None = None) -> None:
        """Build credentials and the Gmail service.

        Args:
            tokens: Credential bundle in either naming convention.
            settings: OAuth application settings. Read from ``GOOGLE_*``
                environment variables when omitted.
        """
        self._settings = settings if settings is not None else OAuthSettings.from_env()
        self._credentials = build_credentials(normalize_tokens(tokens), self._settings)
        self._service = build(
            "gmail",
            "v1",
            credentials=self._credentials,
            cache_discovery=False,
            requestBuilder=self._build_request,
        )
        logger.debug("Created Gmail service")

    def _build_request(self, http: Any, *args: Any, **kwargs: Any) -> HttpRequest:
        # The service-wide `http` is ignored in favour of a fresh transport.
        return HttpRequest(
            AuthorizedHttp(self._credentials, http=httplib2.Http()), *args, **kwargs
        )

    @property
    def credentials(self) -> Credentials:
        """Google credentials backing this client."""
        return self._credentials

    @property
    def service(self) -> Resource:
        """Underlying Gmail API resource."""
        return self._service

    # =========================================================================
    # Messages
    # =========================================================================

    async def list_messages(
        self, options: Options | None = None, *, user_id: str = "me"
    ) -> list[Message]:
        """List one page of messages. Missing results yield ``[]``."""
        opts = _coerce_options(ListMessagesOptions, options)
        return await asyncio.to_thread(
            messages.list_messages, self._service, opts, user_id
        )

    async def get_message(
        self,
        message_id: str,
        *,
        format: MessageFormat = "full",
        user_id: str = "me",
    ) -> Message:
        """Get a message by ID."""
        return await asyncio.to_thread(
            messages.get_message, self._service, message_id, format, user_id
        )

    async def search_messages(
        self, query: str, options: Options | None = None, *, user_id: str = "me"
    ) -> list[Message]:
        """Search messages with Gmail query syntax."""
        opts = _coerce_options(SearchMessagesOptions, options)
        return await asyncio.to_thread(
            messages.search_messages, self._service, query, opts, user_id
        )

    async def send_message(self, options: Options, *, user_id: str = "me") -> Message:
        """Send a message built from envelope options."""
        opts = _coerce_options(SendMessageOptions, options)
        return await asyncio.to_thread(
            messages.send_message, self._service, opts, user_id
        )

    async def modify_message_labels(
        self, message_id: str, options: Options, *, user_id: str = "me"
    ) -> Message:
        """Add and remove labels on a message."""
        opts = _coerce_options(ModifyLabelsOptions, options)
        return await asyncio.to_thread(
            messages.modify_message, self._service, message_id, opts, user_id
        )

    async def trash_message(self, message_id: str, *, user_id: str = "me") -> Message:
        """Move a message to trash."""
        return await asyncio.to_thread(
            messages.trash_message, self._service, message_id, user_id
        )

    async def untrash_message(
        self, message_id: str, *, user_id: str = "me"
    ) -> Message:
        """Restore a message from trash."""
        return await asyncio.to_thread(
            messages.untrash_message, self._service, message_id, user_id
        )

    # =========================================================================
    # Drafts and Labels
    # =========================================================================

    async def create_draft(self, options: Options, *, user_id: str = "me") -> Draft:
        """Create a draft built from envelope options."""
        opts = _coerce_options(CreateDraftOptions, options)
        return await asyncio.to_thread(drafts.create_draft, self._service, opts, user_id)

    async def list_labels(self, *, user_id: str = "me") -> list[Label]:
        """List all labels in the mailbox."""
        return await asyncio.to_thread(labels.list_labels, self._service, user_id)

    # =========================================================================
    # Threads
    # =========================================================================

    async def list_threads(
        self, options: Options | None = None, *, user_id: str = "me"
    ) -> list[Thread]:
        """List one page of threads. Missing results yield ``[]``."""
        opts = _coerce_options(ListThreadsOptions, options)
        return await asyncio.to_thread(threads.list_threads, self._service, opts, user_id)

    async def get_thread(
        self,
        thread_id: str,
        *,
        format: ThreadFormat = "full",
        user_id: str = "me",
    ) -> Thread:
        """Get a thread with its messages."""
        return await asyncio.to_thread(
            threads.get_thread, self._service, thread_id, format, user_id
        )


def create_gmail_client(
    tokens: Tokens | None = None,
    settings: OAuthSettings | None = None,
) -> GmailClient:
    """Resolve tokens and build a ``GmailClient``.

    Args:
        tokens: Tokens to use directly. When omitted, ``GMAIL_TOKEN`` and then
            ``GMAIL_TOKEN_FILE`` are consulted.
        settings: OAuth application settings.

    Raises:
        TokenResolutionError: If no credential bundle can be resolved.
    """
    return GmailClient(resolve_tokens(tokens), settings)
