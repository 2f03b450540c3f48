"""Gmail resource payloads.

These mirror the JSON returned by the Gmail API and are relayed unchanged, so
they are typed dicts rather than validated models.
"""

from __future__ import annotations

from typing import Literal, TypedDict

MessageFormat = Literal["full", "minimal", "raw", "metadata"]
ThreadFormat = Literal["full", "minimal", "metadata"]


class MessageHeader(TypedDict):
    name: str
    value: str


class MessagePartBody(TypedDict, total=False):
    size: int
    data: str
    attachmentId: str


class MessagePayload(TypedDict, total=False):
    mimeType: str
    filename: str
    headers: list[MessageHeader]
    body: MessagePartBody
    parts: list[MessagePayload]


class Message(TypedDict, total=False):
    id: str
    threadId: str
    labelIds: list[str]
    snippet: str
    historyId: str
    internalDate: str
    payload: MessagePayload
    sizeEstimate: int
    raw: str


class Thread(TypedDict, total=False):
    id: str
    snippet: str
    historyId: str
    messages: list[Message]


class Label(TypedDict, total=False):
    id: str
    name: str
    labelListVisibility: str
    messageListVisibility: str
    type: str


class Draft(TypedDict, total=False):
    id: str
    message: Message
