"""HAR (HTTP Archive) models — the subset of W3C HAR 1.2 plus the Chrome
WebSocket extensions (``_resourceType``, ``_webSocketMessages``) that the
transcript renderer reads. Unknown fields are ignored."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

WEBSOCKET_RESOURCE_TYPE = "websocket"


class HARRequest(BaseModel):
    method: str
    url: str
    http_version: str = Field(alias="httpVersion", default="HTTP/1.1")

    model_config = {"populate_by_name": True, "frozen": True}


class HARResponse(BaseModel):
    status: int
    status_text: str = Field(alias="statusText", default="")
    http_version: str = Field(alias="httpVersion", default="HTTP/1.1")

    model_config = {"populate_by_name": True, "frozen": True}


class WSMessage(BaseModel):
    """A single WebSocket message as recorded in ``_webSocketMessages``.

    ``time`` is either an ISO-8601 string or Unix epoch seconds. ``data`` is
    base64 for binary messages and raw text for everything else.
    """

    direction: str = Field(alias="type")
    opcode: int
    time: float | str
    data: str = ""

    model_config = {"populate_by_name": True, "frozen": True}


class HAREntry(BaseModel):
    started_date_time: float | str = Field(alias="startedDateTime", default="")
    request: HARRequest
    response: HARResponse
    resource_type: str = Field(alias="_resourceType", default="")
    web_socket_messages: tuple[WSMessage, ...] = Field(
        alias="_webSocketMessages", default_factory=tuple
    )

    model_config = {"populate_by_name": True, "frozen": True}


class HARLog(BaseModel):
    """Entries stay as raw JSON values; only WebSocket entries are parsed
    into HAREntry, when they are selected."""

    version: Any = "1.2"
    entries: tuple[Any, ...]

    model_config = {"populate_by_name": True, "frozen": True}


class HARFile(BaseModel):
    """Top-level HAR file wrapper."""

    log: HARLog

    model_config = {"populate_by_name": True, "frozen": True}


class IndexedEntry(BaseModel):
    """An entry tagged with its zero-based position in ``log.entries``."""

    index: int
    entry: HAREntry

    model_config = {"frozen": True}


def is_websocket_entry(raw: Any) -> bool:
    """True for a raw HAR entry whose ``_resourceType`` marks WebSocket traffic."""
    return isinstance(raw, dict) and raw.get("_resourceType") == WEBSOCKET_RESOURCE_TYPE
