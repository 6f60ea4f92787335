"""Transcript rendering — turns selected WebSocket entries into text lines."""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterable, Iterator

from harwsdig.core.selector import extract_websocket_entries
from harwsdig.core.timefmt import format_time
from harwsdig.models.config import DisplayOptions
from harwsdig.models.har import HARFile, IndexedEntry, WSMessage
from harwsdig.models.types import Opcode, direction_tag, opcode_tag

logger = logging.getLogger(__name__)

BINARY_PLACEHOLDER = "<BINARY DATA> ({length} Bytes)"
TRUNCATION_MARKER = "... (truncated, {omitted} chars more)"
URL_ELLIPSIS = "..."


def binary_length(data: str) -> int:
    """Byte length of a base64 payload. The decoded bytes are discarded."""
    padded = data + "=" * (-len(data) % 4)
    return len(base64.b64decode(padded, altchars=b"-_"))


def escape_text(text: str) -> str:
    return text.replace("\n", "\\n").replace("\t", " ")


def format_payload(message: WSMessage, options: DisplayOptions) -> str:
    if message.opcode == Opcode.BINARY:
        return BINARY_PLACEHOLDER.format(length=binary_length(message.data))

    data = message.data
    limit = options.data_truncate_length
    if not options.full_data and len(data) > limit:
        omitted = max(0, len(data) - limit)
        data = data[:limit] + TRUNCATION_MARKER.format(omitted=omitted)

    # Only text frames are escaped; control frames are shown as recorded
    if message.opcode == Opcode.ASCII and not options.raw_data:
        data = escape_text(data)
    return data


def format_request_line(item: IndexedEntry, options: DisplayOptions) -> str:
    """One-line summary of the HTTP upgrade behind a WebSocket entry."""
    entry = item.entry
    url = entry.request.url
    if not options.full_url:
        url = url[: options.url_truncate_length] + URL_ELLIPSIS
    index = str(item.index).rjust(options.counter_width)
    return (
        f"{format_time(entry.started_date_time)} [{index}] {entry.request.method} {url}"
        f" -> {entry.response.status} {entry.response.status_text}"
    )


def format_message_line(message: WSMessage, counter: int, options: DisplayOptions) -> str:
    return " ".join(
        [
            format_time(message.time),
            str(counter).rjust(options.counter_width),
            direction_tag(message.direction),
            opcode_tag(message.opcode),
            format_payload(message, options),
        ]
    )


def format_messages(messages: Iterable[WSMessage], options: DisplayOptions) -> Iterator[str]:
    for counter, message in enumerate(messages):
        yield format_message_line(message, counter, options)


class TranscriptRenderer:
    """Renders every WebSocket entry of a HAR file, in document order."""

    def __init__(self, options: DisplayOptions | None = None) -> None:
        self.options = options or DisplayOptions()

    def render_entry(self, item: IndexedEntry) -> Iterator[str]:
        yield format_request_line(item, self.options)
        yield from format_messages(item.entry.web_socket_messages, self.options)

    def render(self, har: HARFile) -> Iterator[str]:
        logger.debug("Rendering with %s", self.options.summary())
        for item in extract_websocket_entries(har):
            logger.debug(
                "Entry %d: %d messages", item.index, len(item.entry.web_socket_messages)
            )
            yield from self.render_entry(item)
