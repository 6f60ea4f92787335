"""Entry selection — picks the WebSocket entries out of a HAR log."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from harwsdig.errors import MalformedHARError
from harwsdig.models.har import HAREntry, HARFile, IndexedEntry, is_websocket_entry

logger = logging.getLogger(__name__)


def extract_websocket_entries(har: HARFile) -> list[IndexedEntry]:
    """Return WebSocket entries tagged with their original position.

    Indices are assigned before filtering, so they keep gaps where plain
    HTTP entries were skipped. Only WebSocket entries are parsed; other
    entries are never inspected beyond their ``_resourceType``.
    """
    entries = har.log.entries
    selected = []
    for index, raw in enumerate(entries):
        if not is_websocket_entry(raw):
            continue
        try:
            entry = HAREntry.model_validate(raw)
        except ValidationError as e:
            raise MalformedHARError(f"Invalid WebSocket entry {index}: {e}") from e
        selected.append(IndexedEntry(index=index, entry=entry))

    logger.debug("Selected %d WebSocket entries out of %d", len(selected), len(entries))
    return selected
