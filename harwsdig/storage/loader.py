"""HAR loading — reads the whole input, then parses and validates its shape."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import orjson
from pydantic import ValidationError

from harwsdig.errors import MalformedHARError
from harwsdig.models.har import HARFile

logger = logging.getLogger(__name__)


def read_input(path: Path | str | None = None, stdin: BinaryIO | None = None) -> bytes:
    """Read the complete document from ``path``, or from stdin when no path is given."""
    if path is not None:
        data = Path(path).read_bytes()
        logger.debug("Read %d bytes from %s", len(data), path)
        return data

    stream = stdin if stdin is not None else sys.stdin.buffer
    chunks = []
    while chunk := stream.read(65536):
        chunks.append(chunk)
    data = b"".join(chunks)
    logger.debug("Read %d bytes from stdin", len(data))
    return data


def parse_har(content: bytes | str) -> HARFile:
    """Parse a JSON HAR document. Raises MalformedHARError on bad JSON or shape.

    Only the ``log.entries`` list is checked here; entries are parsed when
    selected, so partial HTTP entries never fail the load.
    """
    try:
        raw = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        raise MalformedHARError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("log"), dict):
        raise MalformedHARError("Not a HAR document: missing 'log' object")
    if not isinstance(raw["log"].get("entries"), list):
        raise MalformedHARError("Not a HAR document: missing 'log.entries' list")

    try:
        har = HARFile.model_validate(raw)
    except ValidationError as e:
        raise MalformedHARError(f"Invalid HAR log: {e}") from e

    logger.debug("Parsed HAR %s with %d entries", har.log.version, len(har.log.entries))
    return har


def load_har(path: Path | str | None = None, stdin: BinaryIO | None = None) -> HARFile:
    return parse_har(read_input(path, stdin))
