"""Enums and lookup tables for WebSocket message records."""

from __future__ import annotations

from enum import Enum

from harwsdig.errors import UnknownDirectionError, UnknownOpcodeError


class Direction(str, Enum):
    SEND = "send"
    RECEIVE = "receive"


class Opcode(int, Enum):
    CONTINUATION = 0x0
    ASCII = 0x1
    BINARY = 0x2
    CLOSE = 0x8
    PING = 0x9
    PONG = 0xA


# Single source for both lookup directions
OPCODES: list[tuple[int, str]] = [(op.value, op.name) for op in Opcode]

OPCODE_NAMES: dict[int, str] = {number: name for number, name in OPCODES}
OPCODE_NUMBERS: dict[str, int] = {name: number for number, name in OPCODES}

DIRECTION_TAGS: dict[str, str] = {
    Direction.RECEIVE.value: "RECV",
    Direction.SEND.value: "SEND",
}

OPCODE_TAG_LENGTH = 3


def opcode_tag(opcode: int) -> str:
    """Three-character tag for an opcode, e.g. 1 -> "ASC"."""
    try:
        name = OPCODE_NAMES[opcode]
    except KeyError:
        raise UnknownOpcodeError(opcode) from None
    return name[:OPCODE_TAG_LENGTH]


def direction_tag(direction: str) -> str:
    try:
        return DIRECTION_TAGS[direction]
    except KeyError:
        raise UnknownDirectionError(direction) from None
