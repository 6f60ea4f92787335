"""Shared Pydantic models and enums used across harwsdig modules."""

from harwsdig.models.types import (
    OPCODE_NAMES,
    OPCODE_NUMBERS,
    Direction,
    Opcode,
    direction_tag,
    opcode_tag,
)

__all__ = [
    "OPCODE_NAMES",
    "OPCODE_NUMBERS",
    "Direction",
    "Opcode",
    "direction_tag",
    "opcode_tag",
]
