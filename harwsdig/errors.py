"""Error types raised while loading and rendering HAR captures."""

from __future__ import annotations


class HarWsDigError(ValueError):
    """Base class for all harwsdig data errors."""


class MalformedHARError(HarWsDigError):
    """Input is not JSON or lacks the log/entries shape."""


class UnknownOpcodeError(HarWsDigError):
    def __init__(self, opcode: int) -> None:
        super().__init__(f"Unknown WebSocket opcode: {opcode}")
        self.opcode = opcode


class UnknownDirectionError(HarWsDigError):
    def __init__(self, direction: str) -> None:
        super().__init__(f"Unknown WebSocket message direction: {direction!r}")
        self.direction = direction
