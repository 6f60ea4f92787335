"""harwsdig — dump WebSocket sessions recorded in HAR captures."""

__version__ = "0.1.0"
