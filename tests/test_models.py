"""Tests for shared Pydantic models and enums."""

import pytest
from pydantic import ValidationError

from harwsdig.errors import UnknownDirectionError, UnknownOpcodeError
from harwsdig.models.config import DisplayOptions
from harwsdig.models.har import (
    HAREntry,
    HARFile,
    HARRequest,
    HARResponse,
    WSMessage,
    is_websocket_entry,
)
from harwsdig.models.types import (
    OPCODE_NAMES,
    OPCODE_NUMBERS,
    Direction,
    Opcode,
    direction_tag,
    opcode_tag,
)


class TestOpcodes:
    def test_opcode_tags(self) -> None:
        tags = {op.value: opcode_tag(op.value) for op in Opcode}
        assert tags == {0: "CON", 1: "ASC", 2: "BIN", 8: "CLO", 9: "PIN", 10: "PON"}

    def test_lookup_tables_agree(self) -> None:
        assert len(OPCODE_NAMES) == len(OPCODE_NUMBERS) == 6
        for number, name in OPCODE_NAMES.items():
            assert OPCODE_NUMBERS[name] == number

    def test_unrecognized_opcode(self) -> None:
        with pytest.raises(UnknownOpcodeError) as exc:
            opcode_tag(99)
        assert exc.value.opcode == 99

    def test_opcode_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            opcode_tag(3)


class TestDirections:
    def test_direction_tags(self) -> None:
        assert direction_tag(Direction.SEND.value) == "SEND"
        assert direction_tag("receive") == "RECV"

    def test_unknown_direction(self) -> None:
        with pytest.raises(UnknownDirectionError):
            direction_tag("sent")


class TestHARModels:
    def test_har_entry_creation(self) -> None:
        entry = HAREntry(
            request=HARRequest(method="GET", url="wss://example.com/ws"),
            response=HARResponse(status=101, status_text="Switching Protocols"),
            resource_type="websocket",
        )
        assert entry.resource_type == "websocket"
        assert entry.web_socket_messages == ()

    def test_chrome_aliases(self) -> None:
        entry = HAREntry.model_validate(
            {
                "startedDateTime": "2021-01-01T00:00:00.000Z",
                "request": {"method": "GET", "url": "ws://example.com"},
                "response": {"status": 101, "statusText": "Switching Protocols"},
                "_resourceType": "websocket",
                "_webSocketMessages": [
                    {"type": "send", "opcode": 1, "time": 1609459200.123, "data": "hi"}
                ],
                "cache": {},
                "timings": {"send": 0},
            }
        )
        msg = entry.web_socket_messages[0]
        assert msg.direction == "send"
        assert msg.time == 1609459200.123
        assert entry.response.status_text == "Switching Protocols"

    def test_message_time_keeps_iso_string(self) -> None:
        msg = WSMessage.model_validate(
            {"type": "receive", "opcode": 2, "time": "2021-01-01T00:00:00Z", "data": "AA=="}
        )
        assert msg.time == "2021-01-01T00:00:00Z"

    def test_unknown_opcode_survives_parsing(self) -> None:
        msg = WSMessage.model_validate({"type": "send", "opcode": 99, "time": 0})
        assert msg.opcode == 99
        assert msg.data == ""

    def test_models_are_frozen(self) -> None:
        msg = WSMessage.model_validate({"type": "send", "opcode": 1, "time": 0})
        with pytest.raises(ValidationError):
            msg.data = "changed"

    def test_har_file_requires_entries(self) -> None:
        with pytest.raises(ValidationError):
            HARFile.model_validate({"log": {}})

    def test_log_keeps_raw_entries(self) -> None:
        raw = {"request": {}, "_resourceType": "xhr"}
        har = HARFile.model_validate({"log": {"version": 1.2, "entries": [raw]}})
        assert har.log.entries == (raw,)

    def test_is_websocket_entry(self) -> None:
        assert is_websocket_entry({"_resourceType": "websocket"})
        assert not is_websocket_entry({"_resourceType": "xhr"})
        assert not is_websocket_entry({})
        assert not is_websocket_entry(["websocket"])


class TestDisplayOptions:
    def test_defaults(self) -> None:
        opts = DisplayOptions()
        assert not opts.full_url and not opts.full_data and not opts.raw_data
        assert opts.url_truncate_length == 50
        assert opts.data_truncate_length == 70

    def test_negative_lengths_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplayOptions(data_truncate_length=-1)
