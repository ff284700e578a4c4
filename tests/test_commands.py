from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyteslaowner._api.commands import COMMANDS, execute_command, make_calendar_entry
from pyteslaowner._constants import clamp
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaHttpStatusError
from pyteslaowner.models.control import Command


@dataclass
class _RecordingTransport:
    calls: list[dict[str, Any]] = field(default_factory=list)
    fail_with: Exception | None = None

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        self.calls.append({"method": method, "path": path, "headers": headers, "params": params, "body": body})
        if self.fail_with is not None:
            raise self.fail_with
        return {"response": {"result": True, "reason": ""}}


def test_clamp_two_sided() -> None:
    assert clamp(30, 50, 100) == 50
    assert clamp(150, 50, 100) == 100
    assert clamp(75, 50, 100) == 75


def test_clamp_temperature_range() -> None:
    assert clamp(10, 15, 28) == 15
    assert clamp(30, 15, 28) == 28
    assert clamp(15, 15, 28) == 15
    assert clamp(28, 15, 28) == 28


def test_every_command_has_a_table_row() -> None:
    assert set(COMMANDS) == set(Command)
    for name, spec in COMMANDS.items():
        assert spec.name == name
        assert spec.endpoint


@pytest.mark.parametrize(
    ("command", "endpoint"),
    [
        (Command.START_CHARGE, "charge_start"),
        (Command.OPEN_CHARGE_PORT, "charge_port_door_open"),
        (Command.MEDIA_PLAY_NEXT, "media_next_track"),
        (Command.CLIMATE_START, "auto_conditioning_start"),
        (Command.OPEN_TRUNK, "actuate_trunk"),
        (Command.SUN_ROOF_MOVE, "sun_roof_control"),
        (Command.CALENDAR, "upcoming_calendar_entries"),
        (Command.HOMELINK, "trigger_homelink"),
    ],
)
def test_command_endpoints(command: Command, endpoint: str) -> None:
    assert COMMANDS[command].endpoint == endpoint


def test_commands_without_payload() -> None:
    assert COMMANDS[Command.HONK_HORN].payload() is None
    assert COMMANDS[Command.WAKE_UP].payload() is None


def test_set_charge_limit_payload_is_clamped() -> None:
    spec = COMMANDS[Command.SET_CHARGE_LIMIT]
    assert spec.payload(30) == {"percent": 50}
    assert spec.payload(150) == {"percent": 100}
    assert spec.payload(80) == {"percent": 80}


def test_set_temps_payload_clamps_and_defaults_passenger() -> None:
    spec = COMMANDS[Command.SET_TEMPS]
    assert spec.payload(10) == {"driver_temp": 15, "passenger_temp": 15}
    assert spec.payload(21.5, 30) == {"driver_temp": 21.5, "passenger_temp": 28}


def test_seat_heater_and_window_payloads() -> None:
    assert COMMANDS[Command.SEAT_HEATER].payload(0, 3) == {"heater": 0, "level": 3}
    assert COMMANDS[Command.WINDOW_CONTROL].payload("vent") == {"command": "vent", "lat": 0, "lon": 0}
    assert COMMANDS[Command.SET_VALET_MODE].payload(True, "1234") == {"on": True, "password": "1234"}
    assert COMMANDS[Command.SUN_ROOF_MOVE].payload(40) == {"state": "move", "percent": 40}


def test_navigation_request_payload_shape() -> None:
    payload = COMMANDS[Command.NAVIGATION_REQUEST].payload("Home", "1 Main St", "en-US")
    assert payload is not None
    assert payload["type"] == "share_ext_content_raw"
    assert payload["value"]["android.intent.extra.TEXT"] == "1 Main St"
    assert payload["locale"] == "en-US"
    assert isinstance(payload["timestamp_ms"], int)


def test_make_calendar_entry_defaults() -> None:
    entry = make_calendar_entry(phone_name="Pixel")
    data = entry["calendar_data"]
    event = data["calendars"][0]["events"][0]
    assert data["phone_name"] == "Pixel"
    assert event["name"] == "Event name"
    assert event["location"] == ""
    assert event["start"] > 0


@pytest.mark.asyncio
async def test_execute_command_sends_payload_as_query_and_body() -> None:
    transport = _RecordingTransport()
    result = await execute_command(TeslaConfig(), transport, Command.SET_CHARGE_LIMIT, 120)

    assert result.ok
    call = transport.calls[0]
    assert call["method"] == "GET"
    assert call["path"] == "set_charge_limit"
    assert call["params"] == {"percent": "100"}
    assert call["body"] == {"percent": 100}


@pytest.mark.asyncio
async def test_execute_command_accepts_plain_names() -> None:
    transport = _RecordingTransport()
    await execute_command(TeslaConfig(), transport, "set_sentry_mode", True)

    call = transport.calls[0]
    assert call["path"] == "set_sentry_mode"
    assert call["params"] == {"on": "true"}
    assert call["body"] == {"on": True}


@pytest.mark.asyncio
async def test_execute_command_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown command"):
        await execute_command(TeslaConfig(), _RecordingTransport(), "self_destruct")


@pytest.mark.asyncio
async def test_execute_command_reports_errors_in_result() -> None:
    error = TeslaHttpStatusError("Error response: 408", status_code=408, endpoint="wake_up")
    transport = _RecordingTransport(fail_with=error)

    result = await execute_command(TeslaConfig(), transport, Command.WAKE_UP)

    assert not result.ok
    assert result.error is error
    assert result.status == 408
    assert result.body is None
