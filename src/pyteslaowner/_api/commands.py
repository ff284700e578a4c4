"""Remote command table.

Every state-changing operation is a :class:`CommandSpec` row: the portal
endpoint, a payload builder taking the operation's arguments, and the
numeric clamp rules applied to the built payload.  :func:`execute_command`
is the single code path that sends any of them.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pyteslaowner._api._common import post_resource
from pyteslaowner._constants import CHARGE_RANGE, CHARGE_STORAGE, MAX_TEMP, MIN_TEMP, clamp
from pyteslaowner._transport import Transport
from pyteslaowner.config import TeslaConfig
from pyteslaowner.models.command_responses import CommandResult
from pyteslaowner.models.control import Command

_logger = logging.getLogger(__name__)


def _no_payload() -> None:
    return None


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """One row of the command table."""

    name: Command
    endpoint: str
    build: Callable[..., dict[str, Any] | None] = _no_payload
    clamps: Mapping[str, tuple[float, float]] = field(default_factory=dict)

    def payload(self, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        """Build the payload for this command and apply its clamp rules."""
        body = self.build(*args, **kwargs)
        if body is None:
            return None
        for key, (lo, hi) in self.clamps.items():
            if key in body:
                body[key] = clamp(body[key], lo, hi)
        return body


# ------------------------------------------------------------------
# Payload builders
# ------------------------------------------------------------------


def _navigation_payload(subject: str, text: str, locale: str) -> dict[str, Any]:
    return {
        "type": "share_ext_content_raw",
        "value": {
            "android.intent.ACTION": "android.intent.action.SEND",
            "android.intent.TYPE": "text/plain",
            "android.intent.extra.SUBJECT": subject,
            "android.intent.extra.TEXT": text,
        },
        "locale": locale,
        "timestamp_ms": int(time.time() * 1000),
    }


def _set_temps_payload(driver: float, passenger: float | None = None) -> dict[str, Any]:
    return {"driver_temp": driver, "passenger_temp": passenger or driver}


def _calendar_payload(entry: Mapping[str, Any]) -> dict[str, Any]:
    return dict(entry)


def make_calendar_entry(
    event_name: str | None = None,
    location: str | None = None,
    start_time: int | None = None,
    end_time: int | None = None,
    account_name: str | None = None,
    phone_name: str | None = None,
) -> dict[str, Any]:
    """Build an ``upcoming_calendar_entries`` payload with a single event.

    Times are epoch milliseconds and default to now.  *phone_name* is the
    Bluetooth name of the paired phone.
    """
    now_ms = int(time.time() * 1000)
    return {
        "calendar_data": {
            "access_disabled": False,
            "calendars": [
                {
                    "color": "ff9a9cff",
                    "events": [
                        {
                            "allday": False,
                            "color": "ff9a9cff",
                            "end": end_time or now_ms,
                            "start": start_time or now_ms,
                            "cancelled": False,
                            "tentative": False,
                            "location": location or "",
                            "name": event_name or "Event name",
                            "organizer": "",
                        }
                    ],
                    "name": account_name or "",
                }
            ],
            "phone_name": phone_name,
            "uuid": "333239059961778",
        }
    }


_TEMP_RANGE = (MIN_TEMP, MAX_TEMP)

COMMANDS: dict[Command, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec(Command.HONK_HORN, "honk_horn"),
        CommandSpec(Command.FLASH_LIGHTS, "flash_lights"),
        CommandSpec(Command.START_CHARGE, "charge_start"),
        CommandSpec(Command.STOP_CHARGE, "charge_stop"),
        CommandSpec(Command.OPEN_CHARGE_PORT, "charge_port_door_open"),
        CommandSpec(Command.CLOSE_CHARGE_PORT, "charge_port_door_close"),
        CommandSpec(
            Command.SCHEDULE_SOFTWARE_UPDATE,
            "schedule_software_update",
            lambda offset: {"offset_sec": offset},
        ),
        CommandSpec(Command.CANCEL_SOFTWARE_UPDATE, "cancel_software_update"),
        CommandSpec(Command.NAVIGATION_REQUEST, "navigation_request", _navigation_payload),
        CommandSpec(Command.MEDIA_TOGGLE_PLAYBACK, "media_toggle_playback"),
        CommandSpec(Command.MEDIA_PLAY_NEXT, "media_next_track"),
        CommandSpec(Command.MEDIA_PLAY_PREVIOUS, "media_prev_track"),
        CommandSpec(Command.MEDIA_PLAY_NEXT_FAVORITE, "media_next_fav"),
        CommandSpec(Command.MEDIA_PLAY_PREVIOUS_FAVORITE, "media_prev_fav"),
        CommandSpec(Command.MEDIA_VOLUME_UP, "media_volume_up"),
        CommandSpec(Command.MEDIA_VOLUME_DOWN, "media_volume_down"),
        CommandSpec(Command.SPEED_LIMIT_ACTIVATE, "speed_limit_activate", lambda pin: {"pin": pin}),
        CommandSpec(Command.SPEED_LIMIT_DEACTIVATE, "speed_limit_deactivate", lambda pin: {"pin": pin}),
        CommandSpec(Command.SPEED_LIMIT_CLEAR_PIN, "speed_limit_clear_pin", lambda pin: {"pin": pin}),
        CommandSpec(Command.SPEED_LIMIT_SET_LIMIT, "speed_limit_set_limit", lambda limit: {"limit_mph": limit}),
        CommandSpec(Command.SET_SENTRY_MODE, "set_sentry_mode", lambda on: {"on": on}),
        CommandSpec(
            Command.SEAT_HEATER,
            "remote_seat_heater_request",
            lambda heater, level: {"heater": heater, "level": level},
        ),
        CommandSpec(Command.STEERING_HEATER, "remote_steering_wheel_heater_request", lambda level: {"on": level}),
        CommandSpec(Command.MAX_DEFROST, "set_preconditioning_max", lambda on: {"on": on}),
        CommandSpec(
            Command.WINDOW_CONTROL,
            "window_control",
            lambda command: {"command": command, "lat": 0, "lon": 0},
        ),
        CommandSpec(
            Command.SET_CHARGE_LIMIT,
            "set_charge_limit",
            lambda percent: {"percent": percent},
            clamps={"percent": (CHARGE_STORAGE, CHARGE_RANGE)},
        ),
        CommandSpec(Command.CHARGE_STANDARD, "charge_standard"),
        CommandSpec(Command.CHARGE_MAX_RANGE, "charge_max_range"),
        CommandSpec(Command.DOOR_LOCK, "door_lock"),
        CommandSpec(Command.DOOR_UNLOCK, "door_unlock"),
        CommandSpec(Command.CLIMATE_START, "auto_conditioning_start"),
        CommandSpec(Command.CLIMATE_STOP, "auto_conditioning_stop"),
        CommandSpec(Command.SUN_ROOF_CONTROL, "sun_roof_control", lambda state: {"state": state}),
        CommandSpec(
            Command.SUN_ROOF_MOVE,
            "sun_roof_control",
            lambda percent: {"state": "move", "percent": percent},
        ),
        CommandSpec(
            Command.SET_TEMPS,
            "set_temps",
            _set_temps_payload,
            clamps={"driver_temp": _TEMP_RANGE, "passenger_temp": _TEMP_RANGE},
        ),
        CommandSpec(Command.REMOTE_START, "remote_start_drive", lambda password: {"password": password}),
        CommandSpec(Command.OPEN_TRUNK, "actuate_trunk", lambda which: {"which_trunk": which}),
        CommandSpec(Command.WAKE_UP, "wake_up"),
        CommandSpec(
            Command.SET_VALET_MODE,
            "set_valet_mode",
            lambda on, pin: {"on": on, "password": pin},
        ),
        CommandSpec(Command.RESET_VALET_PIN, "reset_valet_pin"),
        CommandSpec(Command.CALENDAR, "upcoming_calendar_entries", _calendar_payload),
        CommandSpec(
            Command.HOMELINK,
            "trigger_homelink",
            lambda lat, long, token: {"lat": lat, "long": long, "token": token},
        ),
    )
}


async def execute_command(
    config: TeslaConfig,
    transport: Transport,
    command: Command | str,
    *args: Any,
    auth_token: str | None = None,
    **kwargs: Any,
) -> CommandResult:
    """Look up *command* in the table, build its payload and send it.

    Unknown command names raise :class:`ValueError`; everything that
    happens on the wire is reported through the returned result.
    """
    try:
        spec = COMMANDS[Command(command)]
    except ValueError:
        raise ValueError(f"Unknown command: {command!r}") from None

    payload = spec.payload(*args, **kwargs)
    _logger.debug("Sending command %s to %s", spec.name, spec.endpoint)
    return await post_resource(config, transport, spec.endpoint, payload, auth_token=auth_token)
