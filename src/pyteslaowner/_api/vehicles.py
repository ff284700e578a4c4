"""Vehicle read endpoints.

Endpoints:
  - vehicles       (the account's vehicle, sets the vehicle id)
  - vehicle_data   (all vehicle details in one call)
  - vehicle_config, vehicle_state, climate_state, charge_state,
    drive_state, gui_settings, mobile_enabled, nearby_charging_sites
"""

from __future__ import annotations

import logging
from typing import Any

from pyteslaowner._api._common import get_resource
from pyteslaowner._transport import Transport
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaParseError
from pyteslaowner.models.command_responses import CommandResult

_logger = logging.getLogger(__name__)

_VEHICLE_ENDPOINT = "vehicles"
_VEHICLE_DATA_ENDPOINT = "vehicle_data"

READ_ENDPOINTS: frozenset[str] = frozenset(
    {
        "vehicle_data",
        "vehicle_config",
        "vehicle_state",
        "climate_state",
        "charge_state",
        "drive_state",
        "gui_settings",
        "mobile_enabled",
        "nearby_charging_sites",
    }
)


def _with_vehicle_id(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TeslaParseError("Error parsing vehicles response", endpoint=_VEHICLE_ENDPOINT)
    vehicle = dict(body)
    vehicle["id"] = vehicle.get("id_s")
    return vehicle


async def fetch_vehicle(
    config: TeslaConfig,
    transport: Transport,
    *,
    auth_token: str | None = None,
) -> CommandResult:
    """Fetch the vehicle and copy its string id (``id_s``) into ``id``."""
    result = await get_resource(config, transport, _VEHICLE_ENDPOINT, auth_token=auth_token)
    if not result.ok:
        return result
    try:
        vehicle = _with_vehicle_id(result.body)
    except TeslaParseError as exc:
        _logger.debug("Vehicle response is not an object: %r", type(result.body).__name__)
        return CommandResult(error=exc, status=result.status)
    return CommandResult(status=result.status, body=vehicle)


async def fetch_vehicles(
    config: TeslaConfig,
    transport: Transport,
    *,
    auth_token: str | None = None,
) -> CommandResult:
    """Fetch the full detail record of every vehicle."""
    return await get_resource(config, transport, _VEHICLE_DATA_ENDPOINT, auth_token=auth_token)


async def fetch_state(
    config: TeslaConfig,
    transport: Transport,
    endpoint: str,
    *,
    auth_token: str | None = None,
) -> CommandResult:
    """Fetch one of the :data:`READ_ENDPOINTS`."""
    if endpoint not in READ_ENDPOINTS:
        raise ValueError(f"Unknown read endpoint: {endpoint!r}")
    return await get_resource(config, transport, endpoint, auth_token=auth_token)
