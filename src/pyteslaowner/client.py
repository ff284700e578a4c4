"""High-level async client for the owner API."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import aiohttp

from pyteslaowner._api import auth as _auth_api
from pyteslaowner._api import streaming as _streaming_api
from pyteslaowner._api import vehicles as _vehicles_api
from pyteslaowner._api._common import get_resource, post_resource
from pyteslaowner._api.commands import execute_command
from pyteslaowner._transport import HttpTransport
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaError
from pyteslaowner.models.command_responses import CommandResult
from pyteslaowner.models.control import Command
from pyteslaowner.models.token import AuthToken

_logger = logging.getLogger(__name__)


class TeslaClient:
    """Async client for the owner API.

    Usage::

        async with TeslaClient(TeslaConfig.from_env(), auth_token=token) as client:
            vehicle = await client.vehicle()
            await client.honk_horn()

    Every call makes exactly one HTTP attempt.  Methods return the decoded
    JSON body and raise the :class:`TeslaError` on failure.  Pass
    ``check=False`` to the generic methods (:meth:`execute`,
    :meth:`get_command`, :meth:`post_command`) to receive the
    :class:`CommandResult` instead and handle, or ignore, the error yourself.
    """

    def __init__(
        self,
        config: TeslaConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        auth_token: str | None = None,
        vehicle_id: str | None = None,
    ) -> None:
        self._config = config if config is not None else TeslaConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None
        self.auth_token = auth_token
        self.vehicle_id = vehicle_id

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TeslaClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> TeslaConfig:
        return self._config

    def _replace_config(self, config: TeslaConfig) -> None:
        self._config = config
        if self._http_session is not None and self._transport is not None:
            self._transport = HttpTransport(config, self._http_session)

    def set_portal_base_uri(self, uri: str | None) -> None:
        """Point subsequent calls at *uri*; ``None`` restores the default host."""
        self._replace_config(self._config.with_portal_base_url(uri))

    def get_portal_base_uri(self) -> str:
        return self._config.portal_base_url

    def set_streaming_base_uri(self, uri: str | None) -> None:
        """Stream from *uri*; ``None`` restores the default host."""
        self._replace_config(self._config.with_streaming_base_url(uri))

    def get_streaming_base_uri(self) -> str:
        return self._config.streaming_base_url

    def set_log_level(self, level: int) -> None:
        self._replace_config(dataclasses.replace(self._config, log_level=int(level)))

    def get_log_level(self) -> int:
        return self._config.log_level

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise TeslaError("Client not initialized. Use 'async with TeslaClient(...) as client:'")
        return self._transport

    @staticmethod
    def _finish(result: CommandResult, check: bool) -> Any:
        if check:
            return result.unwrap()
        return result

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def refresh_token(self, refresh_token: str) -> AuthToken:
        """Exchange a refresh token for a new token pair.

        The client keeps using its current ``auth_token``; assign
        ``client.auth_token = token.access_token`` to switch.
        """
        transport = self._require_transport()
        return await _auth_api.refresh_access_token(self._config, transport, refresh_token)

    async def logout(self, auth_token: str | None = None) -> Any:
        """Revoke *auth_token* (defaults to the client's token)."""
        token = auth_token or self.auth_token
        if not token:
            raise ValueError("No auth token to revoke")
        transport = self._require_transport()
        result = await _auth_api.revoke_token(self._config, transport, token)
        return result.unwrap()

    # ------------------------------------------------------------------
    # Generic gateway access
    # ------------------------------------------------------------------

    async def get_command(self, path: str, *, check: bool = True) -> Any:
        """GET an arbitrary portal path."""
        transport = self._require_transport()
        result = await get_resource(self._config, transport, path, auth_token=self.auth_token)
        return self._finish(result, check)

    async def post_command(
        self,
        path: str,
        payload: Mapping[str, Any] | None = None,
        *,
        check: bool = True,
    ) -> Any:
        """Send an arbitrary command path with *payload*."""
        transport = self._require_transport()
        result = await post_resource(self._config, transport, path, payload, auth_token=self.auth_token)
        return self._finish(result, check)

    async def execute(self, command: Command | str, *args: Any, check: bool = True, **kwargs: Any) -> Any:
        """Run a named command from the command table."""
        transport = self._require_transport()
        result = await execute_command(
            self._config,
            transport,
            command,
            *args,
            auth_token=self.auth_token,
            **kwargs,
        )
        return self._finish(result, check)

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    async def vehicle(self) -> dict[str, Any]:
        """Fetch the vehicle record and remember its id."""
        transport = self._require_transport()
        result = await _vehicles_api.fetch_vehicle(self._config, transport, auth_token=self.auth_token)
        vehicle: dict[str, Any] = result.unwrap()
        self.vehicle_id = vehicle["id"]
        _logger.debug("Vehicle id set to %s", self.vehicle_id)
        return vehicle

    async def vehicles(self) -> Any:
        """Fetch the full detail record of all vehicles."""
        transport = self._require_transport()
        result = await _vehicles_api.fetch_vehicles(self._config, transport, auth_token=self.auth_token)
        return result.unwrap()

    async def _read(self, endpoint: str) -> Any:
        transport = self._require_transport()
        result = await _vehicles_api.fetch_state(self._config, transport, endpoint, auth_token=self.auth_token)
        return result.unwrap()

    async def vehicle_data(self) -> Any:
        return await self._read("vehicle_data")

    async def vehicle_config(self) -> Any:
        return await self._read("vehicle_config")

    async def vehicle_state(self) -> Any:
        return await self._read("vehicle_state")

    async def climate_state(self) -> Any:
        return await self._read("climate_state")

    async def nearby_chargers(self) -> Any:
        return await self._read("nearby_charging_sites")

    async def drive_state(self) -> Any:
        return await self._read("drive_state")

    async def charge_state(self) -> Any:
        return await self._read("charge_state")

    async def gui_settings(self) -> Any:
        return await self._read("gui_settings")

    async def mobile_enabled(self) -> Any:
        return await self._read("mobile_enabled")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def honk_horn(self) -> Any:
        return await self.execute(Command.HONK_HORN)

    async def flash_lights(self) -> Any:
        return await self.execute(Command.FLASH_LIGHTS)

    async def start_charge(self) -> Any:
        return await self.execute(Command.START_CHARGE)

    async def stop_charge(self) -> Any:
        return await self.execute(Command.STOP_CHARGE)

    async def open_charge_port(self) -> Any:
        return await self.execute(Command.OPEN_CHARGE_PORT)

    async def close_charge_port(self) -> Any:
        return await self.execute(Command.CLOSE_CHARGE_PORT)

    async def schedule_software_update(self, offset: int) -> Any:
        """Schedule a pending software update to start in *offset* seconds."""
        return await self.execute(Command.SCHEDULE_SOFTWARE_UPDATE, offset)

    async def cancel_software_update(self) -> Any:
        return await self.execute(Command.CANCEL_SOFTWARE_UPDATE)

    async def navigation_request(self, subject: str, text: str, locale: str) -> Any:
        """Share a destination (address or place) with the vehicle's navigation."""
        return await self.execute(Command.NAVIGATION_REQUEST, subject, text, locale)

    async def media_toggle_playback(self) -> Any:
        return await self.execute(Command.MEDIA_TOGGLE_PLAYBACK)

    async def media_play_next(self) -> Any:
        return await self.execute(Command.MEDIA_PLAY_NEXT)

    async def media_play_previous(self) -> Any:
        return await self.execute(Command.MEDIA_PLAY_PREVIOUS)

    async def media_play_next_favorite(self) -> Any:
        return await self.execute(Command.MEDIA_PLAY_NEXT_FAVORITE)

    async def media_play_previous_favorite(self) -> Any:
        return await self.execute(Command.MEDIA_PLAY_PREVIOUS_FAVORITE)

    async def media_volume_up(self) -> Any:
        return await self.execute(Command.MEDIA_VOLUME_UP)

    async def media_volume_down(self) -> Any:
        return await self.execute(Command.MEDIA_VOLUME_DOWN)

    async def speed_limit_activate(self, pin: str) -> Any:
        return await self.execute(Command.SPEED_LIMIT_ACTIVATE, pin)

    async def speed_limit_deactivate(self, pin: str) -> Any:
        return await self.execute(Command.SPEED_LIMIT_DEACTIVATE, pin)

    async def speed_limit_clear_pin(self, pin: str) -> Any:
        return await self.execute(Command.SPEED_LIMIT_CLEAR_PIN, pin)

    async def speed_limit_set_limit(self, limit: float) -> Any:
        """Set the speed limit in mph."""
        return await self.execute(Command.SPEED_LIMIT_SET_LIMIT, limit)

    async def set_sentry_mode(self, on: bool) -> Any:
        return await self.execute(Command.SET_SENTRY_MODE, on)

    async def seat_heater(self, heater: int, level: int) -> Any:
        """Set seat *heater* (0 driver, 1 passenger, 2.. rear) to *level* 0-3."""
        return await self.execute(Command.SEAT_HEATER, heater, level)

    async def steering_heater(self, level: int | bool) -> Any:
        return await self.execute(Command.STEERING_HEATER, level)

    async def max_defrost(self, on: bool) -> Any:
        return await self.execute(Command.MAX_DEFROST, on)

    async def window_control(self, command: str) -> Any:
        """Vent or close all windows (*command* is ``"vent"`` or ``"close"``)."""
        return await self.execute(Command.WINDOW_CONTROL, command)

    async def set_charge_limit(self, percent: int) -> Any:
        """Set the charge limit; values are clamped to 50-100 percent."""
        return await self.execute(Command.SET_CHARGE_LIMIT, percent)

    async def charge_standard(self) -> Any:
        return await self.execute(Command.CHARGE_STANDARD)

    async def charge_max_range(self) -> Any:
        return await self.execute(Command.CHARGE_MAX_RANGE)

    async def door_lock(self) -> Any:
        return await self.execute(Command.DOOR_LOCK)

    async def door_unlock(self) -> Any:
        return await self.execute(Command.DOOR_UNLOCK)

    async def climate_start(self) -> Any:
        return await self.execute(Command.CLIMATE_START)

    async def climate_stop(self) -> Any:
        return await self.execute(Command.CLIMATE_STOP)

    async def sun_roof_control(self, state: str) -> Any:
        return await self.execute(Command.SUN_ROOF_CONTROL, state)

    async def sun_roof_move(self, percent: int) -> Any:
        return await self.execute(Command.SUN_ROOF_MOVE, percent)

    async def set_temps(self, driver: float, passenger: float | None = None) -> Any:
        """Set climate temperatures in °C, clamped to 15-28.

        The passenger side follows the driver when *passenger* is not given.
        """
        return await self.execute(Command.SET_TEMPS, driver, passenger)

    async def remote_start(self, password: str) -> Any:
        return await self.execute(Command.REMOTE_START, password)

    async def open_trunk(self, which: str) -> Any:
        """Actuate the ``"front"`` (frunk) or ``"rear"`` trunk."""
        return await self.execute(Command.OPEN_TRUNK, which)

    async def wake_up(self) -> Any:
        return await self.execute(Command.WAKE_UP)

    async def set_valet_mode(self, on: bool, pin: str) -> Any:
        return await self.execute(Command.SET_VALET_MODE, on, pin)

    async def reset_valet_pin(self) -> Any:
        return await self.execute(Command.RESET_VALET_PIN)

    async def calendar(self, entry: Mapping[str, Any]) -> Any:
        """Push calendar data built with :func:`make_calendar_entry`."""
        return await self.execute(Command.CALENDAR, entry)

    async def homelink(self, lat: float, long: float, token: str) -> Any:
        return await self.execute(Command.HOMELINK, lat, long, token)

    # ------------------------------------------------------------------
    # Streaming
    # ------------------------------------------------------------------

    async def start_streaming(
        self,
        on_data: Callable[[str], None],
        *,
        username: str,
        password: str,
        vehicle_id: str | None = None,
        values: Iterable[str] | None = None,
    ) -> None:
        """Stream telemetry, calling *on_data* with every chunk.

        Returns when the server closes the connection.  Cancel the awaiting
        task to stop streaming early.
        """
        self._require_transport()
        assert self._http_session is not None  # noqa: S101
        await _streaming_api.stream_vehicle(
            self._config,
            self._http_session,
            vehicle_id=vehicle_id or self.vehicle_id or "",
            username=username,
            password=password,
            on_data=on_data,
            values=values,
        )
