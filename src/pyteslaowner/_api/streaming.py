"""Telemetry streaming endpoint.

Opens ``<streaming_base_url>/<vehicle_id>/?values=...`` with HTTP basic
auth and hands every inbound chunk to a caller-supplied sink.  There is
no reconnect; cancel the awaiting task to close the connection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import aiohttp

from pyteslaowner._constants import STREAMING_COLUMNS, ApiLogLevel
from pyteslaowner._redact import redact_for_log
from pyteslaowner._transport import trace
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaHttpStatusError, TeslaTransportError

_logger = logging.getLogger(__name__)


def build_streaming_url(config: TeslaConfig, vehicle_id: str, values: Iterable[str] | None = None) -> str:
    columns = ",".join(values if values is not None else STREAMING_COLUMNS)
    return f"{config.streaming_base_url.rstrip('/')}/{vehicle_id}/?values={columns}"


async def stream_vehicle(
    config: TeslaConfig,
    http_session: aiohttp.ClientSession,
    *,
    vehicle_id: str,
    username: str,
    password: str,
    on_data: Callable[[str], None],
    values: Iterable[str] | None = None,
) -> None:
    """Stream telemetry rows until the server closes the connection."""
    if not vehicle_id:
        raise ValueError("vehicle_id is required for streaming")
    url = build_streaming_url(config, vehicle_id, values)
    endpoint = f"stream/{vehicle_id}"
    trace(_logger, config, ApiLogLevel.CALL, "Stream %s start", endpoint)
    trace(
        _logger,
        config,
        ApiLogLevel.REQUEST,
        "Request: %s",
        redact_for_log({"method": "GET", "url": url, "username": username, "password": password}),
    )

    try:
        async with http_session.get(
            url,
            auth=aiohttp.BasicAuth(username, password),
            headers={"user-agent": config.user_agent},
        ) as resp:
            trace(_logger, config, ApiLogLevel.RESPONSE, "Response: HTTP %d from %s", resp.status, endpoint)
            if resp.status != 200:
                trace(_logger, config, ApiLogLevel.ERR, "Error response: %d from %s", resp.status, endpoint)
                raise TeslaHttpStatusError(
                    f"Error response: {resp.status}",
                    status_code=resp.status,
                    reason=resp.reason or "",
                    endpoint=endpoint,
                )
            async for chunk in resp.content.iter_any():
                on_data(chunk.decode("utf-8", errors="replace"))
    except TeslaTransportError:
        raise
    except (aiohttp.ClientError, TimeoutError) as exc:
        trace(_logger, config, ApiLogLevel.ERR, "Streaming from %s failed: %s", endpoint, exc)
        raise TeslaTransportError(f"Streaming from {url} failed: {exc}", endpoint=endpoint) from exc

    trace(_logger, config, ApiLogLevel.RETURN, "Stream %s closed by server", endpoint)
