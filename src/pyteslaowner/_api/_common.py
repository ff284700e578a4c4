"""Request gateway shared by every owner API endpoint module.

This module centralizes the patterns every call repeats:
- building the static identity and per-call credential headers
- encoding command payloads as a query string
- issuing a single request and folding the outcome into a CommandResult

It is internal to pyteslaowner and may change at any time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pyteslaowner._constants import CLIENT_CN_HEADER
from pyteslaowner._transport import Transport
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaError, TeslaTransportError
from pyteslaowner.models.command_responses import CommandResult

_logger = logging.getLogger(__name__)


def build_headers(
    config: TeslaConfig,
    *,
    auth_token: str | None = None,
) -> dict[str, str]:
    """Identity header from configuration plus the caller's bearer token."""
    headers: dict[str, str] = {}
    if config.client_cn:
        headers[CLIENT_CN_HEADER] = config.client_cn
    if auth_token:
        headers["authorization"] = f"Bearer {auth_token}"
    return headers


def _query_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode_query(payload: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a command payload into query parameters.

    Scalars are rendered the way a browser ``URLSearchParams`` would;
    nested objects and arrays are sent as compact JSON.
    """
    if not payload:
        return {}
    return {str(key): _query_value(value) for key, value in payload.items()}


def _result_from_error(exc: TeslaError) -> CommandResult:
    status = exc.status_code if isinstance(exc, TeslaTransportError) else None
    return CommandResult(error=exc, status=status, body=None)


async def get_resource(
    config: TeslaConfig,
    transport: Transport,
    path: str,
    *,
    auth_token: str | None = None,
) -> CommandResult:
    """GET *path* and return its JSON body; never raises a TeslaError."""
    try:
        body = await transport.request_json(
            "GET",
            path,
            headers=build_headers(config, auth_token=auth_token),
        )
    except TeslaError as exc:
        _logger.debug("GET %s failed: %s", path, exc)
        return _result_from_error(exc)
    return CommandResult(status=200, body=body)


async def post_resource(
    config: TeslaConfig,
    transport: Transport,
    path: str,
    payload: Mapping[str, Any] | None = None,
    *,
    auth_token: str | None = None,
) -> CommandResult:
    """Send a command to *path*; never raises a TeslaError.

    The request is a GET whose query string and JSON body both carry
    *payload*.
    """
    body_payload = dict(payload) if payload is not None else None
    try:
        body = await transport.request_json(
            "GET",
            path,
            headers=build_headers(config, auth_token=auth_token),
            params=encode_query(body_payload),
            body=body_payload,
        )
    except TeslaError as exc:
        _logger.debug("Command %s failed: %s", path, exc)
        return _result_from_error(exc)
    return CommandResult(status=200, body=body)
