"""OAuth endpoints.

Endpoints:
  - /oauth/token   (refresh-token grant)
  - /oauth/revoke  (logout)
"""

from __future__ import annotations

import logging
from typing import Any

from pyteslaowner._api._common import build_headers
from pyteslaowner._transport import Transport
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaError, TeslaParseError
from pyteslaowner.models.command_responses import CommandResult
from pyteslaowner.models.token import AuthToken

_logger = logging.getLogger(__name__)

_TOKEN_ENDPOINT = "/oauth/token"
_REVOKE_ENDPOINT = "/oauth/revoke"


def build_refresh_request(config: TeslaConfig, refresh_token: str) -> dict[str, str]:
    """Build the refresh-token grant body."""
    if not refresh_token:
        raise ValueError("refresh_token() requires a refresh_token")
    client_id, client_secret = config.require_client_credentials()
    return {
        "grant_type": "refresh_token",
        "client_id": client_id,
        "client_secret": client_secret,
        "refresh_token": refresh_token,
    }


def parse_token_response(body: Any) -> AuthToken:
    if not isinstance(body, dict):
        raise TeslaParseError("Token response is not a JSON object", endpoint=_TOKEN_ENDPOINT)
    return AuthToken(
        access_token=body.get("access_token"),
        refresh_token=body.get("refresh_token"),
        raw=body,
    )


async def refresh_access_token(
    config: TeslaConfig,
    transport: Transport,
    refresh_token: str,
) -> AuthToken:
    """Exchange *refresh_token* for a new access/refresh token pair."""
    body = build_refresh_request(config, refresh_token)
    response = await transport.request_json(
        "GET",
        _TOKEN_ENDPOINT,
        headers=build_headers(config),
        body=body,
    )
    token = parse_token_response(response)
    _logger.debug("Token refreshed (access token present=%s)", token.access_token is not None)
    return token


async def revoke_token(
    config: TeslaConfig,
    transport: Transport,
    auth_token: str,
) -> CommandResult:
    """Invalidate *auth_token*."""
    headers = build_headers(config, auth_token=auth_token)
    headers["content-type"] = "application/json; charset=utf-8"
    try:
        response = await transport.request_json("GET", _REVOKE_ENDPOINT, headers=headers)
    except TeslaError as exc:
        return CommandResult(error=exc, status=getattr(exc, "status_code", None))
    return CommandResult(status=200, body=response)
