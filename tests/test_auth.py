from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyteslaowner._api.auth import build_refresh_request, refresh_access_token, revoke_token
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaConfigError, TeslaHttpStatusError, TeslaParseError


@dataclass
class _FakeOAuthTransport:
    response: Any = None
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        self.calls.append({"method": method, "path": path, "headers": dict(headers or {}), "body": body})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def config() -> TeslaConfig:
    return TeslaConfig(client_id="client-id", client_secret="client-secret", client_cn="VIN-1")


def test_build_refresh_request(config: TeslaConfig) -> None:
    assert build_refresh_request(config, "rt-1") == {
        "grant_type": "refresh_token",
        "client_id": "client-id",
        "client_secret": "client-secret",
        "refresh_token": "rt-1",
    }


def test_build_refresh_request_requires_token(config: TeslaConfig) -> None:
    with pytest.raises(ValueError, match="requires a refresh_token"):
        build_refresh_request(config, "")


def test_build_refresh_request_requires_client_identity() -> None:
    with pytest.raises(TeslaConfigError):
        build_refresh_request(TeslaConfig(), "rt-1")


@pytest.mark.asyncio
async def test_refresh_access_token_parses_tokens(config: TeslaConfig) -> None:
    transport = _FakeOAuthTransport(
        response={"access_token": "at-2", "refresh_token": "rt-2", "expires_in": 3888000, "token_type": "bearer"}
    )

    token = await refresh_access_token(config, transport, "rt-1")

    assert token.access_token == "at-2"
    assert token.refresh_token == "rt-2"
    assert token.raw["expires_in"] == 3888000
    call = transport.calls[0]
    assert call["method"] == "GET"
    assert call["path"] == "/oauth/token"
    assert call["body"]["grant_type"] == "refresh_token"
    assert call["headers"] == {"X-SSL-Client-S-CN": "VIN-1"}


@pytest.mark.asyncio
async def test_refresh_access_token_rejects_non_object(config: TeslaConfig) -> None:
    with pytest.raises(TeslaParseError):
        await refresh_access_token(config, _FakeOAuthTransport(response=["nope"]), "rt-1")


@pytest.mark.asyncio
async def test_refresh_access_token_propagates_status_errors(config: TeslaConfig) -> None:
    error = TeslaHttpStatusError("Error response: 401", status_code=401, endpoint="/oauth/token")
    with pytest.raises(TeslaHttpStatusError):
        await refresh_access_token(config, _FakeOAuthTransport(error=error), "rt-1")


@pytest.mark.asyncio
async def test_revoke_token_sends_bearer(config: TeslaConfig) -> None:
    transport = _FakeOAuthTransport(response={})

    result = await revoke_token(config, transport, "at-1")

    assert result.ok
    headers = transport.calls[0]["headers"]
    assert transport.calls[0]["path"] == "/oauth/revoke"
    assert headers["authorization"] == "Bearer at-1"
    assert headers["content-type"].startswith("application/json")


@pytest.mark.asyncio
async def test_revoke_token_reports_failure_in_result(config: TeslaConfig) -> None:
    error = TeslaHttpStatusError("Error response: 401", status_code=401, endpoint="/oauth/revoke")

    result = await revoke_token(config, _FakeOAuthTransport(error=error), "at-1")

    assert result.error is error
    assert result.status == 401
