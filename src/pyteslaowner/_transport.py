"""HTTP transport for the owner API portal."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyteslaowner._constants import ApiLogLevel
from pyteslaowner._redact import redact_for_log
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import TeslaHttpStatusError, TeslaParseError, TeslaTransportError

_logger = logging.getLogger(__name__)


def join_url(base: str, path: str) -> str:
    """Join a portal base URL and an endpoint path with exactly one slash."""
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def trace(logger: logging.Logger, config: TeslaConfig, level: ApiLogLevel, msg: str, *args: Any) -> None:
    """Emit a request trace record when *config* asks for *level* or more.

    ``ERR`` records go out as warnings, everything else at debug.
    """
    if config.log_level < level:
        return
    logger.log(logging.WARNING if level == ApiLogLevel.ERR else logging.DEBUG, msg, *args)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        ...


class HttpTransport:
    """Single-attempt JSON transport bound to one portal configuration."""

    def __init__(self, config: TeslaConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    @property
    def config(self) -> TeslaConfig:
        return self._config

    def _trace(self, level: ApiLogLevel, msg: str, *args: Any) -> None:
        trace(_logger, self._config, level, msg, *args)

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body.

        Raises :class:`TeslaTransportError` on network failure,
        :class:`TeslaHttpStatusError` on any status other than 200 and
        :class:`TeslaParseError` when a 200 body is not JSON.  Empty
        bodies decode to ``None``.
        """
        url = join_url(self._config.portal_base_url, path)
        request_headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if headers:
            request_headers.update(headers)

        self._trace(ApiLogLevel.CALL, "%s call: %s start", method, path)
        self._trace(
            ApiLogLevel.REQUEST,
            "Request: %s",
            redact_for_log({"method": method, "url": url, "headers": request_headers, "params": params, "body": body}),
        )

        try:
            async with self._http.request(
                method,
                url,
                headers=request_headers,
                params=dict(params) if params else None,
                json=body,
            ) as resp:
                raw = await resp.read()
                self._trace(
                    ApiLogLevel.RESPONSE,
                    "Response: HTTP %d %s",
                    resp.status,
                    raw[:512].decode("utf-8", errors="replace"),
                )
                if resp.status != 200:
                    self._trace(ApiLogLevel.ERR, "Error response: %d from %s", resp.status, path)
                    raise TeslaHttpStatusError(
                        f"Error response: {resp.status}",
                        status_code=resp.status,
                        reason=resp.reason or "",
                        endpoint=path,
                    )
        except TeslaTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            self._trace(ApiLogLevel.ERR, "Request to %s failed: %s", path, exc)
            raise TeslaTransportError(
                f"Request to {path} failed: {exc}",
                endpoint=path,
            ) from exc

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._trace(ApiLogLevel.ERR, "Undecodable body from %s", path)
            raise TeslaParseError(f"Response from {path} is not valid UTF-8", endpoint=path) from exc

        if not text.strip():
            result: Any = None
        else:
            try:
                result = json.loads(text)
            except json.JSONDecodeError as exc:
                self._trace(ApiLogLevel.ERR, "Invalid JSON from %s", path)
                raise TeslaParseError(
                    f"Invalid JSON from {path}: {text[:200]}",
                    endpoint=path,
                ) from exc

        self._trace(ApiLogLevel.BODY, "Body: %s", redact_for_log(result))
        self._trace(ApiLogLevel.RETURN, "%s request: %s completed", method, path)
        return result
