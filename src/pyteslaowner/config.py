"""Client configuration for pyteslaowner."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyteslaowner._constants import PORTAL_URL, STREAMING_URL, USER_AGENT, ApiLogLevel
from pyteslaowner.exceptions import TeslaConfigError


def _env_log_level(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        normalized = value.strip().upper()
        if normalized in ApiLogLevel.__members__:
            return int(ApiLogLevel[normalized])
        raise TeslaConfigError(f"TESLAJS_LOG must be an integer or level name, got {value!r}") from None


@dataclasses.dataclass(frozen=True)
class TeslaConfig:
    """Client configuration.

    Parameters
    ----------
    portal_base_url : str
        Base URL of the owner API portal.  Defaults to the vendor host.
    streaming_base_url : str
        Base URL of the telemetry streaming portal.
    client_cn : str or None
        Client identity sent in the ``X-SSL-Client-S-CN`` header with
        every request.  The header is omitted when unset.
    client_id : str or None
        OAuth client id, required by :meth:`TeslaClient.refresh_token`.
    client_secret : str or None
        OAuth client secret, required by :meth:`TeslaClient.refresh_token`.
    log_level : int
        Request tracing verbosity, see :class:`ApiLogLevel`.
    user_agent : str
        ``User-Agent`` header value.
    """

    portal_base_url: str = PORTAL_URL
    streaming_base_url: str = STREAMING_URL
    client_cn: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    log_level: int = ApiLogLevel.ALWAYS
    user_agent: str = USER_AGENT

    def with_portal_base_url(self, uri: str | None) -> TeslaConfig:
        """Return a copy pointing at *uri*; a falsy value restores the default host."""
        return dataclasses.replace(self, portal_base_url=uri or PORTAL_URL)

    def with_streaming_base_url(self, uri: str | None) -> TeslaConfig:
        """Return a copy streaming from *uri*; a falsy value restores the default host."""
        return dataclasses.replace(self, streaming_base_url=uri or STREAMING_URL)

    def require_client_credentials(self) -> tuple[str, str]:
        if not self.client_id or not self.client_secret:
            raise TeslaConfigError("client_id and client_secret are required (set TESLA_CLIENT_ID/TESLA_CLIENT_SECRET)")
        return self.client_id, self.client_secret

    @classmethod
    def from_env(cls, **overrides: Any) -> TeslaConfig:
        """Create configuration from environment variables.

        Reads ``TESLAJS_SERVER``, ``TESLAJS_STREAMING``, ``TESLAJS_LOG``,
        ``VIN``, ``TESLA_CLIENT_ID``, ``TESLA_CLIENT_SECRET`` and
        ``TESLAJS_USER_AGENT``.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TESLAJS_SERVER": "portal_base_url",
            "TESLAJS_STREAMING": "streaming_base_url",
            "VIN": "client_cn",
            "TESLA_CLIENT_ID": "client_id",
            "TESLA_CLIENT_SECRET": "client_secret",
            "TESLAJS_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        if "log_level" not in overrides:
            config_kwargs["log_level"] = _env_log_level(env.get("TESLAJS_LOG"), ApiLogLevel.ALWAYS)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
