"""Custom exception hierarchy for pyteslaowner."""

from __future__ import annotations


class TeslaError(Exception):
    """Base exception for all pyteslaowner errors."""


class TeslaConfigError(TeslaError):
    """Invalid or missing configuration."""


class TeslaTransportError(TeslaError):
    """Network-level failure (DNS, TLS, connection reset, ...)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class TeslaHttpStatusError(TeslaTransportError):
    """The portal answered with a status other than 200."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        endpoint: str = "",
    ) -> None:
        self.reason = reason
        super().__init__(message, status_code=status_code, endpoint=endpoint)


class TeslaParseError(TeslaError):
    """Response body could not be decoded or post-processed."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
