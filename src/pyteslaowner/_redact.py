"""Helpers for safe debug logging.

Requests to the owner API carry bearer tokens, OAuth client secrets,
valet/speed-limit pins and remote-start passwords.  This module redacts
those fields before they are emitted in trace logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

REDACTED = "<redacted>"

_SENSITIVE_KEYS: frozenset[str] = frozenset({"authorization", "cookie", "token", "pin", "password"})

# Matches refresh_token, client_secret, valet_pin, ...
_SENSITIVE_SUFFIXES: tuple[str, ...] = ("_token", "_secret", "_pin", "_password")

_AUTH_SCHEMES: tuple[str, ...] = ("bearer ", "basic ")

_MAX_DEPTH = 20


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return lowered in _SENSITIVE_KEYS or lowered.endswith(_SENSITIVE_SUFFIXES)


def _redact_string(value: str, max_string: int) -> str:
    lowered = value.lower()
    for scheme in _AUTH_SCHEMES:
        if lowered.startswith(scheme):
            return f"{value[: len(scheme)]}{REDACTED}"
    if len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* with credentials replaced by ``<redacted>``.

    Mapping keys are matched case-insensitively against the credential
    names used by the portal, including suffixed forms such as
    ``refresh_token`` or ``valet_pin``.  Strings carrying an HTTP auth
    scheme keep only the scheme.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _redact_string(value, max_string)
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"
    if isinstance(value, Mapping):
        return {
            str(k): REDACTED
            if is_sensitive_key(str(k))
            else redact_for_log(v, max_string=max_string, _depth=_depth + 1)
            for k, v in value.items()
        }
    if isinstance(value, Sequence):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]
    return repr(value)
