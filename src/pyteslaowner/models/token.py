"""Authentication token model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class AuthToken(BaseModel):
    """Tokens returned by the OAuth refresh grant.

    Parameters
    ----------
    access_token : str or None
        Bearer token for subsequent owner API calls.
    refresh_token : str or None
        Token to pass to the next refresh.
    raw : dict
        Full decoded response for access to additional fields
        (``expires_in``, ``token_type``, ...).
    """

    model_config = ConfigDict(frozen=True)

    access_token: str | None
    refresh_token: str | None
    raw: dict[str, Any]
