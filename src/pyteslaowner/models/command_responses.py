"""Normalized outcome of a single owner API call.

Every read and command goes through the same gateway and ends up as a
:class:`CommandResult`.  The body is the decoded JSON exactly as the
portal sent it; it is never validated against a schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyteslaowner.exceptions import TeslaError


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of one HTTP round trip.

    Exactly one of ``error`` and ``body`` is meaningful: on failure the
    body is ``None``.  ``status`` is the HTTP status when a response was
    received.
    """

    error: TeslaError | None = None
    status: int | None = None
    body: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the body, raising the captured error if the call failed."""
        if self.error is not None:
            raise self.error
        return self.body
