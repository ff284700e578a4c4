"""Internal constants shared across the library."""

from __future__ import annotations

import enum

PORTAL_URL = "https://owner-api.teslamotors.com"
STREAMING_URL = "https://streaming.vn.teslamotors.com/stream"
USER_AGENT = "pyteslaowner"

#: Header carrying the client identity expected by the owner API gateway.
CLIENT_CN_HEADER = "X-SSL-Client-S-CN"


class ApiLogLevel(enum.IntEnum):
    """Verbosity levels for request tracing.

    A trace record is emitted only when the configured level is at least
    the record's level.  ``ALL`` must stay the largest value.
    """

    ALWAYS = 0
    ERR = 1
    CALL = 2
    RETURN = 3
    BODY = 4
    REQUEST = 5
    RESPONSE = 6
    ALL = 255


# ------------------------------------------------------------------
# Charge limit presets (percent)
# ------------------------------------------------------------------

CHARGE_STORAGE = 50
CHARGE_DAILY = 70
CHARGE_STANDARD = 90
CHARGE_RANGE = 100

# ------------------------------------------------------------------
# Climate temperature limits (°C)
# ------------------------------------------------------------------

MIN_TEMP = 15  # 59 °F
MAX_TEMP = 28  # 82.4 °F

SUNROOF_VENT = "vent"
SUNROOF_CLOSED = "close"

FRUNK = "front"
TRUNK = "rear"

STREAMING_COLUMNS: tuple[str, ...] = (
    "elevation",
    "est_heading",
    "est_lat",
    "est_lng",
    "est_range",
    "heading",
    "odometer",
    "power",
    "range",
    "shift_state",
    "speed",
    "soc",
)


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* limited to the inclusive range ``[lo, hi]``."""
    if value < lo:
        value = lo
    if value > hi:
        value = hi
    return value
