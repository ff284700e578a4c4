"""pyteslaowner - Async Python client for the Tesla owner API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyteslaowner")
except PackageNotFoundError:
    __version__ = "0+local"
from pyteslaowner._api.commands import COMMANDS, CommandSpec, make_calendar_entry
from pyteslaowner._constants import (
    CHARGE_DAILY,
    CHARGE_RANGE,
    CHARGE_STANDARD,
    CHARGE_STORAGE,
    FRUNK,
    MAX_TEMP,
    MIN_TEMP,
    PORTAL_URL,
    STREAMING_COLUMNS,
    STREAMING_URL,
    SUNROOF_CLOSED,
    SUNROOF_VENT,
    TRUNK,
    ApiLogLevel,
    clamp,
)
from pyteslaowner.client import TeslaClient
from pyteslaowner.config import TeslaConfig
from pyteslaowner.exceptions import (
    TeslaConfigError,
    TeslaError,
    TeslaHttpStatusError,
    TeslaParseError,
    TeslaTransportError,
)
from pyteslaowner.models import AuthToken, CarType, Command, CommandResult, VehicleModelInfo
from pyteslaowner.vin import decode_vin, get_model, get_paint_color, get_short_vin, get_vin

__all__ = [
    "__version__",
    "ApiLogLevel",
    "AuthToken",
    "CHARGE_DAILY",
    "CHARGE_RANGE",
    "CHARGE_STANDARD",
    "CHARGE_STORAGE",
    "COMMANDS",
    "CarType",
    "Command",
    "CommandResult",
    "CommandSpec",
    "FRUNK",
    "MAX_TEMP",
    "MIN_TEMP",
    "PORTAL_URL",
    "STREAMING_COLUMNS",
    "STREAMING_URL",
    "SUNROOF_CLOSED",
    "SUNROOF_VENT",
    "TRUNK",
    "TeslaClient",
    "TeslaConfig",
    "TeslaConfigError",
    "TeslaError",
    "TeslaHttpStatusError",
    "TeslaParseError",
    "TeslaTransportError",
    "VehicleModelInfo",
    "clamp",
    "decode_vin",
    "get_model",
    "get_paint_color",
    "get_short_vin",
    "get_vin",
    "make_calendar_entry",
]
