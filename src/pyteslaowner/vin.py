"""Decode vehicle attributes from the VIN and option codes.

These helpers are pure: they accept either the raw VIN string or the
vehicle JSON returned by the portal (anything with a ``vin`` /
``option_codes`` key) and never touch the network.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pyteslaowner.models.vehicle import CarType, VehicleModelInfo

_MODEL_YEAR_BASE = 2010
_MIN_DECODABLE_LENGTH = 10

_CAR_TYPES: dict[str, CarType] = {
    "S": CarType.MODEL_S,
    "3": CarType.MODEL_3,
    "X": CarType.MODEL_X,
    "Y": CarType.MODEL_Y,
}

# Drivetrain codes at position 7 that denote dual motor.
_AWD_CODES = frozenset({"2", "4", "B"})

_PAINT_COLORS: dict[str, str] = {
    "PBCW": "white",
    "PBSB": "black",
    "PMAB": "metallic brown",
    "PMBL": "metallic black",
    "PMMB": "metallic blue",
    "PMMR": "multi-coat red",
    "PPMR": "multi-coat red",
    "PMNG": "steel grey",
    "PMSG": "metallic green",
    "PMSS": "metallic silver",
    "PPSB": "ocean blue",
    "PPSR": "signature red",
    "PPSW": "pearl white",
    "PPTI": "titanium",
    "PMTG": "metallic grey",
}
_PAINT_PATTERN = re.compile("|".join(_PAINT_COLORS))

DEFAULT_PAINT_COLOR = "black"


def _vin_of(vehicle: Mapping[str, Any] | str | None) -> str | None:
    if vehicle is None:
        return None
    if isinstance(vehicle, str):
        return vehicle or None
    value = vehicle.get("vin")
    return str(value) if value else None


def decode_vin(vehicle: Mapping[str, Any] | str | None) -> VehicleModelInfo:
    """Decode model family, drivetrain and model year.

    Returns the default record (Model S, rear drive, 2012) when no VIN is
    available.  A VIN too short to carry the year character raises
    :class:`ValueError`.  Unknown family characters keep Model S and the
    year is not range-checked.
    """
    vin = _vin_of(vehicle)
    if vin is None:
        return VehicleModelInfo()
    if len(vin) < _MIN_DECODABLE_LENGTH:
        raise ValueError(f"VIN must have at least {_MIN_DECODABLE_LENGTH} characters, got {vin!r}")

    return VehicleModelInfo(
        car_type=_CAR_TYPES.get(vin[3], CarType.MODEL_S),
        awd=vin[7] in _AWD_CODES,
        year=_MODEL_YEAR_BASE + ord(vin[9]) - ord("A"),
    )


def get_model(vehicle: Mapping[str, Any] | str | None) -> CarType:
    """Return the car type decoded from the VIN."""
    return decode_vin(vehicle).car_type


def get_paint_color(vehicle: Mapping[str, Any] | str | None) -> str:
    """Return the paint color name from the option codes.

    The leftmost known paint code in the string wins.
    """
    if vehicle is None:
        return DEFAULT_PAINT_COLOR
    option_codes = vehicle if isinstance(vehicle, str) else vehicle.get("option_codes")
    if not option_codes:
        return DEFAULT_PAINT_COLOR
    match = _PAINT_PATTERN.search(str(option_codes))
    if match is None:
        return DEFAULT_PAINT_COLOR
    return _PAINT_COLORS[match.group(0)]


def get_vin(vehicle: Mapping[str, Any] | str | None) -> str:
    vin = _vin_of(vehicle)
    if vin is None:
        raise ValueError("invalid parameter")
    return vin


def get_short_vin(vehicle: Mapping[str, Any] | str | None) -> str:
    """Return the serial part of the VIN (everything after position 10)."""
    return get_vin(vehicle)[11:]
