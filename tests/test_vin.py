from __future__ import annotations

import pytest

from pyteslaowner.models.vehicle import CarType, VehicleModelInfo
from pyteslaowner.vin import decode_vin, get_model, get_paint_color, get_short_vin, get_vin


def _vin(family: str = "S", drivetrain: str = "1", year: str = "L") -> str:
    return f"5YJ{family}A1E{drivetrain}F{year}F12345"


# family S, drivetrain 2, year character L
_MODEL_S_AWD_2021 = _vin("S", "2", "L")


def test_vin_helper_positions() -> None:
    vin = _vin("X", "B", "A")
    assert vin[3] == "X"
    assert vin[7] == "B"
    assert vin[9] == "A"


@pytest.mark.parametrize(
    ("family", "expected"),
    [
        ("S", CarType.MODEL_S),
        ("3", CarType.MODEL_3),
        ("X", CarType.MODEL_X),
        ("Y", CarType.MODEL_Y),
        ("R", CarType.MODEL_S),
    ],
)
def test_decode_vin_model_family(family: str, expected: CarType) -> None:
    assert decode_vin({"vin": _vin(family=family)}).car_type == expected


@pytest.mark.parametrize(("drivetrain", "awd"), [("2", True), ("4", True), ("B", True), ("1", False), ("A", False)])
def test_decode_vin_awd_codes(drivetrain: str, awd: bool) -> None:
    assert decode_vin(_vin(drivetrain=drivetrain)).awd is awd


def test_decode_vin_model_year() -> None:
    assert decode_vin(_vin(year="A")).year == 2010
    assert decode_vin(_vin(year="L")).year == 2021


def test_decode_vin_year_is_not_range_checked() -> None:
    # '0' sorts before 'A'; the formula is applied as-is.
    assert decode_vin(_vin(year="0")).year == 2010 + ord("0") - ord("A")


@pytest.mark.parametrize("vehicle", [None, {}, {"vin": ""}, {"vin": None}, ""])
def test_decode_vin_defaults_without_identifier(vehicle: object) -> None:
    assert decode_vin(vehicle) == VehicleModelInfo(car_type=CarType.MODEL_S, awd=False, year=2012)  # type: ignore[arg-type]


def test_decode_vin_short_identifier_fails_fast() -> None:
    with pytest.raises(ValueError):
        decode_vin({"vin": "5YJS"})


def test_get_model_uses_decoded_family() -> None:
    assert get_model({"vin": _MODEL_S_AWD_2021}) == CarType.MODEL_S
    assert get_model(None) == CarType.MODEL_S
    assert str(get_model(_vin(family="3"))) == "Model 3"


def test_paint_color_lookup() -> None:
    assert get_paint_color({"option_codes": "AD15,MDL3,PPSW,W38B"}) == "pearl white"
    assert get_paint_color("MDLS,PMTG,RENA") == "metallic grey"


def test_paint_color_leftmost_code_wins() -> None:
    assert get_paint_color("PMNG,PPSW") == "steel grey"


def test_paint_color_defaults_to_black() -> None:
    assert get_paint_color({"option_codes": "AD15,MDL3,W38B"}) == "black"
    assert get_paint_color({}) == "black"
    assert get_paint_color(None) == "black"


def test_get_vin_and_short_vin() -> None:
    vehicle = {"vin": _MODEL_S_AWD_2021}
    assert get_vin(vehicle) == _MODEL_S_AWD_2021
    assert get_short_vin(vehicle) == _MODEL_S_AWD_2021[11:]


def test_get_vin_requires_vin() -> None:
    with pytest.raises(ValueError, match="invalid parameter"):
        get_vin({"id_s": "123"})
    with pytest.raises(ValueError):
        get_short_vin(None)
