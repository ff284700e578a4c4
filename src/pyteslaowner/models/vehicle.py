"""Vehicle attributes decoded from the VIN."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class CarType(enum.StrEnum):
    """Model family encoded at VIN position 3."""

    MODEL_S = "Model S"
    MODEL_3 = "Model 3"
    MODEL_X = "Model X"
    MODEL_Y = "Model Y"


class VehicleModelInfo(BaseModel):
    """Model family, drivetrain and model year of a vehicle."""

    model_config = ConfigDict(frozen=True)

    car_type: CarType = CarType.MODEL_S
    awd: bool = False
    year: int = 2012
