"""Data models for owner API responses."""

from pyteslaowner.models.command_responses import CommandResult
from pyteslaowner.models.control import Command
from pyteslaowner.models.token import AuthToken
from pyteslaowner.models.vehicle import CarType, VehicleModelInfo

__all__ = [
    "AuthToken",
    "CarType",
    "Command",
    "CommandResult",
    "VehicleModelInfo",
]
