#!/usr/bin/env python3
"""Print a short summary of the account's vehicle.

Fetches the vehicle record, decodes the VIN offline and, unless the car
is asleep, reads the charge and climate state.

Usage
-----
Set environment variables and run::

    export TESLA_AUTH_TOKEN="..."
    python scripts/vehicle_summary.py

Options::

    --wake               Send wake_up before reading state
    --json               Output as machine-readable JSON
    --verbose, -v        Enable request tracing
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyteslaowner import (  # noqa: E402
    ApiLogLevel,
    TeslaClient,
    TeslaConfig,
    TeslaError,
    decode_vin,
    get_paint_color,
    get_short_vin,
)


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _response(body: Any) -> dict[str, Any]:
    if isinstance(body, dict) and isinstance(body.get("response"), dict):
        return body["response"]
    return {}


async def summarize(client: TeslaClient, *, wake: bool) -> dict[str, Any]:
    vehicle = await client.vehicle()
    info = decode_vin(vehicle)
    summary: dict[str, Any] = {
        "display_name": vehicle.get("display_name"),
        "vin": vehicle.get("vin"),
        "short_vin": get_short_vin(vehicle),
        "model": info.car_type.value,
        "year": info.year,
        "awd": info.awd,
        "paint": get_paint_color(vehicle),
        "state": vehicle.get("state"),
    }

    if wake:
        await client.wake_up()
    elif vehicle.get("state") != "online":
        return summary

    try:
        charge = _response(await client.charge_state())
        climate = _response(await client.climate_state())
    except TeslaError as exc:
        summary["error"] = str(exc)
        return summary

    summary["battery_level"] = charge.get("battery_level")
    summary["charge_limit_soc"] = charge.get("charge_limit_soc")
    summary["charging_state"] = charge.get("charging_state")
    summary["inside_temp"] = climate.get("inside_temp")
    summary["outside_temp"] = climate.get("outside_temp")
    return summary


async def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize the vehicle on a Tesla account.")
    parser.add_argument("--wake", action="store_true", help="Send wake_up before reading state")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable request tracing")
    args = parser.parse_args()

    token = os.environ.get("TESLA_AUTH_TOKEN")
    if not token:
        parser.error("TESLA_AUTH_TOKEN is not set")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        config = TeslaConfig.from_env(log_level=ApiLogLevel.RESPONSE)
    else:
        logging.basicConfig(level=logging.WARNING)
        config = TeslaConfig.from_env()

    async with TeslaClient(config, auth_token=token) as client:
        summary = await summarize(client, wake=args.wake)

    if args.json_mode:
        print(json.dumps(summary, indent=2, default=str, ensure_ascii=False))
        return

    print(_section(f"{summary['model']} {summary['year']}  {summary['display_name'] or ''}"))
    for key, value in summary.items():
        print(f"  {key:<17}: {value}")


if __name__ == "__main__":
    asyncio.run(main())
