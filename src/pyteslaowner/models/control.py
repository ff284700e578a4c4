"""Remote command names.

Each member is a client operation.  Several operations may share one
portal endpoint (``SUN_ROOF_CONTROL`` and ``SUN_ROOF_MOVE`` both hit
``sun_roof_control``); the endpoint and payload for every member live in
:data:`pyteslaowner._api.commands.COMMANDS`.
"""

from __future__ import annotations

import enum


class Command(enum.StrEnum):
    """State-changing operations understood by the owner API."""

    HONK_HORN = "honk_horn"
    FLASH_LIGHTS = "flash_lights"
    START_CHARGE = "start_charge"
    STOP_CHARGE = "stop_charge"
    OPEN_CHARGE_PORT = "open_charge_port"
    CLOSE_CHARGE_PORT = "close_charge_port"
    SCHEDULE_SOFTWARE_UPDATE = "schedule_software_update"
    CANCEL_SOFTWARE_UPDATE = "cancel_software_update"
    NAVIGATION_REQUEST = "navigation_request"
    MEDIA_TOGGLE_PLAYBACK = "media_toggle_playback"
    MEDIA_PLAY_NEXT = "media_play_next"
    MEDIA_PLAY_PREVIOUS = "media_play_previous"
    MEDIA_PLAY_NEXT_FAVORITE = "media_play_next_favorite"
    MEDIA_PLAY_PREVIOUS_FAVORITE = "media_play_previous_favorite"
    MEDIA_VOLUME_UP = "media_volume_up"
    MEDIA_VOLUME_DOWN = "media_volume_down"
    SPEED_LIMIT_ACTIVATE = "speed_limit_activate"
    SPEED_LIMIT_DEACTIVATE = "speed_limit_deactivate"
    SPEED_LIMIT_CLEAR_PIN = "speed_limit_clear_pin"
    SPEED_LIMIT_SET_LIMIT = "speed_limit_set_limit"
    SET_SENTRY_MODE = "set_sentry_mode"
    SEAT_HEATER = "seat_heater"
    STEERING_HEATER = "steering_heater"
    MAX_DEFROST = "max_defrost"
    WINDOW_CONTROL = "window_control"
    SET_CHARGE_LIMIT = "set_charge_limit"
    CHARGE_STANDARD = "charge_standard"
    CHARGE_MAX_RANGE = "charge_max_range"
    DOOR_LOCK = "door_lock"
    DOOR_UNLOCK = "door_unlock"
    CLIMATE_START = "climate_start"
    CLIMATE_STOP = "climate_stop"
    SUN_ROOF_CONTROL = "sun_roof_control"
    SUN_ROOF_MOVE = "sun_roof_move"
    SET_TEMPS = "set_temps"
    REMOTE_START = "remote_start"
    OPEN_TRUNK = "open_trunk"
    WAKE_UP = "wake_up"
    SET_VALET_MODE = "set_valet_mode"
    RESET_VALET_PIN = "reset_valet_pin"
    CALENDAR = "calendar"
    HOMELINK = "homelink"
