"""Application configuration and constants."""

import logging
import os

# Logging
LOG_LEVEL_ENV = "CONVERT_IT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    """Log level name from the environment, or WARNING if unset or unrecognised."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


# Category identifiers, in picker order
CATEGORIES = ["Temp", "Length", "Time", "Volume"]

# Categories converted through the affine temperature routine
AFFINE_CATEGORIES = {"Temp"}

# Temperature units (normalized through Celsius)
CELSIUS = "Celcius"
FAHRENHEIT = "Fahrenheit"
KELVIN = "Kelvin"
TEMPERATURE_UNITS = [CELSIUS, FAHRENHEIT, KELVIN]
CANONICAL_TEMPERATURE_UNIT = CELSIUS

FAHRENHEIT_OFFSET = 32
FAHRENHEIT_SCALE = 1.8
KELVIN_OFFSET = 273.15

# Linear conversion factors (how many base units one unit equals)
LINEAR_FACTORS = {
    "Length": {
        "Meters": 1.0,
        "Kilometers": 1000.0,
        "Feet": 0.3048,
        "Yards": 0.9144,
        "Miles": 1609.34,
    },
    "Time": {
        "Seconds": 1.0,
        "Minutes": 60.0,
        "Hours": 3600.0,
        "Days": 86400.0,
    },
    "Volume": {
        "Milliliters": 1.0,
        "Liters": 1000.0,
        "Cups": 236.588,
        "Pints": 473.176,
        "Gallons": 3785.41,
    },
}

BASE_UNITS = {
    "Length": "Meters",
    "Time": "Seconds",
    "Volume": "Milliliters",
}

# (from, to) pair selected when the category changes
DEFAULT_UNITS = {
    "Temp": ("Celcius", "Fahrenheit"),
    "Length": ("Meters", "Kilometers"),
    "Time": ("Minutes", "Hours"),
    "Volume": ("Milliliters", "Liters"),
}

# Returned when a category or unit can't be resolved
FALLBACK_VALUE = 0.0

# Maximum fraction digits shown in results
DISPLAY_PRECISION = 3
