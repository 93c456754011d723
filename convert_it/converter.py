"""Unit conversion engine.

Linear categories (length, time, volume) are converted through a single
implicit base unit per category:

    base   = value × factor[source]
    result = base ÷ factor[target]

Temperature is affine (scale + offset), so it can't live in the factor
table. It is converted in two stages through Celsius:

    Fahrenheit → Celsius:  (F − 32) ÷ 1.8        Celsius → Fahrenheit:  C × 1.8 + 32
    Kelvin     → Celsius:  K − 273.15            Celsius → Kelvin:      C + 273.15

Any category or unit that can't be resolved yields the fallback value 0.0.
"""

import logging
from types import MappingProxyType
from typing import List, Optional, Tuple

from convert_it.config import (
    AFFINE_CATEGORIES,
    BASE_UNITS,
    CANONICAL_TEMPERATURE_UNIT,
    CATEGORIES,
    CELSIUS,
    DEFAULT_UNITS,
    DISPLAY_PRECISION,
    FAHRENHEIT,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    FALLBACK_VALUE,
    KELVIN,
    KELVIN_OFFSET,
    LINEAR_FACTORS,
    TEMPERATURE_UNITS,
)
from convert_it.models import AFFINE, LINEAR, Category, Conversion

logger = logging.getLogger(__name__)


def _build_categories() -> MappingProxyType:
    """Build the read-only category table from config."""
    categories = {}
    for name in CATEGORIES:
        default_from, default_to = DEFAULT_UNITS[name]
        if name in AFFINE_CATEGORIES:
            if set(TEMPERATURE_UNITS) != {CELSIUS, FAHRENHEIT, KELVIN}:
                raise ValueError(f"{name}: unsupported temperature units {TEMPERATURE_UNITS}")
            categories[name] = Category(
                name=name,
                kind=AFFINE,
                units=TEMPERATURE_UNITS,
                base_unit=CANONICAL_TEMPERATURE_UNIT,
                default_from=default_from,
                default_to=default_to,
            )
        else:
            factors = LINEAR_FACTORS[name]
            categories[name] = Category(
                name=name,
                kind=LINEAR,
                units=list(factors),
                factors=factors,
                base_unit=BASE_UNITS[name],
                default_from=default_from,
                default_to=default_to,
            )
    return MappingProxyType(categories)


CATEGORY_TABLE = _build_categories()


def get_category(name: str) -> Optional[Category]:
    return CATEGORY_TABLE.get(name)


def units_for(category: str) -> List[str]:
    """Selectable units for a category, in display order. Empty if unknown."""
    found = get_category(category)
    return list(found.units) if found else []


def default_units(category: str) -> Optional[Tuple[str, str]]:
    """The (from, to) pair to select when switching to a category."""
    found = get_category(category)
    if not found:
        return None
    return found.default_from, found.default_to


def convert_linear(category: str, value: float, source_unit: str, target_unit: str) -> float:
    """Convert between two units of a linear category via its base unit."""
    found = get_category(category)
    if not found or found.is_affine:
        logger.debug("No linear factor table for category %r", category)
        return FALLBACK_VALUE

    source_factor = found.factors.get(source_unit)
    target_factor = found.factors.get(target_unit)
    if source_factor is None or target_factor is None:
        logger.debug("Unknown %s unit in %r -> %r", category, source_unit, target_unit)
        return FALLBACK_VALUE

    base_value = value * source_factor
    return base_value / target_factor


def _to_celsius(value: float, unit: str) -> Optional[float]:
    if unit == CELSIUS:
        return value
    if unit == FAHRENHEIT:
        return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
    if unit == KELVIN:
        return value - KELVIN_OFFSET
    return None


def _from_celsius(celsius: float, unit: str) -> Optional[float]:
    if unit == CELSIUS:
        return celsius
    if unit == FAHRENHEIT:
        return (celsius * FAHRENHEIT_SCALE) + FAHRENHEIT_OFFSET
    if unit == KELVIN:
        return celsius + KELVIN_OFFSET
    return None


def convert_temperature(value: float, source_unit: str, target_unit: str) -> float:
    """Convert a temperature by normalizing to Celsius, then projecting to the target."""
    celsius = _to_celsius(value, source_unit)
    if celsius is None:
        logger.debug("Unknown temperature unit %r", source_unit)
        return FALLBACK_VALUE

    result = _from_celsius(celsius, target_unit)
    if result is None:
        logger.debug("Unknown temperature unit %r", target_unit)
        return FALLBACK_VALUE
    return result


def convert(category: str, value: float, source_unit: str, target_unit: str) -> float:
    """Convert ``value`` from ``source_unit`` to ``target_unit`` within ``category``.

    Returns 0.0 when the category or either unit is unknown.
    """
    found = get_category(category)
    if found and found.is_affine:
        return convert_temperature(value, source_unit, target_unit)
    return convert_linear(category, value, source_unit, target_unit)


def try_convert(category: str, value: float, source_unit: str, target_unit: str) -> Optional[float]:
    """Like convert(), but returns None instead of 0.0 for unknown inputs."""
    found = get_category(category)
    if not found or not found.has_unit(source_unit) or not found.has_unit(target_unit):
        return None
    return convert(category, value, source_unit, target_unit)


def display_result(category: str, value: float, source_unit: str, target_unit: str) -> float:
    """Value to show in the result field; same-unit selections show the input as-is."""
    if source_unit == target_unit:
        return value
    return convert(category, value, source_unit, target_unit)


def conversion_table(category: str, value: float, source_unit: str) -> List[Tuple[str, float]]:
    """Express a value in every unit of its category."""
    return [
        (unit, display_result(category, value, source_unit, unit))
        for unit in units_for(category)
    ]


def format_value(value: float) -> str:
    """Format a number for display: grouped thousands, trailing zeros dropped."""
    text = f"{value:,.{DISPLAY_PRECISION}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_conversion(conversion: Conversion) -> str:
    """Format a conversion as a one-line summary."""
    result = conversion.result if conversion.result is not None else FALLBACK_VALUE
    return (
        f"{format_value(conversion.value)} {conversion.source_unit} = "
        f"{format_value(result)} {conversion.target_unit}"
    )
