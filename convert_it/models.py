"""Data models for the unit conversion engine."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

LINEAR = "linear"
AFFINE = "affine"


@dataclass(frozen=True)
class Category:
    """A measurement domain and the units that can be selected in it.

    Linear categories carry one factor per unit, relative to ``base_unit``.
    Affine categories (temperature) carry no factors; their units are
    handled by a dedicated normalize/project routine.
    """
    name: str
    kind: str  # "linear" or "affine"
    units: Tuple[str, ...]
    factors: Mapping[str, float] = field(default_factory=dict)
    base_unit: str = ""
    default_from: str = ""
    default_to: str = ""

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(self.units))
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))

        if self.kind not in (LINEAR, AFFINE):
            raise ValueError(f"{self.name}: unknown category kind '{self.kind}'")

        if self.kind == LINEAR:
            missing = [u for u in self.units if u not in self.factors]
            if missing:
                raise ValueError(f"{self.name}: no factor for {', '.join(missing)}")
            bad = [u for u, f in self.factors.items() if not f > 0]
            if bad:
                raise ValueError(f"{self.name}: factors must be positive ({', '.join(bad)})")
            if self.base_unit and self.factors.get(self.base_unit) != 1.0:
                raise ValueError(f"{self.name}: base unit '{self.base_unit}' must have factor 1.0")

        for unit in (self.default_from, self.default_to):
            if unit and unit not in self.units:
                raise ValueError(f"{self.name}: default unit '{unit}' is not selectable")

    @property
    def is_affine(self) -> bool:
        return self.kind == AFFINE

    def has_unit(self, unit: str) -> bool:
        return unit in self.units


@dataclass(frozen=True)
class Conversion:
    """A single conversion request and its result."""
    category: str
    value: float
    source_unit: str
    target_unit: str
    result: Optional[float] = None
