"""Unit catalogue for the eight supported categories.

Every unit is described by the affine map ``base = (value + offset) * factor / divisor``
onto its category's base unit. The factors are the published literals of the
desktop converter and are kept verbatim, even where they are rounded (the
moment units in particular), because the displayed results depend on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ConversionError(Exception):
    """Base exception for conversion failures."""


class InvalidInputError(ConversionError):
    """Raised when user supplied text is not a usable finite number."""


class InvalidUnitError(ConversionError):
    """Raised when a unit does not belong to the requested category."""


class UnknownCategoryError(ConversionError):
    """Raised when a category is outside the supported set."""


class InvalidPrecisionError(ConversionError):
    """Raised when a requested number of decimals is out of range."""


class Category(str, Enum):
    LENGTH = "length"
    TEMPERATURE = "temperature"
    VELOCITY = "velocity"
    FORCE = "force"
    MOMENT = "moment"
    PRESSURE = "pressure"
    AREA = "area"
    VOLUME = "volume"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Unit:
    """A concrete unit and its affine relation to the category base unit."""

    id: str
    label: str
    category: Category
    factor: float = 1.0
    divisor: float = 1.0
    offset: float = 0.0

    def to_base(self, value: float) -> float:
        return (value + self.offset) * self.factor / self.divisor

    def from_base(self, base_value: float) -> float:
        return base_value * self.divisor / self.factor - self.offset

    def describe(self, index: int | None = None) -> Dict[str, object]:
        payload: Dict[str, object] = {"id": self.id, "label": self.label}
        if index is not None:
            payload["index"] = index
        return payload


# Base unit of each category: display label and Pint expression.
BASE_UNITS: Dict[Category, Tuple[str, str]] = {
    Category.LENGTH: ("m", "meter"),
    Category.TEMPERATURE: ("°C", "degC"),
    Category.VELOCITY: ("m/s", "meter / second"),
    Category.FORCE: ("N", "newton"),
    Category.MOMENT: ("N·m", "newton * meter"),
    Category.PRESSURE: ("Pa", "pascal"),
    Category.AREA: ("m²", "meter ** 2"),
    Category.VOLUME: ("m³", "meter ** 3"),
}


def _units(category: Category, *rows: tuple) -> Tuple[Unit, ...]:
    return tuple(Unit(row[0], row[1], category, *row[2:]) for row in rows)


# Order matters: user interfaces bind selector positions to these indices.
_CATALOGUE: Dict[Category, Tuple[Unit, ...]] = {
    Category.LENGTH: _units(
        Category.LENGTH,
        ("mm", "mm", 1.0, 1000.0),
        ("cm", "cm", 1.0, 100.0),
        ("m", "m"),
        ("km", "km", 1000.0),
        ("in", "in", 0.0254),
        ("ft", "ft", 0.3048),
        ("mile", "mile", 1609.34),
        ("yard", "yard", 0.9144),
    ),
    Category.TEMPERATURE: _units(
        Category.TEMPERATURE,
        ("degC", "°C"),
        ("degF", "°F", 5.0, 9.0, -32.0),
        ("K", "K", 1.0, 1.0, -273.15),
    ),
    Category.VELOCITY: _units(
        Category.VELOCITY,
        ("mph", "mph", 0.44704),
        ("km_h", "km/h", 1.0, 3.6),
        ("m_s", "m/s"),
        ("ft_s", "ft/s", 0.3048),
    ),
    Category.FORCE: _units(
        Category.FORCE,
        ("N", "N"),
        ("kN", "kN", 1000.0),
        ("kgf", "kgf", 9.80665),
        ("tonf", "tonf", 9806.65),
        ("lb", "lb", 4.44822),
        ("kip", "kip", 4448.22),
    ),
    Category.MOMENT: _units(
        Category.MOMENT,
        ("N_m", "N·m"),
        ("N_mm", "N·mm", 1.0, 1000.0),
        ("kN_m", "kN·m", 1000.0),
        ("kN_mm", "kN·mm", 1000.0, 1000.0),
        ("lb_in", "lb·in", 0.113),
        ("lb_ft", "lb·ft", 1.356),
        ("kip_in", "kip·in", 113.0),
        ("kip_ft", "kip·ft", 1356.0),
        ("kgf_m", "kgf·m", 9.80665),
        ("kgf_mm", "kgf·mm", 0.00980665),
        ("kgf_in", "kgf·in", 0.8139),
        ("kgf_ft", "kgf·ft", 9.766),
    ),
    Category.PRESSURE: _units(
        Category.PRESSURE,
        ("Pa", "Pa"),
        ("kPa", "kPa", 1e3),
        ("MPa", "MPa", 1e6),
        ("psi", "psi", 6894.76),
        ("ksi", "ksi", 6.89476e6),
        ("psf", "psf", 47.8803),
        ("ksf", "ksf", 47880.3),
    ),
    Category.AREA: _units(
        Category.AREA,
        ("mm2", "mm²", 1.0, 1e6),
        ("cm2", "cm²", 1.0, 1e4),
        ("m2", "m²"),
        ("km2", "km²", 1e6),
        ("in2", "in²", 0.00064516),
        ("ft2", "ft²", 0.092903),
    ),
    Category.VOLUME: _units(
        Category.VOLUME,
        ("mm3", "mm³", 1.0, 1e9),
        ("cm3", "cm³", 1.0, 1e6),
        ("m3", "m³"),
        ("km3", "km³", 1e9),
        ("in3", "in³", 1.6387e-5),
        ("ft3", "ft³", 0.0283168),
    ),
}


def resolve_category(category: Category | str) -> Category:
    """Return the :class:`Category` named by ``category``.

    Accepts the enum itself, its value (``"length"``) or its label
    (``"Length"``), case-insensitively.
    """

    if isinstance(category, Category):
        return category
    if isinstance(category, str):
        key = category.strip().lower()
        for candidate in Category:
            if key in (candidate.value, candidate.label.lower()):
                return candidate
    raise UnknownCategoryError(f"Unknown unit category '{category}'.")


def list_categories() -> Tuple[Category, ...]:
    return tuple(_CATALOGUE.keys())


def list_units(category: Category | str) -> Tuple[Unit, ...]:
    """Return the units of ``category`` in presentation order."""

    return _CATALOGUE[resolve_category(category)]


def get_unit(category: Category | str, unit: Unit | str) -> Unit:
    """Resolve ``unit`` by id or label within ``category``."""

    resolved = resolve_category(category)
    units = _CATALOGUE[resolved]
    if isinstance(unit, Unit):
        if unit in units:
            return unit
        raise InvalidUnitError(
            f"Unit '{unit.label}' does not belong to category '{resolved.label}'."
        )
    if not isinstance(unit, str) or not unit.strip():
        raise InvalidUnitError("Unit must be a non-empty string.")
    text = unit.strip()
    for candidate in units:
        if text == candidate.id or text == candidate.label:
            return candidate
    raise InvalidUnitError(
        f"Unit '{text}' does not belong to category '{resolved.label}'."
    )


def base_unit(category: Category | str) -> Tuple[str, str]:
    """Return ``(label, pint_expression)`` for the base unit of ``category``."""

    return BASE_UNITS[resolve_category(category)]


__all__ = [
    "BASE_UNITS",
    "Category",
    "ConversionError",
    "InvalidInputError",
    "InvalidPrecisionError",
    "InvalidUnitError",
    "UnknownCategoryError",
    "Unit",
    "base_unit",
    "get_unit",
    "list_categories",
    "list_units",
    "resolve_category",
]
