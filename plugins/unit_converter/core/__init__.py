"""Facade for the unit converter core utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from .converter import (
    DEFAULT_DECIMALS,
    INVALID_INPUT_TEXT,
    MAX_DECIMALS,
    ConversionResult,
    Converter,
    format_value,
    parse_value,
)
from .units import (
    Category,
    ConversionError,
    InvalidInputError,
    InvalidPrecisionError,
    InvalidUnitError,
    Unit,
    UnknownCategoryError,
    get_unit,
    list_categories,
    list_units,
)


@lru_cache(maxsize=None)
def get_converter(decimals: int = DEFAULT_DECIMALS) -> Converter:
    return Converter(decimals=decimals)


def describe_categories() -> List[Dict[str, object]]:
    """Return every category with its base unit and ordered units."""

    return get_converter().list_categories()


def describe_units(category: Category | str) -> List[Dict[str, object]]:
    """Return ``{"id", "label", "index"}`` entries for ``category``."""

    return get_converter().list_units(category)


def convert(
    category: Category | str,
    from_unit: Unit | str,
    to_unit: Unit | str,
    value: float | int | str,
    *,
    decimals: Optional[int] = None,
) -> str:
    """Convert ``value`` within ``category`` and return fixed-point text."""

    return get_converter().convert(
        category, from_unit, to_unit, value, decimals=decimals
    )


__all__ = [
    "Category",
    "ConversionError",
    "ConversionResult",
    "Converter",
    "DEFAULT_DECIMALS",
    "INVALID_INPUT_TEXT",
    "InvalidInputError",
    "InvalidPrecisionError",
    "MAX_DECIMALS",
    "InvalidUnitError",
    "Unit",
    "UnknownCategoryError",
    "convert",
    "describe_categories",
    "describe_units",
    "format_value",
    "get_converter",
    "get_unit",
    "list_categories",
    "list_units",
    "parse_value",
]
