"""Shared Pint registry helpers for the unit converter core."""

from __future__ import annotations

from functools import lru_cache

from pint import Quantity, UnitRegistry

from .units import Category, base_unit


def _build_registry() -> UnitRegistry:
    return UnitRegistry()


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return _build_registry()


def base_quantity(category: Category | str, base_value: float) -> Quantity:
    """Wrap ``base_value`` in the base unit of ``category``.

    Temperatures use the offset unit ``degC``, which Pint only allows through
    the ``Quantity`` constructor, so the quantity is never built by
    multiplication.
    """

    _, expression = base_unit(category)
    registry = get_registry()
    return registry.Quantity(base_value, expression)


def format_base_unit(category: Category | str) -> str:
    """Return the Pint rendering of the base unit of ``category``."""

    return f"{base_quantity(category, 0.0).units:~P}"


__all__ = ["base_quantity", "format_base_unit", "get_registry"]
