"""Table-driven conversion engine.

Every conversion goes through the category base unit: the source unit maps the
value onto the base, the target unit maps it back out. Results are rendered as
fixed-point text with three decimals unless a caller asks otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from pint import Quantity

from common.logging import get_logger

from .registry import base_quantity, format_base_unit
from .units import (
    Category,
    InvalidInputError,
    InvalidPrecisionError,
    Unit,
    base_unit,
    get_unit,
    list_categories,
    list_units,
    resolve_category,
)

DEFAULT_DECIMALS = 3
MAX_DECIMALS = 12
VALUE_LIMIT = 1e9
INVALID_INPUT_TEXT = "Invalid input"
_MAX_VALUE_LENGTH = 64

logger = get_logger("eunits.converter")


@dataclass(slots=True)
class ConversionResult:
    """Outcome of a single conversion as reported to a user interface."""

    category: Category
    source: Unit
    target: Unit
    value: Optional[float]
    formatted: str
    base_value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "category": self.category.value,
            "from_unit": self.source.describe(),
            "to_unit": self.target.describe(),
            "value": self.value,
            "formatted": self.formatted,
        }
        if self.base_value is not None:
            payload["base"] = {
                "value": self.base_value,
                "unit": format_base_unit(self.category),
            }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def parse_value(value: float | int | str) -> float:
    """Normalise caller input into a finite float within the supported range."""

    if isinstance(value, bool):
        raise InvalidInputError("Value must be a number or numeric string.")
    if isinstance(value, int):
        if abs(value) > VALUE_LIMIT:
            raise InvalidInputError("Value must lie between -1e9 and 1e9.")
        numeric = float(value)
    elif isinstance(value, float):
        numeric = value
    elif isinstance(value, str):
        text = value.strip()
        if len(text) == 0 or len(text) > _MAX_VALUE_LENGTH:
            raise InvalidInputError("Value string must be between 1 and 64 characters.")
        try:
            parsed = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidInputError(f"'{text}' is not a valid number.") from exc
        if parsed.is_nan() or parsed.is_infinite():
            raise InvalidInputError("Value must be a finite number.")
        numeric = float(parsed)
    else:
        raise InvalidInputError("Value must be a number or numeric string.")
    if math.isnan(numeric) or math.isinf(numeric):
        raise InvalidInputError("Value must be a finite number.")
    if abs(numeric) > VALUE_LIMIT:
        raise InvalidInputError("Value must lie between -1e9 and 1e9.")
    return numeric


def check_decimals(decimals: int) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidPrecisionError("Decimal precision must be an integer.")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidPrecisionError(
            f"Decimal precision must lie between 0 and {MAX_DECIMALS}."
        )
    return decimals


def format_value(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Render ``value`` as fixed-point text."""

    check_decimals(decimals)
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and not text.strip("-0."):
        # -0.0004 rounds to "-0.000"
        text = text[1:]
    return text


class Converter:
    """Conversion API shared by the HTTP blueprint and the CLI."""

    def __init__(self, decimals: int = DEFAULT_DECIMALS) -> None:
        self.decimals = check_decimals(decimals)

    # ---- Listing helpers -------------------------------------------------
    def list_categories(self) -> List[Dict[str, object]]:
        result: List[Dict[str, object]] = []
        for category in list_categories():
            label, _ = base_unit(category)
            result.append(
                {
                    "id": category.value,
                    "label": category.label,
                    "base_unit": label,
                    "units": self.list_units(category),
                }
            )
        return result

    def list_units(self, category: Category | str) -> List[Dict[str, object]]:
        return [
            unit.describe(index)
            for index, unit in enumerate(list_units(category))
        ]

    # ---- Conversion helpers ----------------------------------------------
    def convert_value(
        self,
        category: Category | str,
        from_unit: Unit | str,
        to_unit: Unit | str,
        value: float | int | str,
    ) -> float:
        """Return the converted value as a float."""

        resolved = resolve_category(category)
        source = get_unit(resolved, from_unit)
        target = get_unit(resolved, to_unit)
        numeric = parse_value(value)
        return target.from_base(source.to_base(numeric))

    def convert(
        self,
        category: Category | str,
        from_unit: Unit | str,
        to_unit: Unit | str,
        value: float | int | str,
        *,
        decimals: Optional[int] = None,
    ) -> str:
        result = self.convert_value(category, from_unit, to_unit, value)
        return format_value(result, self._decimals(decimals))

    def convert_detailed(
        self,
        category: Category | str,
        from_unit: Unit | str,
        to_unit: Unit | str,
        value: float | int | str,
        *,
        decimals: Optional[int] = None,
    ) -> ConversionResult:
        resolved = resolve_category(category)
        source = get_unit(resolved, from_unit)
        target = get_unit(resolved, to_unit)
        numeric = parse_value(value)
        base_value = source.to_base(numeric)
        result = target.from_base(base_value)
        logger.debug(
            "converted %s %s -> %s %s", numeric, source.label, result, target.label
        )
        return ConversionResult(
            category=resolved,
            source=source,
            target=target,
            value=result,
            formatted=format_value(result, self._decimals(decimals)),
            base_value=base_value,
        )

    def convert_text(
        self,
        category: Category | str,
        from_unit: Unit | str,
        to_unit: Unit | str,
        text: str,
        *,
        decimals: Optional[int] = None,
    ) -> ConversionResult:
        """Convert user typed text, reporting bad input instead of raising.

        Unit, category and precision mistakes come from the caller and still
        raise.
        """

        resolved = resolve_category(category)
        source = get_unit(resolved, from_unit)
        target = get_unit(resolved, to_unit)
        decimals = self._decimals(decimals)
        try:
            return self.convert_detailed(
                resolved, source, target, text, decimals=decimals
            )
        except InvalidInputError as exc:
            logger.warning("rejected input %r: %s", text, exc)
            return ConversionResult(
                category=resolved,
                source=source,
                target=target,
                value=None,
                formatted=INVALID_INPUT_TEXT,
                error=str(exc),
            )

    def to_quantity(
        self,
        category: Category | str,
        unit: Unit | str,
        value: float | int | str,
    ) -> Quantity:
        """Return ``value`` expressed in the base unit as a Pint quantity."""

        resolved = resolve_category(category)
        source = get_unit(resolved, unit)
        return base_quantity(resolved, source.to_base(parse_value(value)))

    def _decimals(self, decimals: Optional[int]) -> int:
        return self.decimals if decimals is None else check_decimals(decimals)


__all__ = [
    "ConversionResult",
    "Converter",
    "DEFAULT_DECIMALS",
    "INVALID_INPUT_TEXT",
    "MAX_DECIMALS",
    "VALUE_LIMIT",
    "check_decimals",
    "format_value",
    "parse_value",
]
