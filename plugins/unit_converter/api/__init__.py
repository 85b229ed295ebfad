"""Unit converter API with standardized responses."""

from __future__ import annotations

from typing import Annotated

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import ValidationAppError
from common.forms import get_int, get_str
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    DEFAULT_DECIMALS,
    MAX_DECIMALS,
    ConversionResult,
    InvalidPrecisionError,
    InvalidUnitError,
    UnknownCategoryError,
    describe_categories,
    describe_units,
    get_converter,
)


class ConvertPayload(SchemaModel):
    category: str
    from_unit: str
    to_unit: str
    value: float | int | str
    decimals: Annotated[int, Field(ge=0, le=MAX_DECIMALS)] | None = None


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _configured_decimals() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {})
    try:
        decimals = int(settings.get("decimals", DEFAULT_DECIMALS))
    except (TypeError, ValueError):
        return DEFAULT_DECIMALS
    return min(max(decimals, 0), MAX_DECIMALS)


def _run_conversion(
    category: str, from_unit: str, to_unit: str, value, decimals: int | None
) -> Response:
    converter = get_converter(_configured_decimals())
    try:
        result: ConversionResult = converter.convert_text(
            category, from_unit, to_unit, value, decimals=decimals
        )
    except UnknownCategoryError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.unknown_category"))
    except InvalidUnitError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_unit"))
    except InvalidPrecisionError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_request"))
    if not result.ok:
        return fail(
            ValidationAppError(
                message=result.error or "Invalid input",
                code="unit.invalid_input",
                details={"formatted": result.formatted},
            )
        )
    return ok(result.to_dict())


@api_bp.get("/categories")
def categories() -> Response:
    return ok({"categories": describe_categories()})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = describe_units(category)
    except UnknownCategoryError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.unknown_category"))
    return ok({"category": category, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="unit.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )
    return _run_conversion(
        payload.category,
        payload.from_unit,
        payload.to_unit,
        payload.value,
        payload.decimals,
    )


@api_bp.get("/convert")
def convert_query_endpoint() -> Response:
    args = request.args
    try:
        category = get_str(args, "category", field_name="Category")
        from_unit = get_str(args, "from_unit", field_name="Source unit")
        to_unit = get_str(args, "to_unit", field_name="Target unit")
        value = get_str(args, "value", field_name="Value")
        decimals = get_int(args, "decimals", None, minimum=0, maximum=MAX_DECIMALS)
    except ValidationError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_request"))
    return _run_conversion(category, from_unit, to_unit, value, decimals)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
    "convert_query_endpoint",
]
