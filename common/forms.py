"""Form and query-string value parsing helpers shared across plugins."""

from __future__ import annotations

from typing import Mapping, Any

from .validation import ValidationError


FormDataLike = Mapping[str, Any] | Any


def _lookup(data: FormDataLike, key: str) -> Any:
    if data is None:
        return None
    getter = getattr(data, "get", None)
    if callable(getter):
        return getter(key)
    return data[key] if isinstance(data, Mapping) and key in data else None


def get_str(
    data: FormDataLike,
    key: str,
    default: str | None = None,
    *,
    field_name: str | None = None,
    max_length: int = 64,
) -> str:
    """Extract a stripped, non-empty string from *data*.

    Missing or blank values fall back to ``default``; without a default they
    are rejected.
    """

    field_label = field_name or key
    raw = _lookup(data, key)
    text = raw.strip() if isinstance(raw, str) else None
    if not text:
        if default is None:
            raise ValidationError(f"{field_label} is required")
        return default
    if len(text) > max_length:
        raise ValidationError(f"{field_label} must be at most {max_length} characters")
    return text


def get_float(
    data: FormDataLike,
    key: str,
    default: float,
    *,
    field_name: str | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Extract a float from *data* with validation.

    Missing or blank values fall back to ``default``. ``minimum`` and
    ``maximum`` bounds are optional and inclusive.
    """

    field_label = field_name or key
    raw = _lookup(data, key)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        value = default
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid value for {field_label}") from exc

    if minimum is not None and value < minimum:
        raise ValidationError(f"{field_label} must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_label} must be ≤ {maximum}")

    return value


def get_int(
    data: FormDataLike,
    key: str,
    default: int | None,
    *,
    field_name: str | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int | None:
    """Extract an integer from *data*; ``None`` when absent and no default."""

    raw = _lookup(data, key)
    if default is None and (raw is None or (isinstance(raw, str) and raw.strip() == "")):
        return None

    value = int(
        round(
            get_float(
                data,
                key,
                float(default or 0),
                field_name=field_name,
                minimum=float(minimum) if minimum is not None else None,
                maximum=float(maximum) if maximum is not None else None,
            )
        )
    )

    if minimum is not None and value < minimum:
        raise ValidationError(f"{field_name or key} must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_name or key} must be ≤ {maximum}")

    return value


__all__ = ["get_float", "get_int", "get_str"]
