"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Length, temperature, velocity, force, moment, pressure, area and volume conversions.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]
