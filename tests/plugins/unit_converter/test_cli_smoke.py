"""Smoke tests for the Unit Converter CLI."""

from __future__ import annotations

import json
from contextlib import redirect_stdout
from io import StringIO

import pytest

from plugins.unit_converter import cli


def _run_cli(args: list[str]) -> dict[str, object]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        cli.main(args)
    output = buffer.getvalue().strip()
    return json.loads(output)


def test_cli_lists_categories_and_units():
    listing = _run_cli(["categories"])
    assert len(listing["categories"]) == 8

    units = _run_cli(["units", "--category", "Velocity"])
    assert [unit["label"] for unit in units["units"]] == ["mph", "km/h", "m/s", "ft/s"]


def test_cli_convert():
    result = _run_cli(["convert", "--category", "temperature", "--from", "°C", "--to", "°F", "100"])
    assert result["formatted"] == "212.000"

    negative = _run_cli(["convert", "--category", "length", "--from", "m", "--to", "mm", "-2"])
    assert negative["formatted"] == "-2000.000"


def test_cli_reports_invalid_input():
    buffer = StringIO()
    with redirect_stdout(buffer), pytest.raises(SystemExit) as excinfo:
        cli.main(["convert", "--category", "area", "--from", "m2", "--to", "ft2", "lots"])
    assert excinfo.value.code == 2
    payload = json.loads(buffer.getvalue())
    assert payload["error"]["code"] == "unit.invalid_input"


def test_cli_reports_unit_outside_category():
    buffer = StringIO()
    with redirect_stdout(buffer), pytest.raises(SystemExit) as excinfo:
        cli.main(["convert", "--category", "area", "--from", "m3", "--to", "ft2", "1"])
    assert excinfo.value.code == 2
    payload = json.loads(buffer.getvalue())
    assert payload["error"]["code"] == "unit.invalid_unit"
