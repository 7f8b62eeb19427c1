from __future__ import annotations

import pytest

from src.services.unit_converter import is_supported_unit, parse_measurement_to_ml


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 oz", 29.5735),
        ("2 oz", 59.147),
        ("1.5 oz", 44.36025),
        ("2.5 tsp", 12.3223),
        ("1/2 oz", 14.78675),
        ("3/4 cup", 177.441),
        ("1 / 2 oz", 14.78675),
        ("1 2/3 oz", 49.289),
        ("2 1/4 oz", 66.540375),
        ("1 3/4 cup", 414.029),
        ("1 1/2 tbsp", 22.1802),
        ("2 cups", 473.176),
        ("1 cl", 10.0),
        ("100 ml", 100.0),
        ("1 fl oz", 29.5735),
        ("2 Fluid Ounces", 59.147),
        ("3 teaspoons", 14.78676),
        ("1 TBSP", 14.7868),
        ("  4 centiliters  ", 40.0),
    ],
)
def test_parse_supported(text, expected):
    assert parse_measurement_to_ml(text) == pytest.approx(expected, abs=1e-2)


@pytest.mark.parametrize(
    "text",
    [None, "", "   ", "1 pint", "1/0 oz", "abc oz", "oz", "Juice of 1 lime", "1 oz gin", "0 oz", "1 shot", "9" * 400 + " oz"],
)
def test_parse_unsupported(text):
    assert parse_measurement_to_ml(text) is None


def test_is_supported_unit():
    for u in ("oz", "cup", "tsp", "tbsp", "cups", "teaspoons", "tablespoons", "OZ", "Cup", "fl oz"):
        assert is_supported_unit(u)
    for u in ("pint", "gallon", "liter", ""):
        assert not is_supported_unit(u)
