from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from suite_accounting.utils.decimal_tools import as_decimal, as_fraction, is_finite_number


def test_as_decimal_keeps_exact_float_value():
    assert as_decimal(0.1) == Decimal(0.1)
    assert as_decimal(0.1) != Decimal("0.1")
    assert as_decimal(0.125) == Decimal("0.125")
    assert as_decimal("1.10") == Decimal("1.10")
    assert as_decimal(7) == Decimal(7)


def test_as_decimal_returns_decimal_unchanged():
    value = Decimal("1.23")
    assert as_decimal(value) is value


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, Fraction(1, 2)),
        ("0.19", Fraction(19, 100)),
        ("19/100", Fraction(19, 100)),
        (Decimal("1.25"), Fraction(5, 4)),
        (3, Fraction(3)),
    ],
)
def test_as_fraction(value, expected):
    assert as_fraction(value) == expected


def test_as_fraction_rejects_non_finite():
    with pytest.raises(ValueError):
        as_fraction(float("nan"))
    with pytest.raises(ValueError):
        as_fraction(Decimal("-Infinity"))


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, True),
        (float("inf"), False),
        (float("nan"), False),
        (Decimal("NaN"), False),
        ("inf", False),
        ("0.19", True),
        ("1/3", True),
        (Fraction(1, 3), True),
        (10**400, True),
    ],
)
def test_is_finite_number(value, expected):
    assert is_finite_number(value) is expected
