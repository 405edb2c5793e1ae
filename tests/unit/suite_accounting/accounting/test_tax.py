from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from suite_accounting.accounting.errors import (
    AccountingErrorKind,
    MinorUnitOverflowError,
    NetOverGrossAmountError,
    NonFiniteAmountError,
    SubZeroGrossError,
    SubZeroNetError,
    SubZeroRateError,
)
from suite_accounting.accounting.tax import net_amount, quantize_rational, rat_net_amount, render_rational, tax_amount


# region rat_net_amount


@pytest.mark.parametrize(
    "gross, rate, expected",
    [
        (10, 0.19, "8.403361345"),
        (19.99, 0.20, "16.658333333"),
        (123, 0.07, "114.953271028"),
    ],
)
def test_rat_net_amount_from_floats(gross, rate, expected):
    net = rat_net_amount(Fraction(gross), Fraction(rate))
    assert render_rational(net, 9) == expected


def test_rat_net_amount_is_exact():
    net = rat_net_amount(Fraction(10), Fraction(19, 100))
    assert net == Fraction(1000, 119)
    assert net * Fraction(119, 100) == 10


def test_rat_net_amount_accepts_decimal_like_inputs():
    assert rat_net_amount("10", "0.19") == Fraction(1000, 119)
    assert rat_net_amount(Decimal("10"), Decimal("0.19")) == Fraction(1000, 119)
    assert rat_net_amount(120, "1/5") == 100


def test_rat_net_amount_zero_rate_returns_gross():
    assert rat_net_amount(Fraction(1999, 100), 0) == Fraction(1999, 100)


def test_rat_net_amount_rejects_negative_rate():
    with pytest.raises(SubZeroRateError) as exc_info:
        rat_net_amount(10, Fraction(-1, 100))
    assert exc_info.value.kind == AccountingErrorKind.SUB_ZERO_RATE


@pytest.mark.parametrize("gross, rate", [(float("nan"), 0.2), (10, float("inf")), (Decimal("NaN"), 0), (10, "Infinity")])
def test_rat_net_amount_rejects_non_finite_inputs(gross, rate):
    with pytest.raises(NonFiniteAmountError):
        rat_net_amount(gross, rate)


# endregion

# region Rendering


def test_quantize_rational_rounds_half_to_even():
    assert quantize_rational(Fraction(5, 2), 0) == Decimal("2")
    assert quantize_rational(Fraction(7, 2), 0) == Decimal("4")
    assert quantize_rational(Fraction(-5, 2), 0) == Decimal("-2")
    assert quantize_rational(Fraction(1, 8), 2) == Decimal("0.12")


def test_render_rational_keeps_trailing_zeros():
    assert render_rational(Fraction(1, 2), 3) == "0.500"
    assert render_rational(0, 2) == "0.00"
    assert render_rational(Fraction(-1, 3), 4) == "-0.3333"
    assert render_rational(Fraction(1000, 119), 0) == "8"


def test_quantize_rational_rejects_negative_places():
    with pytest.raises(ValueError):
        quantize_rational(Fraction(1, 3), -1)


# endregion

# region net_amount


@pytest.mark.parametrize(
    "gross, rate, expected",
    [
        (1999, 0.20, 1666),
        (1234, 0.19, 1037),
        (9999, 0.33, 7518),
        (0, 0.20, 0),
        (100, 1.0, 50),
    ],
)
def test_net_amount(gross, rate, expected):
    assert net_amount(gross, rate) == expected


def test_net_amount_resolves_ties_to_even():
    # 3 / 2 and 5 / 2 are exact ties
    assert net_amount(3, 1.0) == 2
    assert net_amount(5, 1.0) == 2


def test_net_amount_zero_rate_returns_gross():
    assert net_amount(1999, 0) == 1999
    assert net_amount(-1999, 0.0) == -1999


def test_net_amount_never_exceeds_gross():
    for gross in (1, 2, 3, 99, 1999, 2**63 - 1):
        for rate in (0.0001, 0.05, 0.2, 1.0, 10.0):
            assert net_amount(gross, rate) <= gross


def test_net_amount_rejects_negative_rate():
    with pytest.raises(SubZeroRateError) as exc_info:
        net_amount(1999, -0.2)
    assert exc_info.value.rate == -0.2


def test_net_amount_rejects_non_finite_rate():
    with pytest.raises(NonFiniteAmountError):
        net_amount(1999, float("nan"))
    with pytest.raises(NonFiniteAmountError):
        net_amount(1999, float("inf"))


def test_net_amount_rejects_gross_outside_int64():
    with pytest.raises(MinorUnitOverflowError):
        net_amount(2**63, 0.2)


# endregion

# region tax_amount


def test_tax_amount():
    assert tax_amount(1999, 1666) == 333
    assert tax_amount(1999, 1999) == 0
    assert tax_amount(0, 0) == 0


def test_tax_amount_from_net_amount():
    gross = 1999
    assert tax_amount(gross, net_amount(gross, 0.20)) == 333


def test_tax_amount_rejects_negative_gross():
    with pytest.raises(SubZeroGrossError) as exc_info:
        tax_amount(-1, 0)
    assert exc_info.value.gross == -1
    assert exc_info.value.kind == AccountingErrorKind.SUB_ZERO_GROSS


def test_tax_amount_rejects_negative_net():
    with pytest.raises(SubZeroNetError) as exc_info:
        tax_amount(100, -1)
    assert exc_info.value.net == -1


def test_tax_amount_rejects_net_over_gross():
    with pytest.raises(NetOverGrossAmountError) as exc_info:
        tax_amount(100, 101)
    assert (exc_info.value.gross, exc_info.value.net) == (100, 101)
    assert exc_info.value.kind == AccountingErrorKind.NET_OVER_GROSS_AMOUNT


def test_tax_amount_checks_gross_before_net():
    # Both are invalid; the gross violation is reported
    with pytest.raises(SubZeroGrossError):
        tax_amount(-5, -10)


# endregion
