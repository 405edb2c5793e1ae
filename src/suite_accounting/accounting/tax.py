from __future__ import annotations

import logging
import math
from decimal import Decimal
from fractions import Fraction

from suite_accounting.accounting.errors import (
    NetOverGrossAmountError,
    NonFiniteAmountError,
    SubZeroGrossError,
    SubZeroNetError,
    SubZeroRateError,
)
from suite_accounting.accounting.minor_units import require_int64
from suite_accounting.utils.decimal_tools import RationalLike, as_fraction, is_finite_number

logger = logging.getLogger(__name__)


# region Rational helpers


def quantize_rational(value: RationalLike, places: int) -> Decimal:
    """Round $value to $places digits past the dot, resolving ties to even.

    The rounding is done on the exact rational value, so there is no double
    rounding through an intermediate precision.

    Examples:
        >>> quantize_rational(Fraction(5, 2), 0)
        Decimal('2')
        >>> quantize_rational(Fraction(1, 3), 4)
        Decimal('0.3333')
    """
    # Raise: negative place counts are meaningless here
    if places < 0:
        raise ValueError(f"Cannot call `quantize_rational` because $places ({places}) is negative")

    # Note: `round(Fraction)` with no ndigits rounds half to even and returns an int
    scaled = round(as_fraction(value) * 10**places)
    return Decimal(f"{scaled}e-{places}")


def render_rational(value: RationalLike, places: int) -> str:
    """Render $value as positional decimal text with exactly $places digits past the dot.

    Example:
        >>> render_rational(Fraction(100, 119) * 10, 9)
        '8.403361345'
    """
    return format(quantize_rational(value, places), "f")


def _finite_fraction(name: str, value: RationalLike) -> Fraction:
    # Raise: NaN and infinities have no rational value
    if not is_finite_number(value):
        raise NonFiniteAmountError(name, value)
    return as_fraction(value)


def _net_from_gross(gross: Fraction, rate: Fraction) -> Fraction:
    # The rate becomes a divisor superior to 1: gross / (1 + rate)
    return gross / (1 + rate)


# endregion

# region Net / tax amounts


def rat_net_amount(gross: RationalLike, rate: RationalLike) -> Fraction:
    """Derive the net amount from a gross amount and a tax rate, exactly.

    Both inputs are converted to `Fraction` without loss (floats keep their
    exact binary value) and no rounding happens at any stage. Callers pick the
    precision they need afterwards, e.g. `render_rational(net, 9)`.

    Args:
        gross: Gross amount.
        rate: Tax rate as a fraction (0.19 for 19 %).

    Returns:
        The exact net amount `gross / (1 + rate)`.

    Raises:
        SubZeroRateError: If $rate is negative.
        NonFiniteAmountError: If $gross or $rate is NaN or infinite.
    """
    gross_value = _finite_fraction("gross", gross)
    rate_value = _finite_fraction("rate", rate)

    # Raise: there are no markets with a negative sales tax
    if rate_value < 0:
        raise SubZeroRateError(rate)

    if rate_value == 0:
        logger.debug(f"Tax $rate is 0; net amount equals $gross ({gross_value})")
        return gross_value

    return _net_from_gross(gross_value, rate_value)


def net_amount(gross: int, rate: float) -> int:
    """Derive the net minor-unit amount before tax from a gross minor-unit amount.

    The division runs on exact rationals. The result is rendered to decimal
    text with zero digits past the dot and parsed back as `int`, so it never
    passes through a float: `net_amount(1999, 0.20) == 1666`.

    Args:
        gross: Gross amount in minor units.
        rate: Tax rate as a fraction (0.20 for 20 %).

    Returns:
        Net amount in minor units.

    Raises:
        SubZeroRateError: If $rate is negative.
        NonFiniteAmountError: If $rate is NaN or infinite.
        MinorUnitOverflowError: If $gross does not fit into a signed 64-bit integer.
    """
    require_int64(gross)

    # Raise: NaN and infinities have no rational value
    if not math.isfinite(rate):
        raise NonFiniteAmountError("rate", rate)

    # Raise: there are no markets with a negative sales tax
    if rate < 0:
        raise SubZeroRateError(rate)

    if rate == 0:
        return gross

    net = _net_from_gross(Fraction(gross), Fraction(rate))
    return int(render_rational(net, 0))


def tax_amount(gross: int, net: int) -> int:
    """Return the tax amount, the difference between the $gross and $net amounts.

    Raises:
        SubZeroGrossError: If $gross is negative.
        SubZeroNetError: If $net is negative.
        NetOverGrossAmountError: If $net is greater than $gross.
        MinorUnitOverflowError: If $gross or $net does not fit into a signed 64-bit integer.
    """
    require_int64(gross)
    require_int64(net)

    # Raise: guard against values that are not allowed in this context
    if gross < 0:
        raise SubZeroGrossError(gross)
    if net < 0:
        raise SubZeroNetError(net)
    if net > gross:
        raise NetOverGrossAmountError(gross, net)

    return gross - net


# endregion
