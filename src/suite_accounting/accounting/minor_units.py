from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from suite_accounting.accounting.errors import MinorUnitOverflowError, NonFiniteAmountError
from suite_accounting.accounting.policy import INT64_MAX, INT64_MIN, decimal_context
from suite_accounting.domain.monetary.currency import CurrencyFactor


def round_half_away_from_zero(value: float) -> int:
    """Round $value to the nearest integer, resolving ties away from zero.

    This is conventional price rounding (2.5 -> 3, -2.5 -> -3), applied to the
    exact binary value of $value. Reporting code uses banker's rounding instead,
    see `suite_accounting.accounting.exchange`.
    """
    # Note: `to_integral_value` is exact and does not depend on context precision
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def require_int64(value: int) -> int:
    """Return $value unchanged if it fits into a signed 64-bit integer."""
    if value < INT64_MIN or value > INT64_MAX:
        raise MinorUnitOverflowError(value)
    return value


def to_minor_unit(currency: CurrencyFactor, value: float) -> int:
    """Convert a decimal amount into its integer minor-unit amount.

    The amount is multiplied by the currency factor as a float and rounded half
    away from zero: `to_minor_unit(GBP, 9.95) == 995`, `to_minor_unit(GBP, -9.95) == -995`.

    Args:
        currency: Supplies the minor-unit factor.
        value: Decimal amount in major units.

    Returns:
        Amount in minor units.

    Raises:
        NonFiniteAmountError: If $value is NaN or infinite.
        MinorUnitOverflowError: If the result does not fit into a signed 64-bit integer.
    """
    # Raise: NaN and infinities have no minor-unit amount
    if not math.isfinite(value):
        raise NonFiniteAmountError("value", value)

    scaled = value * currency.factor_as_float
    if not math.isfinite(scaled):
        raise NonFiniteAmountError("value", value)

    return require_int64(round_half_away_from_zero(scaled))


def from_minor_unit(currency: CurrencyFactor, value: int) -> float:
    """Convert an integer minor-unit amount back into a decimal amount.

    Zero-decimal currencies (factor 1, e.g. JPY) return the integer as a float
    directly. Other factors divide exactly in `Decimal` and round once to float.
    """
    # Fast path for currencies like JPY with a factor of 1
    if currency.factor == 1:
        return float(value)

    with localcontext(decimal_context()):
        quotient = Decimal(value) / Decimal(currency.factor)
    return float(quotient)
