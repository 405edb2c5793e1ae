from __future__ import annotations

import logging
import math
from decimal import localcontext

from suite_accounting.accounting.errors import NonFiniteAmountError, SubZeroRateError
from suite_accounting.accounting.policy import REPORTING_DECIMAL_PLACES, ZERO_EXCHANGE_RATE_IS_IDENTITY, decimal_context
from suite_accounting.domain.monetary.currency import CurrencyFactor
from suite_accounting.utils.decimal_tools import as_decimal

logger = logging.getLogger(__name__)


def round_half_even(value: float, places: int = REPORTING_DECIMAL_PLACES) -> float:
    """Banker's rounding of $value to $places decimal places.

    The float is scaled by 10 ** $places, rounded to the nearest even integer on
    ties, and scaled back: `round_half_even(0.125) == 0.12`, `round_half_even(0.375) == 0.38`.
    See http://wiki.c2.com/?BankersRounding.
    """
    scale = 10**places
    scaled = value * scale
    # Floats this large are already whole numbers
    if not math.isfinite(scaled):
        return value
    # Note: `round()` with no ndigits rounds floats half to even, exactly
    return round(scaled) / scale


def exchange(
    currency: CurrencyFactor,
    value: float,
    rate: float,
    *,
    zero_rate_is_identity: bool = ZERO_EXCHANGE_RATE_IS_IDENTITY,
) -> float:
    """Apply an exchange rate to a minor-unit amount.

    Computes `value / factor / rate` at octuple working precision, converts the
    result to float once and rounds it to `REPORTING_DECIMAL_PLACES` with
    banker's rounding. Tills may round up to the nearest penny, but for reporting
    the rule is always banker's rounding.

    Args:
        currency: Supplies the minor-unit factor of $value.
        value: Amount in minor units (as a float).
        rate: Exchange rate from the approved finance list.
        zero_rate_is_identity: When True, a $rate of 0 is a same-currency exchange
            (e.g. GBP -> GBP) and converts at 1.

    Returns:
        Converted amount in major units, rounded to 2 decimal places.

    Raises:
        SubZeroRateError: If $rate is negative.
        NonFiniteAmountError: If $value or $rate is NaN or infinite, or the result overflows.
        ZeroDivisionError: If $rate is 0 and $zero_rate_is_identity is False.
    """
    # Raise: NaN and infinities cannot be converted
    if not math.isfinite(value):
        raise NonFiniteAmountError("value", value)
    if not math.isfinite(rate):
        raise NonFiniteAmountError("rate", rate)

    # Raise: negative exchange rates are never coerced
    if rate < 0:
        raise SubZeroRateError(rate)

    if rate == 0:
        if not zero_rate_is_identity:
            raise ZeroDivisionError("Cannot call `exchange` because $rate is 0")
        logger.debug(f"Exchange $rate is 0; converting {value} at 1 (same-currency exchange)")
        rate = 1.0

    with localcontext(decimal_context()):
        # value / factor / rate
        converted = as_decimal(value) / as_decimal(currency.factor) / as_decimal(rate)

    result = float(converted)
    if not math.isfinite(result):
        raise NonFiniteAmountError("result", result)
    return round_half_even(result)
