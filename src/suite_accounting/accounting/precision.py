from __future__ import annotations

import math
from decimal import Decimal

from suite_accounting.accounting.errors import FloatPrecisionError, NonFiniteAmountError
from suite_accounting.accounting.policy import MAX_FRACTION_DIGITS, decimal_context


def fraction_digits(value: float) -> tuple[str, int]:
    """Return the shortest decimal text of $value and its number of digits past the dot.

    The text is the shortest string that round-trips to the same float (`repr`),
    written positionally and without trailing zeros. Fixed-width formatting is
    deliberately avoided: it would report padding zeros or hide binary noise.

    Examples:
        >>> fraction_digits(12.123)
        ('12.123', 3)
        >>> fraction_digits(10.0)
        ('10', 0)
        >>> fraction_digits(1e-05)
        ('0.00001', 5)

    Raises:
        NonFiniteAmountError: If $value is NaN or infinite.
    """
    value = float(value)

    # Raise: NaN and infinities have no digits to count
    if not math.isfinite(value):
        raise NonFiniteAmountError("value", value)

    shortest = decimal_context().normalize(Decimal(repr(value)))
    text = format(shortest, "f")
    exponent = shortest.as_tuple().exponent
    return text, max(0, -exponent)


def validate_float_is_precise(value: float) -> None:
    """Ensure $value has at most `MAX_FRACTION_DIGITS` digits past the dot.

    This keeps incorrect currency data out of storage. Two digits is a business
    rule, independent of the currency's own minor unit.

    Raises:
        FloatPrecisionError: If $value has too many digits past the dot.
        NonFiniteAmountError: If $value is NaN or infinite.
    """
    text, digits = fraction_digits(value)
    if digits > MAX_FRACTION_DIGITS:
        raise FloatPrecisionError(text, digits)


def validate_many_floats_are_precise(*values: float) -> None:
    """Run `validate_float_is_precise` over $values, stopping at the first violation."""
    for value in values:
        validate_float_is_precise(value)
