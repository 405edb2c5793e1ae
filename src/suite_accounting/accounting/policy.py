"""Business-rule constants shared by the accounting calculators.

Everything here is immutable. Working precision is handed to `decimal` through
a fresh `Context` per call (see `decimal_context`), never by mutating the
thread's global context.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Context
from typing import Final

# Digits allowed past the dot on user-entered amounts.
MAX_FRACTION_DIGITS: Final[int] = 2

# Reporting precision of `exchange` results.
REPORTING_DECIMAL_PLACES: Final[int] = 2

# A rate of 0 is a same-currency exchange (e.g. GBP -> GBP) and converts at 1.
ZERO_EXCHANGE_RATE_IS_IDENTITY: Final[bool] = True

# Binary working precisions, see IEEE 754 quadruple / octuple precision.
QUADRUPLE_PRECISION: Final[int] = 128
OCTUPLE_PRECISION: Final[int] = 256

# Minor-unit amounts are signed 64-bit integers.
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


def decimal_digits_for_bits(bits: int) -> int:
    """Number of significant decimal digits that covers a $bits wide binary significand.

    Examples:
        >>> decimal_digits_for_bits(128)
        39
        >>> decimal_digits_for_bits(256)
        78
    """
    if bits <= 0:
        raise ValueError(f"Cannot call `decimal_digits_for_bits` because $bits ({bits}) is not positive")
    return math.ceil(bits * math.log10(2))


def decimal_context(bits: int = OCTUPLE_PRECISION) -> Context:
    """Build a new `decimal.Context` with $bits of working precision and banker's rounding.

    Exponent limits are widened so that any float (down to 5e-324) stays representable.
    """
    return Context(
        prec=decimal_digits_for_bits(bits),
        rounding=ROUND_HALF_EVEN,
        Emin=-999_999,
        Emax=999_999,
    )
