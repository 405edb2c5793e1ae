"""Monetary-precision arithmetic.

Conversions between decimal amounts and integer minor units, exchange-rate
application and net / tax derivation, each with a fixed rounding rule:

- price entry (`to_minor_unit`) rounds half away from zero
- reporting (`exchange`) rounds half to even at 2 decimal places
- tax derivation (`rat_net_amount`, `net_amount`) is exact rational arithmetic
"""

from suite_accounting.accounting.errors import (
    AccountingError,
    AccountingErrorKind,
    FloatPrecisionError,
    MinorUnitOverflowError,
    NetOverGrossAmountError,
    NonFiniteAmountError,
    SubZeroGrossError,
    SubZeroNetError,
    SubZeroRateError,
)
from suite_accounting.accounting.exchange import exchange, round_half_even
from suite_accounting.accounting.minor_units import from_minor_unit, round_half_away_from_zero, to_minor_unit
from suite_accounting.accounting.precision import fraction_digits, validate_float_is_precise, validate_many_floats_are_precise
from suite_accounting.accounting.tax import net_amount, quantize_rational, rat_net_amount, render_rational, tax_amount

__all__ = [
    # Errors
    "AccountingError",
    "AccountingErrorKind",
    "FloatPrecisionError",
    "MinorUnitOverflowError",
    "NetOverGrossAmountError",
    "NonFiniteAmountError",
    "SubZeroGrossError",
    "SubZeroNetError",
    "SubZeroRateError",
    # Precision validation
    "fraction_digits",
    "validate_float_is_precise",
    "validate_many_floats_are_precise",
    # Minor units
    "from_minor_unit",
    "round_half_away_from_zero",
    "to_minor_unit",
    # Exchange
    "exchange",
    "round_half_even",
    # Tax
    "net_amount",
    "quantize_rational",
    "rat_net_amount",
    "render_rational",
    "tax_amount",
]
