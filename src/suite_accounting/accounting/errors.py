"""Error taxonomy of the accounting calculators.

Every failure is an input-validation failure. Each exception carries an
`AccountingErrorKind` so callers can branch on `err.kind` instead of on the
concrete class, and keeps the offending values as attributes.
"""

from __future__ import annotations

from enum import Enum


class AccountingErrorKind(Enum):
    """Kinds of rejected input."""

    FLOAT_PRECISION = "FLOAT_PRECISION"  # Too many digits past the dot
    SUB_ZERO_RATE = "SUB_ZERO_RATE"  # Negative tax or exchange rate
    SUB_ZERO_GROSS = "SUB_ZERO_GROSS"
    SUB_ZERO_NET = "SUB_ZERO_NET"
    NET_OVER_GROSS_AMOUNT = "NET_OVER_GROSS_AMOUNT"
    NON_FINITE_AMOUNT = "NON_FINITE_AMOUNT"  # NaN or infinity
    MINOR_UNIT_OVERFLOW = "MINOR_UNIT_OVERFLOW"  # Outside the signed 64-bit range


class AccountingError(ValueError):
    """Base class for all errors raised by the accounting calculators."""

    kind: AccountingErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FloatPrecisionError(AccountingError):
    """Raised when an amount has more digits past the dot than the business rule allows.

    Attributes:
        value: Shortest decimal text of the rejected float (e.g. "12.123").
        precision: Number of digits found past the dot.
    """

    kind = AccountingErrorKind.FLOAT_PRECISION

    def __init__(self, value: str, precision: int):
        self.value = value
        self.precision = precision
        super().__init__(f"Float precision error: $value ({value}) has {precision} digits past the dot")


class SubZeroRateError(AccountingError):
    """Raised when a rate is negative. A negative rate is never treated as zero."""

    kind = AccountingErrorKind.SUB_ZERO_RATE

    def __init__(self, rate: object):
        self.rate = rate
        super().__init__(f"Rate cannot be negative, but provided $rate is: {rate}")


class SubZeroGrossError(AccountingError):
    kind = AccountingErrorKind.SUB_ZERO_GROSS

    def __init__(self, gross: int):
        self.gross = gross
        super().__init__(f"Gross amount cannot be negative, but provided $gross is: {gross}")


class SubZeroNetError(AccountingError):
    kind = AccountingErrorKind.SUB_ZERO_NET

    def __init__(self, net: int):
        self.net = net
        super().__init__(f"Net amount cannot be negative, but provided $net is: {net}")


class NetOverGrossAmountError(AccountingError):
    kind = AccountingErrorKind.NET_OVER_GROSS_AMOUNT

    def __init__(self, gross: int, net: int):
        self.gross = gross
        self.net = net
        super().__init__(f"Net amount cannot exceed gross amount, but $net ({net}) > $gross ({gross})")


class NonFiniteAmountError(AccountingError):
    """Raised when an amount or rate is NaN or infinite.

    Attributes:
        name: Name of the rejected parameter (e.g. "rate").
        value: The rejected value.
    """

    kind = AccountingErrorKind.NON_FINITE_AMOUNT

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"${name} must be a finite number, but provided value is: {value}")


class MinorUnitOverflowError(AccountingError):
    """Raised when a minor-unit amount does not fit into a signed 64-bit integer."""

    kind = AccountingErrorKind.MINOR_UNIT_OVERFLOW

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Minor-unit amount {value} does not fit into a signed 64-bit integer")
