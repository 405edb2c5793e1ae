__version__ = "0.1.0"

from suite_accounting.domain.monetary.currency import Currency, CurrencyFactor, CurrencyType

# Importing the registry registers the predefined ISO 4217 currencies
from suite_accounting.domain.monetary import currency_registry  # noqa: F401
from suite_accounting.accounting import (
    AccountingError,
    AccountingErrorKind,
    exchange,
    from_minor_unit,
    net_amount,
    rat_net_amount,
    tax_amount,
    to_minor_unit,
    validate_float_is_precise,
    validate_many_floats_are_precise,
)

__all__ = [
    "AccountingError",
    "AccountingErrorKind",
    "Currency",
    "CurrencyFactor",
    "CurrencyType",
    "exchange",
    "from_minor_unit",
    "net_amount",
    "rat_net_amount",
    "tax_amount",
    "to_minor_unit",
    "validate_float_is_precise",
    "validate_many_floats_are_precise",
]
