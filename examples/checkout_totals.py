from __future__ import annotations

import logging

import pandas as pd

from suite_accounting.accounting.errors import AccountingError
from suite_accounting.accounting.exchange import exchange
from suite_accounting.accounting.frame import to_minor_unit_series, validate_column_is_precise
from suite_accounting.accounting.tax import net_amount, tax_amount
from suite_accounting.domain.monetary.currency import Currency


logger = logging.getLogger(__name__)

# GBP per EUR, taken from the approved finance list
GBP_PER_EUR = 0.85
VAT_RATE = 0.20


def run() -> None:
    gbp = Currency.from_str("GBP")

    # Prices as entered by a user, validated before they are stored
    basket = pd.DataFrame({"sku": ["soap", "bath-bomb", "shampoo"], "price": [9.95, 4.45, 12.12]})
    validate_column_is_precise(basket, "price")

    # Stored as minor units (pence)
    basket["gross"] = to_minor_unit_series(basket["price"], gbp)

    for row in basket.itertuples():
        gross = int(row.gross)
        net = net_amount(gross, VAT_RATE)
        tax = tax_amount(gross, net)
        logger.info(f"{row.sku}: gross={gross} net={net} tax={tax} (pence)")

    total = int(basket["gross"].sum())
    total_in_eur = exchange(gbp, total, GBP_PER_EUR)
    logger.info(f"Basket total {total} pence is {total_in_eur} EUR")

    # A price with too many digits past the dot is rejected, not rounded
    try:
        validate_column_is_precise(pd.DataFrame({"price": [1.999]}), "price")
    except AccountingError as e:
        logger.info(f"Rejected price ({e.kind.name}): {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
