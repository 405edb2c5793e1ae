from __future__ import annotations

# Column-wise variants of the minor-unit conversions for pandas data.
# Each value goes through the scalar function, so rounding rules are identical.

import logging
from typing import Iterable

import pandas as pd

from suite_accounting.accounting.minor_units import from_minor_unit, to_minor_unit
from suite_accounting.accounting.precision import validate_many_floats_are_precise
from suite_accounting.domain.monetary.currency import CurrencyFactor

logger = logging.getLogger(__name__)


def validate_column_is_precise(df: pd.DataFrame, column: str) -> None:
    """Validate that every amount in $df[$column] has at most 2 digits past the dot.

    Missing values (NaN) are not amounts and are rejected like any other non-finite value.

    Raises:
        ValueError: If $df is not a DataFrame or $column is missing.
        FloatPrecisionError: For the first amount with too many digits past the dot.
        NonFiniteAmountError: For the first NaN or infinite amount.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Cannot call `validate_column_is_precise` because $df is {type(df).__name__}, not a pandas DataFrame")

    # Check: $column must exist
    if column not in df.columns:
        raise ValueError(f"Cannot call `validate_column_is_precise` because $column '{column}' is missing; available columns: {list(df.columns)}")

    validate_many_floats_are_precise(*df[column].astype("float64").tolist())


def to_minor_unit_series(values: pd.Series | Iterable[float], currency: CurrencyFactor) -> pd.Series:
    """Convert decimal amounts into an int64 Series of minor-unit amounts.

    The index of $values is preserved when it is a Series.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype="float64")
    converted = [to_minor_unit(currency, float(value)) for value in series.tolist()]
    logger.debug(f"Converted {len(converted)} amount(s) to minor units with factor {currency.factor}")
    return pd.Series(converted, index=series.index, name=series.name, dtype="int64")


def from_minor_unit_series(values: pd.Series | Iterable[int], currency: CurrencyFactor) -> pd.Series:
    """Convert minor-unit amounts into a float64 Series of decimal amounts.

    The index of $values is preserved when it is a Series.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype="int64")
    converted = [from_minor_unit(currency, int(value)) for value in series.tolist()]
    return pd.Series(converted, index=series.index, name=series.name, dtype="float64")
