from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Use where optimal type is `Fraction`, but other types are also acceptable (and will be converted to `Fraction`)
RationalLike: TypeAlias = Fraction | Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` without losing information.

    Floats are expanded to their exact binary value (`Decimal(0.1)` is
    0.1000000000000000055511151231257827...). The calculators must see the
    float they were given, not its shortest text, otherwise a conversion step
    would round before the calculation does.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(value)


def as_fraction(value: RationalLike) -> Fraction:
    """Converts input to an exact `Fraction`.

    Strings may be decimal ("0.19") or ratio ("19/100") literals.

    Args:
        value: Input value as `RationalLike`.

    Returns:
        Value converted to `Fraction`.

    Raises:
        ValueError: If $value is not a finite number.
    """
    if isinstance(value, Fraction):
        return value

    # Raise: NaN and infinities have no rational value
    if not is_finite_number(value):
        raise ValueError(f"Cannot call `as_fraction` because $value ({value}) is not a finite number")

    return Fraction(value)


def is_finite_number(value: RationalLike) -> bool:
    """Check that $value is neither NaN nor infinite.

    Strings are checked by parsing them as `Decimal`; ratio strings ("1/3") are always finite.
    """
    if isinstance(value, (int, Fraction)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str) and "/" not in value:
        try:
            return Decimal(value.strip()).is_finite()
        except ArithmeticError:
            # Malformed literals are reported by `Fraction` itself
            return True
    return True
