from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Protocol

logger = logging.getLogger(__name__)


class CurrencyFactor(Protocol):
    """Read-only view of a currency's minor-unit factor.

    The factor is the number of minor units in one major unit (100 for GBP, 1 for JPY).
    All calculators in `suite_accounting.accounting` depend only on this view.
    """

    @property
    def factor(self) -> int:
        """Minor units per major unit, always a positive power of ten."""
        ...

    @property
    def factor_as_float(self) -> float:
        """Same value as $factor, as a float."""
        ...


class CurrencyType(Enum):
    """Enumeration of ISO 4217 entry types."""

    FIAT = "FIAT"
    FUND = "FUND"


class Currency:
    """Represents an ISO 4217 currency with code, minor-unit precision, and metadata.

    Attributes:
        code (str): Currency code (e.g., "GBP", "JPY").
        precision (int): Number of minor-unit digits (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of entry (FIAT, FUND).
    """

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(self, code: str, precision: int, name: str, currency_type: CurrencyType = CurrencyType.FIAT):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "GBP", "JPY").
            precision (int): Number of minor-unit digits (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of entry.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # bool is an int subclass, but never a valid digit count
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type
        self._factor = 10**precision

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the number of minor-unit digits."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def factor(self) -> int:
        """Get the number of minor units per major unit (10 ** $precision)."""
        return self._factor

    @property
    def factor_as_float(self) -> float:
        """Get $factor as a float."""
        return float(self._factor)

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        existing = cls._registry.get(currency.code)
        if existing is not None:
            if not overwrite:
                raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")
            if existing.precision != currency.precision:
                logger.info(f"Currency '{currency.code}' re-registered with $precision {currency.precision} (was {existing.precision})")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {sorted(cls._registry.keys())}")

        return cls._registry[code]

    @property
    def is_fiat(self) -> bool:
        """Check if currency is a circulating fiat currency."""
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_fund(self) -> bool:
        """Check if currency is a fund / unit of account (e.g. CLF, UYW)."""
        return self._currency_type == CurrencyType.FUND

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', {self.currency_type})"
