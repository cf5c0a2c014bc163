"""Data models shared across the ingestion, conversion and rendering modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

Amount = Decimal
Rate = Decimal

ZERO = Decimal(0)
TOTAL_DESCRIPTION = "Total"


class Currency(str, Enum):
    """Supported currencies, in column order."""

    BRL = "BRL"
    EUR = "EUR"
    USD = "USD"

    @classmethod
    def parse(cls, code: str) -> "Currency":
        """Normalise a currency code such as ``"usd"`` into a member."""

        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported currency: {code}") from None

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.value


CURRENCIES: tuple[Currency, ...] = tuple(Currency)


@dataclass(frozen=True, slots=True)
class InputRow:
    """A parsed input line: a description plus one amount per currency."""

    description: str
    amounts: tuple[Amount, ...]

    def amount(self, currency: Currency) -> Amount:
        return self.amounts[currency.ordinal]


@dataclass(frozen=True, slots=True)
class OutputRow:
    """A converted row holding the description's value in every currency."""

    description: str
    amounts: tuple[Amount, ...]

    def amount(self, currency: Currency) -> Amount:
        return self.amounts[currency.ordinal]


__all__ = [
    "Amount",
    "Rate",
    "ZERO",
    "TOTAL_DESCRIPTION",
    "Currency",
    "CURRENCIES",
    "InputRow",
    "OutputRow",
]
