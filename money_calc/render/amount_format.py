"""Decimal formatting shared by the table and CSV renderers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext


@dataclass(frozen=True, slots=True)
class AmountFormat:
    """Fixed-point amount format, e.g. ``123456.789 -> "123,456.79"``.

    Rounding happens here and nowhere else; ``rounding`` takes any
    :mod:`decimal` rounding mode and defaults to half-up.
    """

    places: int = 2
    rounding: str = ROUND_HALF_UP
    grouping: bool = True

    def __post_init__(self) -> None:
        if self.places < 0:
            raise ValueError("places must not be negative")

    def format(self, amount: Decimal) -> str:
        amount = Decimal(amount)
        quantum = Decimal(1).scaleb(-self.places)
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the fraction.
            ctx.prec = max(ctx.prec, amount.adjusted() + self.places + 2)
            rounded = amount.quantize(quantum, rounding=self.rounding)
        separator = "," if self.grouping else ""
        return f"{rounded:{separator}.{self.places}f}"


DEFAULT_AMOUNT_FORMAT = AmountFormat()

__all__ = ["AmountFormat", "DEFAULT_AMOUNT_FORMAT"]
