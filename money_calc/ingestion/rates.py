"""Rate tables: the fixed fallback rates and the lookup used by conversions."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from money_calc.errors import RateUnavailableError
from money_calc.ingestion.models import CURRENCIES, Currency, Rate
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

ONE = Decimal(1)

STATIC_RATES: Mapping[tuple[Currency, Currency], Rate] = {
    (Currency.EUR, Currency.BRL): Decimal(6),
    (Currency.USD, Currency.BRL): Decimal(5),
    (Currency.BRL, Currency.EUR): ONE / Decimal(6),
    (Currency.USD, Currency.EUR): Decimal("0.9"),
    (Currency.BRL, Currency.USD): ONE / Decimal(5),
    (Currency.EUR, Currency.USD): Decimal("1.1"),
}


class RateTable:
    """Immutable currency-by-currency rate matrix indexed by ordinal."""

    __slots__ = ("_matrix",)

    def __init__(self, matrix: tuple[tuple[Rate, ...], ...]) -> None:
        size = len(CURRENCIES)
        if len(matrix) != size or any(len(row) != size for row in matrix):
            raise ValueError(f"Rate matrix must be {size}x{size}")
        self._matrix = matrix

    @classmethod
    def from_pairs(cls, pairs: Mapping[tuple[Currency, Currency], Rate]) -> "RateTable":
        """Build a table from ``(from, to) -> rate`` entries.

        Identity pairs default to ``1``; any other pair missing from ``pairs``
        raises :class:`RateUnavailableError`.
        """

        rows: list[tuple[Rate, ...]] = []
        for source in CURRENCIES:
            row: list[Rate] = []
            for target in CURRENCIES:
                if source is target:
                    value = Decimal(pairs.get((source, target), ONE))
                    if value != ONE:
                        raise ValueError(f"Identity rate for {source} must be 1, got {value}")
                    row.append(ONE)
                    continue
                try:
                    row.append(Decimal(pairs[(source, target)]))
                except KeyError:
                    raise RateUnavailableError(
                        f"No rate available for {source} -> {target}",
                        pair=(source.value, target.value),
                    ) from None
            rows.append(tuple(row))
        return cls(tuple(rows))

    def rate(self, from_: Currency, to: Currency) -> Rate:
        return self._matrix[from_.ordinal][to.ordinal]

    __call__ = rate

    def as_dict(self) -> dict[tuple[Currency, Currency], Rate]:
        return {
            (source, target): self.rate(source, target)
            for source in CURRENCIES
            for target in CURRENCIES
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        return hash(self._matrix)

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{source}->{target}={value}" for (source, target), value in self.as_dict().items()
        )
        return f"RateTable({entries})"


def static_rate_table() -> RateTable:
    """Return the fallback table used when no remote rates are configured."""

    LOGGER.debug("Using static fallback rate table")
    return RateTable.from_pairs(STATIC_RATES)


__all__ = ["RateTable", "STATIC_RATES", "static_rate_table"]
