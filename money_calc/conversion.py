"""Currency conversion and column aggregation."""

from __future__ import annotations

from typing import Callable, Sequence

from money_calc.ingestion.models import (
    CURRENCIES,
    TOTAL_DESCRIPTION,
    ZERO,
    Amount,
    Currency,
    InputRow,
    OutputRow,
    Rate,
)
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

RateLookup = Callable[[Currency, Currency], Rate]


def converted(from_: Currency, to: Currency, amount: Amount, rate_of: RateLookup) -> Amount:
    """Convert ``amount`` expressed in ``from_`` into ``to``."""

    return amount * rate_of(from_, to)


def transformed(rows: Sequence[InputRow], rate_of: RateLookup) -> list[OutputRow]:
    """Convert every input row into all currencies, preserving row order.

    Each target column sums the conversions from every source column, so the
    result stays correct even for rows carrying several populated amounts.
    """

    return [
        OutputRow(
            description=row.description,
            amounts=tuple(
                sum(
                    (converted(source, target, row.amount(source), rate_of) for source in CURRENCIES),
                    ZERO,
                )
                for target in CURRENCIES
            ),
        )
        for row in rows
    ]


def total_row(rows: Sequence[OutputRow]) -> OutputRow:
    totals = [ZERO] * len(CURRENCIES)
    for row in rows:
        for index, amount in enumerate(row.amounts):
            totals[index] += amount
    return OutputRow(description=TOTAL_DESCRIPTION, amounts=tuple(totals))


def aggregate(rate_of: RateLookup, rows: Sequence[InputRow]) -> list[OutputRow]:
    """Return converted rows in input order followed by a single Total row.

    Exceptions raised by ``rate_of`` propagate untouched; no partial result is
    returned.
    """

    body = transformed(rows, rate_of)
    total = total_row(body)
    LOGGER.debug("Aggregated %s rows, totals %s", len(body), total.amounts)
    return [*body, total]


__all__ = ["RateLookup", "converted", "transformed", "total_row", "aggregate"]
