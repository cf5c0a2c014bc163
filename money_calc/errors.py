"""Exceptions raised by the money_calc pipeline.

Every error is fatal for a run: nothing in the package catches and recovers
from them, the CLI reports the message and exits with a nonzero status.
Reading or writing files surfaces plain :class:`OSError` subclasses.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence


class MoneyCalcError(Exception):
    """Base class for pipeline failures."""


class MalformedRowError(MoneyCalcError, ValueError):
    """A raw input line could not be split or parsed into amounts."""

    def __init__(self, message: str, raw_line: str | None = None) -> None:
        super().__init__(message)
        self.raw_line = raw_line


class MultiValueRowError(MoneyCalcError, ValueError):
    """A parsed row has zero or several populated currency columns."""

    def __init__(self, description: str, amounts: Sequence[Decimal]) -> None:
        self.description = description
        self.amounts = tuple(amounts)
        rendered = ", ".join(str(amount) for amount in self.amounts)
        super().__init__(
            f"Row {description!r} must have exactly one nonzero amount, got ({rendered})"
        )


class RateUnavailableError(MoneyCalcError, RuntimeError):
    """The rate provider could not supply a conversion rate."""

    def __init__(self, message: str, pair: tuple[str, str] | None = None) -> None:
        super().__init__(message)
        self.pair = pair


__all__ = [
    "MoneyCalcError",
    "MalformedRowError",
    "MultiValueRowError",
    "RateUnavailableError",
]
