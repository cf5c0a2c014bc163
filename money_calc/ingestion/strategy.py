"""Abstractions for pluggable rate providers."""

from __future__ import annotations

from typing import Protocol

from money_calc.ingestion.models import Currency, Rate


class RateProvider(Protocol):
    """Contract for looking up conversion rates.

    Implementations must be total over :class:`Currency` pairs and return
    ``1`` for identity pairs, so that ``amount_in_to = amount_in_from * rate``.
    """

    def rate(self, from_: Currency, to: Currency) -> Rate:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateProvider"]
