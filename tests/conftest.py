from __future__ import annotations

from decimal import Decimal

import pytest

from money_calc.ingestion.models import Currency
from money_calc.ingestion.rates import RateTable

BRL, EUR, USD = Currency.BRL, Currency.EUR, Currency.USD

SAMPLE_LINES = [
    "Description,BRL,EUR,USD",
    "Spotify,,,10",
    "Netflix,,15,",
    "YouTube,20,,",
]


@pytest.fixture
def sample_rates() -> RateTable:
    return RateTable.from_pairs(
        {
            (USD, BRL): Decimal(5),
            (USD, EUR): Decimal("0.9"),
            (EUR, BRL): Decimal(6),
            (BRL, EUR): Decimal(1) / Decimal(6),
            (BRL, USD): Decimal(1) / Decimal(5),
            (EUR, USD): Decimal(1) / Decimal("0.9"),
        }
    )


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)
