from __future__ import annotations

from decimal import Decimal

import pytest

from money_calc.errors import RateUnavailableError
from money_calc.ingestion.models import CURRENCIES, Currency
from money_calc.ingestion.rates import STATIC_RATES, RateTable, static_rate_table
from money_calc.ingestion.strategy import RateProvider

BRL, EUR, USD = Currency.BRL, Currency.EUR, Currency.USD


def test_static_table_matches_fallback_rates() -> None:
    table = static_rate_table()

    assert table.rate(EUR, BRL) == Decimal(6)
    assert table.rate(USD, BRL) == Decimal(5)
    assert table.rate(USD, EUR) == Decimal("0.9")
    assert table.rate(EUR, USD) == Decimal("1.1")
    assert table.rate(BRL, USD) == Decimal("0.2")
    assert table.rate(BRL, EUR) == Decimal(1) / Decimal(6)
    assert len(STATIC_RATES) == len(CURRENCIES) * (len(CURRENCIES) - 1)


@pytest.mark.parametrize("currency", list(Currency))
def test_identity_rates_are_one(currency: Currency) -> None:
    assert static_rate_table().rate(currency, currency) == 1


def test_table_is_callable_and_satisfies_provider_protocol() -> None:
    table = static_rate_table()
    provider: RateProvider = table

    assert table(USD, BRL) == provider.rate(USD, BRL) == Decimal(5)


def test_missing_pair_raises_rate_unavailable() -> None:
    pairs = dict(STATIC_RATES)
    del pairs[(EUR, USD)]

    with pytest.raises(RateUnavailableError) as excinfo:
        RateTable.from_pairs(pairs)

    assert excinfo.value.pair == ("EUR", "USD")


def test_identity_pairs_must_equal_one() -> None:
    pairs = {**STATIC_RATES, (USD, USD): Decimal("1.01")}

    with pytest.raises(ValueError, match="Identity rate"):
        RateTable.from_pairs(pairs)


def test_explicit_identity_of_one_is_accepted() -> None:
    pairs = {**STATIC_RATES, (USD, USD): Decimal("1.000")}

    assert RateTable.from_pairs(pairs) == static_rate_table()


def test_matrix_shape_is_validated() -> None:
    with pytest.raises(ValueError):
        RateTable(((Decimal(1),),))


def test_as_dict_covers_every_pair() -> None:
    mapping = static_rate_table().as_dict()

    assert set(mapping) == {(source, target) for source in CURRENCIES for target in CURRENCIES}
    assert "USD->BRL=5" in repr(static_rate_table())
