"""Tests for the public package facade."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from money_calc import (
    MalformedRowError,
    MoneyCalc,
    MoneyCalcConfig,
    MultiValueRowError,
    RateTable,
    RateUnavailableError,
    __version__,
)
from money_calc.ingestion.fixer import FixerRatesClient
from money_calc.ingestion.models import Currency
from money_calc.ingestion.rates import static_rate_table


def test_money_calc_class_exposes_version() -> None:
    assert MoneyCalc.__version__ == __version__


def test_calculate_renders_table_and_csv(sample_rates: RateTable, sample_lines: list[str]) -> None:
    calc = MoneyCalc(MoneyCalcConfig(), rate_table=sample_rates)

    result = calc.calculate(sample_lines)

    assert [row.description for row in result.rows] == ["Spotify", "Netflix", "YouTube", "Total"]
    assert result.csv[1] == '"Total","160.00","27.33","30.67"'
    assert result.csv[2] == '"Spotify","50.00","9.00","10.00"'
    assert result.table[-2].startswith("Total")
    assert result.csv_path is None


def test_invalid_rows_never_reach_output(sample_rates: RateTable) -> None:
    calc = MoneyCalc(MoneyCalcConfig(), rate_table=sample_rates)

    with pytest.raises(MultiValueRowError):
        calc.calculate(["header", "Spotify,,,10", "Broken,1,,2"])
    with pytest.raises(MalformedRowError):
        calc.calculate(["header", "Spotify,10"])


def test_run_writes_output_csv(tmp_path: Path, sample_lines: list[str]) -> None:
    input_path = tmp_path / "expenses.csv"
    input_path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    config = MoneyCalcConfig(input_path=input_path, output_dir=tmp_path / "out")

    result = MoneyCalc(config, rate_table=static_rate_table()).run()

    assert result.csv_path == tmp_path / "out" / "output.csv"
    written = result.csv_path.read_text(encoding="utf-8").splitlines()
    assert written == result.csv
    assert written[1].startswith('"Total"')


def test_run_with_bundled_sample(tmp_path: Path) -> None:
    config = MoneyCalcConfig(output_dir=tmp_path, use_static_rates=True)

    result = MoneyCalc(config).run()

    assert [row.description for row in result.rows][-2:] == ["Car", "Total"]
    apartment = next(row for row in result.rows if row.description == "Apartment")
    assert apartment.amount(Currency.BRL) == Decimal("123456.789")


def test_missing_input_file(tmp_path: Path) -> None:
    config = MoneyCalcConfig(input_path=tmp_path / "missing.csv", output_dir=tmp_path)

    with pytest.raises(FileNotFoundError):
        MoneyCalc(config, rate_table=static_rate_table()).run()
    assert not (tmp_path / "output.csv").exists()


def test_without_api_key_static_rates_are_used(caplog: pytest.LogCaptureFixture) -> None:
    calc = MoneyCalc(MoneyCalcConfig.from_env({}))

    with caplog.at_level("WARNING"):
        table = calc.rates()

    assert table == static_rate_table()
    assert "FIXER_API_KEY is not set" in caplog.text


def test_api_key_fetches_remote_rates(
    monkeypatch: pytest.MonkeyPatch, sample_rates: RateTable
) -> None:
    calls: list[str] = []

    def _fake_fetch(self: FixerRatesClient) -> RateTable:
        calls.append(self.api_key)
        return sample_rates

    monkeypatch.setattr(FixerRatesClient, "fetch_rate_table", _fake_fetch)
    calc = MoneyCalc(MoneyCalcConfig.from_env({"FIXER_API_KEY": "abc"}))

    assert calc.rates() is sample_rates
    assert calc.rates() is sample_rates
    assert calls == ["abc"]


def test_rate_outage_aborts_before_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def _outage(self: FixerRatesClient) -> RateTable:
        raise RateUnavailableError("Fixer is down")

    monkeypatch.setattr(FixerRatesClient, "fetch_rate_table", _outage)
    config = MoneyCalcConfig(api_key="abc", output_dir=tmp_path)

    with pytest.raises(RateUnavailableError):
        MoneyCalc(config).run()
    assert not (tmp_path / "output.csv").exists()


def test_very_large_amounts_render(sample_rates: RateTable) -> None:
    calc = MoneyCalc(MoneyCalcConfig(), rate_table=sample_rates)

    result = calc.calculate(["header", "Huge,1e30,,"])

    assert result.rows[-1].amount(Currency.BRL) == Decimal("1E+30")
    assert result.csv[1].startswith('"Total","1,000,000,000,000,000,000,000,000,000,000.00",')


def test_static_override_skips_remote_fetch(monkeypatch: pytest.MonkeyPatch) -> None:
    def _unexpected(self: FixerRatesClient) -> RateTable:
        raise AssertionError("remote rates should not be fetched")

    monkeypatch.setattr(FixerRatesClient, "fetch_rate_table", _unexpected)
    calc = MoneyCalc(MoneyCalcConfig(api_key="abc", use_static_rates=True))

    assert calc.rates() == static_rate_table()
