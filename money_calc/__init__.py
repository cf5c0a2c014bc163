"""Public interface for the money_calc package."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Sequence

from money_calc.config import MoneyCalcConfig
from money_calc.conversion import aggregate
from money_calc.errors import (
    MalformedRowError,
    MoneyCalcError,
    MultiValueRowError,
    RateUnavailableError,
)
from money_calc.ingestion.fixer import FixerRatesClient
from money_calc.ingestion.input_csv import InputCSVParser
from money_calc.ingestion.models import Currency, InputRow, OutputRow
from money_calc.ingestion.rates import RateTable, static_rate_table
from money_calc.render.amount_format import DEFAULT_AMOUNT_FORMAT, AmountFormat
from money_calc.render.csv_output import CSVOutputExporter, render_csv
from money_calc.render.table import render_table
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "__version__",
    "AmountFormat",
    "CalculationResult",
    "Currency",
    "InputRow",
    "MalformedRowError",
    "MoneyCalc",
    "MoneyCalcConfig",
    "MoneyCalcError",
    "MultiValueRowError",
    "OutputRow",
    "RateTable",
    "RateUnavailableError",
]

try:
    __version__ = importlib_metadata.version("money-calc")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


@dataclass(slots=True)
class CalculationResult:
    """Everything produced by one pipeline run."""

    rows: list[OutputRow]
    table: list[str]
    csv: list[str]
    csv_path: Path | None = field(default=None)


class MoneyCalc:
    """Package facade wiring rates, parsing, conversion and rendering together."""

    __slots__ = ("config", "amount_format", "_rate_table")

    __version__ = __version__

    def __init__(
        self,
        config: MoneyCalcConfig | None = None,
        *,
        rate_table: RateTable | None = None,
        amount_format: AmountFormat = DEFAULT_AMOUNT_FORMAT,
    ) -> None:
        """Configure a calculator.

        Without a ``config`` the environment is consulted for
        ``FIXER_API_KEY``. Supplying ``rate_table`` skips rate fetching
        entirely, which is how callers plug in their own provider.
        """

        self.config = config or MoneyCalcConfig.from_env()
        self.amount_format = amount_format
        self._rate_table = rate_table

    def rates(self) -> RateTable:
        """Return the rate table for this run, fetching it on first use."""

        if self._rate_table is None:
            self._rate_table = self._load_rate_table()
        return self._rate_table

    def _load_rate_table(self) -> RateTable:
        if self.config.uses_remote_rates and self.config.api_key:
            client = FixerRatesClient(self.config.api_key, timeout=self.config.timeout)
            return client.fetch_rate_table()
        if not self.config.use_static_rates:
            LOGGER.warning("FIXER_API_KEY is not set; using the static fallback rates")
        return static_rate_table()

    def calculate(self, raw_lines: Sequence[str]) -> CalculationResult:
        """Parse, convert and render ``raw_lines`` without touching the disk."""

        return self._build(InputCSVParser().parse_lines(raw_lines))

    def _build(self, parsed: Sequence[InputRow]) -> CalculationResult:
        for row in parsed:
            LOGGER.debug("Parsed %s", row)
        rows = aggregate(self.rates(), parsed)
        for row in rows:
            LOGGER.debug("Converted %s", row)
        return CalculationResult(
            rows=rows,
            table=render_table(rows, self.amount_format),
            csv=render_csv(rows, self.amount_format),
        )

    def run(self) -> CalculationResult:
        """Run the whole pipeline and write ``output.csv``.

        Rates are resolved before the input is read so a rate outage aborts
        the run before any output exists.
        """

        self.rates()
        LOGGER.info("Calculating totals for %s", self.config.input_path)
        result = self._build(InputCSVParser().parse(self.config.input_path))
        result.csv_path = CSVOutputExporter().write(result.csv, output_dir=self.config.output_dir)
        return result
