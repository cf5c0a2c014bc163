"""Parser for the comma separated expense list fed into the calculator."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Sequence

from money_calc.errors import MalformedRowError, MultiValueRowError
from money_calc.ingestion.models import CURRENCIES, ZERO, Amount, InputRow
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

DELIMITER = ","
FIELD_COUNT = 1 + len(CURRENCIES)


class InputCSVParser:
    """Turn ``description,BRL,EUR,USD`` lines into :class:`InputRow` objects.

    The first line is a header and is discarded without inspection. Every
    other line must carry exactly one populated currency column.
    """

    def __init__(self, *, delimiter: str = DELIMITER) -> None:
        self.delimiter = delimiter

    def parse(self, csv_path: str | Path) -> list[InputRow]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(path)
        LOGGER.debug("Reading input rows from %s", path)
        return self.parse_lines(path.read_text(encoding="utf-8").splitlines())

    def parse_lines(self, raw_lines: Sequence[str]) -> list[InputRow]:
        if not raw_lines:
            raise MalformedRowError("Input does not contain a header row")
        rows = [self.parse_row(line) for line in raw_lines[1:] if line.strip()]
        LOGGER.debug("Parsed %s input rows", len(rows))
        return rows

    def parse_row(self, raw_line: str) -> InputRow:
        fields = [field.strip() for field in raw_line.split(self.delimiter)]
        if len(fields) != FIELD_COUNT:
            raise MalformedRowError(
                f"Expected {FIELD_COUNT} fields but found {len(fields)} in line {raw_line!r}",
                raw_line=raw_line,
            )
        description, *raw_amounts = fields
        amounts = tuple(_parse_amount(value, raw_line) for value in raw_amounts)
        _ensure_single_amount(description, amounts)
        return InputRow(description=description, amounts=amounts)


def _parse_amount(value: str, raw_line: str) -> Amount:
    if not value:
        return ZERO
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise MalformedRowError(
            f"Invalid amount {value!r} in line {raw_line!r}", raw_line=raw_line
        ) from None
    if not amount.is_finite():
        raise MalformedRowError(f"Invalid amount {value!r} in line {raw_line!r}", raw_line=raw_line)
    return amount


def _ensure_single_amount(description: str, amounts: Iterable[Amount]) -> None:
    amounts = tuple(amounts)
    if sum(1 for amount in amounts if amount != ZERO) != 1:
        raise MultiValueRowError(description, amounts)


def parsed_input(raw_lines: Sequence[str]) -> list[InputRow]:
    """Parse raw input lines with the default delimiter."""

    return InputCSVParser().parse_lines(raw_lines)


__all__ = ["InputCSVParser", "parsed_input", "DELIMITER", "FIELD_COUNT"]
