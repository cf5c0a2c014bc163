"""CSV rendering of converted rows and the ``output.csv`` exporter."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Sequence

from money_calc.ingestion.models import CURRENCIES, OutputRow
from money_calc.render.amount_format import DEFAULT_AMOUNT_FORMAT, AmountFormat
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

CSV_HEADER = ("Description", *(currency.value for currency in CURRENCIES))
OUTPUT_FILENAME = "output.csv"


def _csv_line(fields: Iterable[str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="")
    writer.writerow(fields)
    return buffer.getvalue()


def render_csv(rows: Sequence[OutputRow], fmt: AmountFormat = DEFAULT_AMOUNT_FORMAT) -> list[str]:
    """Render aggregated rows as quoted CSV lines.

    The Total row (last in ``rows``) is emitted straight after the header,
    ahead of the ordinary rows. Downstream consumers of ``output.csv`` rely on
    that order.
    """

    if not rows:
        raise ValueError("rows must contain at least the Total row")

    *body, total = rows
    lines = [_csv_line(CSV_HEADER)]
    for row in (total, *body):
        lines.append(_csv_line([row.description, *(fmt.format(amount) for amount in row.amounts)]))
    return lines


class CSVOutputExporter:
    """Write rendered CSV lines to ``output.csv``."""

    def __init__(self, *, filename: str = OUTPUT_FILENAME) -> None:
        self.filename = filename

    def write(self, lines: Sequence[str], *, output_dir: Path | None = None) -> Path:
        if not lines:
            raise ValueError("lines collection is empty")

        directory = Path(output_dir) if output_dir else Path.cwd()
        directory.mkdir(parents=True, exist_ok=True)
        csv_path = directory / self.filename
        with csv_path.open("w", newline="", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")
        LOGGER.info("Saved CSV → %s", csv_path)
        return csv_path


__all__ = ["render_csv", "CSVOutputExporter", "CSV_HEADER", "OUTPUT_FILENAME"]
