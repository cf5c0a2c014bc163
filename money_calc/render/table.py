"""Fixed-width box table rendering."""

from __future__ import annotations

from typing import Sequence

from money_calc.ingestion.models import CURRENCIES, OutputRow
from money_calc.render.amount_format import DEFAULT_AMOUNT_FORMAT, AmountFormat
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

CELL_WIDTH = 15
COLUMN_SEPARATOR = " │ "
HORIZONTAL = "─"
TOP_JUNCTION = "┬"
MIDDLE_JUNCTION = "┼"
BOTTOM_JUNCTION = "┴"
HEADER_DESCRIPTION = "Description"


def _row_line(cells: Sequence[str], width: int) -> str:
    return COLUMN_SEPARATOR.join(cell.ljust(width) for cell in cells)


def _junction_offsets(width: int) -> list[int]:
    # The vertical glyph sits in the middle of each separator.
    step = width + len(COLUMN_SEPARATOR)
    return [width + 1 + index * step for index in range(len(CURRENCIES))]


def render_table(
    rows: Sequence[OutputRow],
    fmt: AmountFormat = DEFAULT_AMOUNT_FORMAT,
    *,
    width: int = CELL_WIDTH,
) -> list[str]:
    """Render aggregated rows as box-drawn table lines.

    ``rows`` must end with the Total row, which is fenced off by separator
    lines. Output order: top border, header, separator, ordinary rows,
    separator, total, bottom border.
    """

    if not rows:
        raise ValueError("rows must contain at least the Total row")

    header = _row_line([HEADER_DESCRIPTION, *(currency.value for currency in CURRENCIES)], width)
    body = [
        _row_line([row.description, *(fmt.format(amount) for amount in row.amounts)], width)
        for row in rows
    ]

    line = list(HORIZONTAL * len(header))
    offsets = _junction_offsets(width)

    def border(glyph: str) -> str:
        for offset in offsets:
            line[offset] = glyph
        return "".join(line)

    top, middle, bottom = border(TOP_JUNCTION), border(MIDDLE_JUNCTION), border(BOTTOM_JUNCTION)
    LOGGER.debug("Rendered table with %s body rows", len(body) - 1)
    return [top, header, middle, *body[:-1], middle, body[-1], bottom]


__all__ = ["render_table", "CELL_WIDTH"]
