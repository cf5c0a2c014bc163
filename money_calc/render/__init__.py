"""Plain-text renderers for converted rows."""

from __future__ import annotations

from money_calc.render.amount_format import DEFAULT_AMOUNT_FORMAT, AmountFormat
from money_calc.render.csv_output import CSVOutputExporter, render_csv
from money_calc.render.table import render_table

__all__ = [
    "AmountFormat",
    "DEFAULT_AMOUNT_FORMAT",
    "CSVOutputExporter",
    "render_csv",
    "render_table",
]
