"""CLI for converting an expense list into BRL, EUR and USD totals."""

from __future__ import annotations

import argparse
from typing import Sequence

from money_calc import MoneyCalc, MoneyCalcConfig
from money_calc.errors import MoneyCalcError
from money_calc.render.console import ConsolePresenter
from money_calc.utils.logger import get_logger, set_verbosity

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="money-calc", description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input CSV (description,BRL,EUR,USD); defaults to the bundled sample",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory for output.csv (defaults to the working directory)",
    )
    parser.add_argument(
        "--static-rates",
        dest="use_static_rates",
        action="store_true",
        help="Use the built-in fallback rates even when FIXER_API_KEY is set",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=True,
        help="Print the table without ANSI colours",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every pipeline stage",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbosity(args.verbose)
    config = MoneyCalcConfig.from_env(
        input_path=args.input,
        output_dir=args.output_dir,
        use_static_rates=args.use_static_rates,
        color=args.color,
    )
    try:
        result = MoneyCalc(config).run()
    except (MoneyCalcError, OSError) as exc:
        LOGGER.error("money-calc failed: %s", exc)
        raise SystemExit(1) from exc
    ConsolePresenter(color=config.color).write(result.table)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
