"""CLI entry point for the expense calculator."""

from __future__ import annotations

from money_calc.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
