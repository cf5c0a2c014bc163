"""Location of the bundled sample input."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = ["DEFAULT_INPUT_PATH"]

# Resolved relative to this file so the sample is found regardless of the
# working directory, including from an installed site-packages copy.
DEFAULT_INPUT_PATH: Final[Path] = Path(__file__).resolve().with_name("input.csv")
