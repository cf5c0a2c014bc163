"""Terminal presentation of rendered lines."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

GREEN = "\x1b[32m"
RESET = "\x1b[0m"


class ConsolePresenter:
    """Write plain rendered lines to a stream, optionally coloured green."""

    def __init__(self, stream: TextIO | None = None, *, color: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.color = color

    def write(self, lines: Sequence[str]) -> None:
        text = "\n".join(lines)
        if self.color:
            text = f"{GREEN}{text}{RESET}"
        self.stream.write(f"{text}\n")
        self.stream.flush()


__all__ = ["ConsolePresenter", "GREEN", "RESET"]
