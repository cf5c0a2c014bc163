"""Runtime configuration for a money_calc run."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from money_calc.data import DEFAULT_INPUT_PATH

API_KEY_ENV_VAR = "FIXER_API_KEY"


@dataclass(slots=True)
class MoneyCalcConfig:
    """Where to read input, where to write output and how to obtain rates."""

    api_key: str | None = None
    input_path: Path = DEFAULT_INPUT_PATH
    output_dir: Path | None = None
    use_static_rates: bool = False
    color: bool = True
    timeout: float = 30

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> "MoneyCalcConfig":
        """Build a config from environment variables plus explicit overrides.

        ``FIXER_API_KEY`` supplies the apilayer credentials; blank values are
        treated as unset. Overrides equal to ``None`` are ignored so CLI
        defaults do not mask the dataclass defaults.
        """

        env = os.environ if environ is None else environ
        api_key = (env.get(API_KEY_ENV_VAR) or "").strip() or None
        config = cls(api_key=api_key)
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "input_path" in changes:
            changes["input_path"] = Path(changes["input_path"])
        if "output_dir" in changes:
            changes["output_dir"] = Path(changes["output_dir"])
        return replace(config, **changes)

    @property
    def uses_remote_rates(self) -> bool:
        """Return True when rates should be fetched from Fixer."""

        return bool(self.api_key) and not self.use_static_rates


__all__ = ["MoneyCalcConfig", "API_KEY_ENV_VAR"]
