"""requests-based client for the Fixer latest-rates endpoint on apilayer."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

import requests

from money_calc.errors import RateUnavailableError
from money_calc.ingestion.models import CURRENCIES, Currency, Rate
from money_calc.ingestion.rates import RateTable
from money_calc.utils.logger import get_logger

LOGGER = get_logger(__name__)

FIXER_LATEST_URL = "https://api.apilayer.com/fixer/latest"


@dataclass(frozen=True, slots=True)
class FixerResponse:
    """Rates quoted against a single base currency."""

    timestamp: int
    base: Currency
    rates: dict[Currency, Rate]


def parse_fixer_response(payload: str) -> FixerResponse:
    """Parse a Fixer JSON body, keeping rates as exact decimals.

    Numbers are decoded straight from the JSON text via ``parse_float`` so no
    value ever passes through a binary float.
    """

    try:
        data = json.loads(payload, parse_float=Decimal, parse_int=Decimal)
    except json.JSONDecodeError as exc:
        raise RateUnavailableError(f"Fixer returned invalid JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise RateUnavailableError(f"Unexpected Fixer payload: {type(data).__name__}")

    if not data.get("success", False):
        error = data.get("error")
        if isinstance(error, Mapping):
            detail = error.get("info") or error.get("type") or "unknown error"
        else:
            detail = error or "unknown error"
        raise RateUnavailableError(f"Fixer request failed: {detail}")

    try:
        base = Currency.parse(str(data["base"]))
        raw_rates: Mapping[str, Any] = data["rates"]
        timestamp = int(data.get("timestamp", 0))
    except (KeyError, ValueError, TypeError) as exc:
        raise RateUnavailableError(f"Unexpected Fixer payload: {exc}") from exc
    if not isinstance(raw_rates, Mapping):
        raise RateUnavailableError(f"Unexpected Fixer rates for base {base}: {raw_rates!r}")

    rates: dict[Currency, Rate] = {}
    for currency in CURRENCIES:
        value = raw_rates.get(currency.value)
        if value is None:
            raise RateUnavailableError(
                f"Fixer response for base {base} is missing {currency}",
                pair=(base.value, currency.value),
            )
        try:
            rate = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            rate = None
        if rate is None or not rate.is_finite():
            raise RateUnavailableError(
                f"Fixer returned an invalid {base} -> {currency} rate: {value!r}",
                pair=(base.value, currency.value),
            )
        rates[currency] = rate
    return FixerResponse(timestamp=timestamp, base=base, rates=rates)


class FixerRatesClient:
    """Fetch one response per base currency and fold them into a :class:`RateTable`."""

    def __init__(
        self,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
        url: str = FIXER_LATEST_URL,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        self.api_key = api_key
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.url = url
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", "money-calc/1.0")

    def fetch_latest(self, base: Currency) -> FixerResponse:
        """Return the latest rates quoted against ``base``."""

        params = {
            "base": base.value,
            "symbols": ",".join(currency.value for currency in CURRENCIES),
        }
        attempt = 0
        while True:
            attempt += 1
            try:
                response = self.session.get(
                    self.url,
                    headers={"apikey": self.api_key},
                    params=params,
                    timeout=self.timeout,
                )
                self._raise_with_context(response)
                break
            except requests.RequestException as exc:
                LOGGER.warning(
                    "Attempt %s/%s to fetch %s rates failed: %s",
                    attempt,
                    self.max_attempts,
                    base,
                    exc,
                )
                if attempt >= self.max_attempts or _is_client_error(exc):
                    raise RateUnavailableError(
                        f"Unable to fetch {base} rates from Fixer: {exc}"
                    ) from exc
                time.sleep(self.backoff_seconds * attempt)

        parsed = parse_fixer_response(response.text)
        if parsed.base is not base:
            raise RateUnavailableError(f"Requested base {base} but Fixer answered with {parsed.base}")
        LOGGER.info("Fetched %s rates from %s", base, self.url)
        return parsed

    def fetch_rate_table(self) -> RateTable:
        """Query every base currency and build the complete rate table."""

        pairs: dict[tuple[Currency, Currency], Rate] = {}
        for base in CURRENCIES:
            parsed = self.fetch_latest(base)
            for target, value in parsed.rates.items():
                pairs[(parsed.base, target)] = value
        return RateTable.from_pairs(pairs)

    @staticmethod
    def _raise_with_context(response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            hint = " Check the FIXER_API_KEY credentials." if status in {401, 403} else ""
            raise requests.HTTPError(
                f"Fixer responded with HTTP {status} for {response.url}.{hint}",
                response=response,
            ) from exc


def _is_client_error(exc: requests.RequestException) -> bool:
    # 4xx answers (bad key, quota) will not improve on retry.
    response = getattr(exc, "response", None)
    return response is not None and 400 <= response.status_code < 500


__all__ = ["FixerRatesClient", "FixerResponse", "parse_fixer_response", "FIXER_LATEST_URL"]
