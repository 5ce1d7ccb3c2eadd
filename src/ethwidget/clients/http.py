"""HTTP client for the ETH price / gas API.

Endpoints::

    GET {base_url}/eth-price  -> {"priceUSD": 3128.66, "timestamp": 1733300000}
    GET {base_url}/gas-price  -> {"gasPrice": "...", "gasPriceGwei": 0.03,
                                  "baseFeePerGas": "...",
                                  "baseFeePerGasGwei": 0.024,
                                  "timestamp": 1733300000}
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any

import certifi
import requests

from ethwidget.clients.base import BasePriceGasClient
from ethwidget.config import DEFAULT_BASE_URL
from ethwidget.errors import DecodeError, NetworkError, ProtocolError, WidgetErrorCode
from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample

logger = logging.getLogger(__name__)

# Timestamps above this are taken to be unix milliseconds.
_MILLIS_CUTOFF = 10**11


class HttpPriceGasClient(BasePriceGasClient):
    """Fetch ETH price and base fee over plain HTTPS GET.

    No auth headers and no request body. Every request carries
    ``timeout`` seconds; a timeout surfaces as ``NetworkError`` with code
    ``TIMEOUT``.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = certifi.where()
        self.session.headers["Accept"] = "application/json"

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> HttpPriceGasClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    # ----------------------------------------------------------------- price

    def fetch_price(self) -> PriceSample:
        data = self._get_json("eth-price")
        return PriceSample(
            price_usd=self._number(data, "priceUSD"),
            observed_at=self._timestamp(data),
        )

    # ------------------------------------------------------------------- gas

    def fetch_gas(self) -> GasSample:
        data = self._get_json("gas-price")
        return GasSample(
            base_fee_gwei=self._number(data, "baseFeePerGasGwei"),
            observed_at=self._timestamp(data),
        )

    # -------------------------------------------------------------- internal

    def _get_json(self, path: str) -> dict[str, Any]:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.Timeout as exc:
            raise NetworkError(
                f"Timed out after {self.timeout}s fetching {url}",
                code=WidgetErrorCode.TIMEOUT,
            ) from exc
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {url} failed: {exc}") from exc

        self._check_response(resp, url)

        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(f"{url} returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"{url} returned {type(data).__name__}, expected an object")
        return data

    @staticmethod
    def _check_response(resp: Any, url: str) -> None:
        if not 200 <= resp.status_code < 300:
            raise ProtocolError(
                f"{url} answered HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

    @staticmethod
    def _number(data: dict[str, Any], key: str) -> float:
        if key not in data:
            raise DecodeError(f"Missing field '{key}'")
        raw = data[key]
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise DecodeError(f"Field '{key}' is not a number: {raw!r}")
        value = float(raw)
        if not math.isfinite(value):
            raise DecodeError(f"Field '{key}' is not finite: {raw!r}")
        return value

    @staticmethod
    def _timestamp(data: dict[str, Any]) -> datetime:
        raw = data.get("timestamp")
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise DecodeError(f"Field 'timestamp' is not a number: {raw!r}")
        seconds = raw / 1000 if raw > _MILLIS_CUTOFF else raw
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise DecodeError(f"Field 'timestamp' out of range: {raw!r}") from exc
