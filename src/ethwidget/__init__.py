"""ethwidget — data pipeline behind an ETH price & gas widget.

Fetches the ETH/USD price and the network base fee concurrently, formats
them for display, buckets the fee into a 1..5 intensity level, and hands
back one immutable snapshot plus a next-refresh hint.

Quick start::

    from ethwidget import create_pipeline_from_env
    pipeline = create_pipeline_from_env()
    outcome, next_refresh_at = pipeline.refresh()
    print(outcome.snapshot.price_text, outcome.snapshot.gas_text)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from ethwidget.clients import BasePriceGasClient, create_client
from ethwidget.config import DEFAULT_BASE_URL, ApiClientType, WidgetConfig
from ethwidget.errors import (
    DecodeError,
    NetworkError,
    ProtocolError,
    WidgetDataError,
    WidgetErrorCode,
)
from ethwidget.formatting import NO_DATA, format_gas, format_price, gas_level
from ethwidget.models.gas import GasSample
from ethwidget.models.outcome import Degraded, RefreshOutcome, Success
from ethwidget.models.price import PriceSample
from ethwidget.models.snapshot import DisplaySnapshot
from ethwidget.models.timeline import Timeline
from ethwidget.pipeline import RefreshPipeline

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "RefreshPipeline",
    "create_pipeline_from_env",
    "config_from_env",
    # Clients
    "BasePriceGasClient",
    "create_client",
    # Config
    "WidgetConfig",
    "ApiClientType",
    "DEFAULT_BASE_URL",
    # Errors
    "WidgetDataError",
    "WidgetErrorCode",
    "NetworkError",
    "ProtocolError",
    "DecodeError",
    # Formatting
    "NO_DATA",
    "format_price",
    "format_gas",
    "gas_level",
    # Models
    "PriceSample",
    "GasSample",
    "DisplaySnapshot",
    "Success",
    "Degraded",
    "RefreshOutcome",
    "Timeline",
]

_TRUTHY = {"1", "true", "yes", "on"}


def config_from_env() -> WidgetConfig:
    """Build a WidgetConfig from ``ETHWIDGET_*`` environment variables.

    Environment variables:
        ETHWIDGET_CLIENT: API client — "http" or "mock" (default: "http").
        ETHWIDGET_API_BASE_URL: Price/gas API root URL.
        ETHWIDGET_REFRESH_MINUTES: Next-refresh hint in minutes (default: 5).
        ETHWIDGET_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 10).
        ETHWIDGET_REFRESH_TIMEOUT: Whole-cycle deadline in seconds (default: 15).
        ETHWIDGET_PRICE_DECIMALS: Price fractional digits, 0 or 2 (default: 2).
        ETHWIDGET_GWEI_SUFFIX: Append " gwei" to gas text (default: off).
    """
    return WidgetConfig(
        client=ApiClientType(os.getenv("ETHWIDGET_CLIENT", "http").strip().lower()),
        base_url=os.getenv("ETHWIDGET_API_BASE_URL", DEFAULT_BASE_URL),
        refresh_interval_minutes=int(os.getenv("ETHWIDGET_REFRESH_MINUTES", "5")),
        request_timeout_seconds=float(os.getenv("ETHWIDGET_REQUEST_TIMEOUT", "10")),
        refresh_timeout_seconds=float(os.getenv("ETHWIDGET_REFRESH_TIMEOUT", "15")),
        price_decimals=int(os.getenv("ETHWIDGET_PRICE_DECIMALS", "2")),
        include_unit_suffix=os.getenv("ETHWIDGET_GWEI_SUFFIX", "").strip().lower() in _TRUTHY,
    )


def create_pipeline_from_env(env_file: str | None = None) -> RefreshPipeline:
    """Zero-config factory — reads settings from env vars (and ``.env``).

    Variables already set in the process environment win over the file.
    See ``config_from_env`` for the recognised variables.
    """
    load_dotenv(env_file)
    return RefreshPipeline(config_from_env())
