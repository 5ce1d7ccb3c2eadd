"""Shared fixtures for ethwidget tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from ethwidget.clients.mock import MockClient
from ethwidget.config import ApiClientType, WidgetConfig
from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample
from ethwidget.pipeline import RefreshPipeline

FIXED_NOW = datetime(2025, 12, 4, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def mock_client() -> MockClient:
    return MockClient()


@pytest.fixture
def pipeline(mock_client) -> RefreshPipeline:
    config = WidgetConfig(client=ApiClientType.MOCK, refresh_timeout_seconds=2.0)
    return RefreshPipeline(config, client=mock_client, clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_price() -> PriceSample:
    return PriceSample(price_usd=3128.66, observed_at=FIXED_NOW)


@pytest.fixture
def sample_gas() -> GasSample:
    return GasSample(base_fee_gwei=0.024, observed_at=FIXED_NOW)
