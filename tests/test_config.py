"""Tests for WidgetConfig validation and the env-driven factory."""

from __future__ import annotations

import os
from datetime import timedelta

import pytest

from ethwidget import config_from_env, create_pipeline_from_env
from ethwidget.clients.mock import MockClient
from ethwidget.config import DEFAULT_BASE_URL, ApiClientType, WidgetConfig

ENV_KEYS = [
    "ETHWIDGET_CLIENT",
    "ETHWIDGET_API_BASE_URL",
    "ETHWIDGET_REFRESH_MINUTES",
    "ETHWIDGET_REQUEST_TIMEOUT",
    "ETHWIDGET_REFRESH_TIMEOUT",
    "ETHWIDGET_PRICE_DECIMALS",
    "ETHWIDGET_GWEI_SUFFIX",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight to os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)


class TestWidgetConfig:
    def test_defaults(self):
        config = WidgetConfig()
        config.validate()
        assert config.client is ApiClientType.HTTP
        assert config.base_url == DEFAULT_BASE_URL
        assert config.refresh_interval == timedelta(minutes=5)
        assert config.price_decimals == 2
        assert config.include_unit_suffix is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"refresh_interval_minutes": 0},
            {"request_timeout_seconds": -1.0},
            {"refresh_timeout_seconds": 0.0},
            {"price_decimals": 1},
            {"base_url": ""},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            WidgetConfig(**kwargs).validate()


class TestConfigFromEnv:
    def test_defaults_without_env(self):
        config = config_from_env()
        assert config == WidgetConfig()

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("ETHWIDGET_CLIENT", "MOCK")
        monkeypatch.setenv("ETHWIDGET_API_BASE_URL", "https://api.example.test/api")
        monkeypatch.setenv("ETHWIDGET_REFRESH_MINUTES", "10")
        monkeypatch.setenv("ETHWIDGET_REQUEST_TIMEOUT", "4.5")
        monkeypatch.setenv("ETHWIDGET_REFRESH_TIMEOUT", "8")
        monkeypatch.setenv("ETHWIDGET_PRICE_DECIMALS", "0")
        monkeypatch.setenv("ETHWIDGET_GWEI_SUFFIX", "yes")
        config = config_from_env()
        assert config.client is ApiClientType.MOCK
        assert config.base_url == "https://api.example.test/api"
        assert config.refresh_interval == timedelta(minutes=10)
        assert config.request_timeout_seconds == 4.5
        assert config.refresh_timeout_seconds == 8.0
        assert config.price_decimals == 0
        assert config.include_unit_suffix is True

    def test_unknown_client_raises(self, monkeypatch):
        monkeypatch.setenv("ETHWIDGET_CLIENT", "carrier-pigeon")
        with pytest.raises(ValueError):
            config_from_env()


class TestCreatePipelineFromEnv:
    def test_mock_pipeline(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ETHWIDGET_CLIENT", "mock")
        pipeline = create_pipeline_from_env(str(tmp_path / "missing.env"))
        assert isinstance(pipeline.client, MockClient)
        outcome, _ = pipeline.refresh()
        assert outcome.snapshot.price_text == "$3,128.66"

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "ETHWIDGET_CLIENT=mock\nETHWIDGET_PRICE_DECIMALS=0\n",
            encoding="utf-8",
        )
        pipeline = create_pipeline_from_env(str(env_file))
        assert isinstance(pipeline.client, MockClient)
        assert pipeline.config.price_decimals == 0
