"""Tests for the MockClient and the client registry."""

import time

import pytest

from ethwidget.clients import CLIENT_CLASSES, create_client
from ethwidget.clients.base import BasePriceGasClient
from ethwidget.clients.http import HttpPriceGasClient
from ethwidget.clients.mock import MockClient
from ethwidget.config import ApiClientType
from ethwidget.errors import NetworkError
from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample


class TestMockClient:
    def test_defaults(self, mock_client):
        assert isinstance(mock_client.fetch_price(), PriceSample)
        assert isinstance(mock_client.fetch_gas(), GasSample)
        assert mock_client.fetch_price().price_usd == 3128.66
        assert mock_client.fetch_gas().base_fee_gwei == 0.024

    def test_preset_values(self, mock_client):
        mock_client.set_price(2500.0)
        mock_client.set_gas(45.2)
        assert mock_client.fetch_price().price_usd == 2500.0
        assert mock_client.fetch_gas().base_fee_gwei == 45.2

    def test_failure(self, mock_client):
        mock_client.fail_gas(NetworkError("down"))
        with pytest.raises(NetworkError):
            mock_client.fetch_gas()
        mock_client.set_gas(1.0)
        assert mock_client.fetch_gas().base_fee_gwei == 1.0

    def test_delay(self, mock_client):
        mock_client.set_delay(price=0.1)
        start = time.monotonic()
        mock_client.fetch_price()
        assert time.monotonic() - start >= 0.1

    def test_counts_calls(self, mock_client):
        mock_client.fetch_price()
        mock_client.fetch_gas()
        mock_client.fetch_gas()
        assert mock_client.price_calls == 1
        assert mock_client.gas_calls == 2


class TestCreateClient:
    def test_every_client_type_registered(self):
        assert set(CLIENT_CLASSES) == set(ApiClientType)
        assert all(issubclass(cls, BasePriceGasClient) for cls in CLIENT_CLASSES.values())

    def test_mock(self):
        client = create_client(ApiClientType.MOCK)
        assert isinstance(client, MockClient)
        assert isinstance(client, BasePriceGasClient)

    def test_http_forwards_kwargs(self):
        client = create_client(
            ApiClientType.HTTP, base_url="https://api.example.test/api", timeout=4.0,
        )
        assert isinstance(client, HttpPriceGasClient)
        assert client.base_url == "https://api.example.test/api"
        assert client.timeout == 4.0
        client.close()
