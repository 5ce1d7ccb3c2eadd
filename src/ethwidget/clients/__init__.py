"""Price/gas API clients, keyed by ``ApiClientType``."""

from __future__ import annotations

from ethwidget.clients.base import BasePriceGasClient
from ethwidget.clients.http import HttpPriceGasClient
from ethwidget.clients.mock import MockClient
from ethwidget.config import ApiClientType

CLIENT_CLASSES: dict[ApiClientType, type[BasePriceGasClient]] = {
    ApiClientType.HTTP: HttpPriceGasClient,
    ApiClientType.MOCK: MockClient,
}


def create_client(client_type: ApiClientType, **kwargs) -> BasePriceGasClient:
    """Instantiate the client for ``client_type`` with constructor kwargs."""
    return CLIENT_CLASSES[client_type](**kwargs)


__all__ = [
    "BasePriceGasClient",
    "HttpPriceGasClient",
    "MockClient",
    "CLIENT_CLASSES",
    "create_client",
]
