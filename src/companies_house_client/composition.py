"""Composition root for wiring the client from configuration."""

from __future__ import annotations

from .cli import create_app
from .client import CompaniesHouseClient
from .config import CompaniesHouseConfig
from .infrastructure import RequestsTransport
from .protocols import HttpTransport


def build_transport(config: CompaniesHouseConfig) -> HttpTransport:
    return RequestsTransport(
        base_url=config.base_url,
        api_key=config.api_key,
        connect_timeout_ms=config.connect_timeout_ms,
        read_timeout_ms=config.read_timeout_ms,
    )


def build_client(config: CompaniesHouseConfig) -> CompaniesHouseClient:
    """Build a client backed by a requests transport.

    Args:
        config: Validated client configuration.
    """
    return CompaniesHouseClient(transport=build_transport(config))


app = create_app(build_client)
