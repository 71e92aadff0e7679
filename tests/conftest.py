"""Pytest fixtures for testing.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket

import pytest

from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> None:
    """Block all network access in tests.

    Tests that need HTTP should use FakeTransport or a MagicMock session.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)


@pytest.fixture
def sample_profile_payload() -> dict[str, object]:
    """Sample Companies House company profile response."""
    return {
        "company_number": "09370669",
        "company_name": "ANTHROPIC UK LTD",
        "company_status": "active",
        "type": "ltd",
        "date_of_creation": "2014-12-18",
        "jurisdiction": "england-wales",
        "sic_codes": ["62020"],
        "registered_office_address": {
            "address_line_1": "123 High Street",
            "address_line_2": "Floor 2",
            "locality": "London",
            "postal_code": "SW1A 1AA",
            "country": "United Kingdom",
            "premises": "Building A",
            "region": "Greater London",
        },
    }


@pytest.fixture
def care_of_profile_payload() -> dict[str, object]:
    """Profile whose registered office is care of another party with a PO box."""
    return {
        "company_number": "12345678",
        "company_name": "CARE OF EXAMPLE LTD",
        "company_status": "active",
        "registered_office_address": {
            "care_of": "John Smith",
            "po_box": "PO Box 123",
            "premises": "Unit 5",
            "address_line_1": "Industrial Estate",
            "locality": "Manchester",
            "postal_code": "M1 1AA",
        },
    }

