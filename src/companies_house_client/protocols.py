"""Protocol definitions for dependency injection.

These protocols define the seams the client depends on, so the lookup logic can
be tested against fakes without any network access.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from .types import Address, TransportResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Synchronous HTTP transport bound to a base URL and credentials."""

    def get(self, path: str, path_params: Mapping[str, str]) -> TransportResponse:
        """Issue a GET for a path template.

        Args:
            path: Path template relative to the base URL, e.g. ``/company/{company_number}``.
            path_params: Values substituted into the template.

        Returns:
            The response for any HTTP status code.

        Raises:
            TransportError: When no response was received (DNS, connect, timeout, I/O).
        """
        ...


@runtime_checkable
class RegisteredAddressLookup(Protocol):
    """Looks up the registered office address for a company."""

    def lookup_registered_address(self, company_number: str | None) -> Address:
        """Return the registered office address or raise a CompaniesHouseApiError."""
        ...
