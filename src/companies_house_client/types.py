"""Typed value objects for Companies House company profiles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Address:
    """Registered office address of a company.

    Field names match the snake_case keys of ``registered_office_address``.
    ``address_line_1`` and ``postal_code`` are normally present; the rest are
    None when the API omits them.
    """

    address_line_1: str | None = None
    address_line_2: str | None = None
    locality: str | None = None
    postal_code: str | None = None
    country: str | None = None
    region: str | None = None
    premises: str | None = None
    care_of: str | None = None
    po_box: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)


@dataclass(frozen=True)
class CompanyProfile:
    """Subset of the Companies House company profile used by the client."""

    company_number: str
    company_name: str | None = None
    company_status: str | None = None
    type: str | None = None
    date_of_creation: str | None = None
    jurisdiction: str | None = None
    registered_office_address: Address | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response as seen by the client."""

    status_code: int
    headers: Mapping[str, str]
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
