"""Companies House registered address client.

Usage example:
    from companies_house_client.client import CompaniesHouseClient
    from companies_house_client.infrastructure.http import RequestsTransport

    transport = RequestsTransport(
        base_url="https://api.company-information.service.gov.uk",
        api_key="your-key",
        connect_timeout_ms=5000,
        read_timeout_ms=10000,
    )
    client = CompaniesHouseClient(transport=transport)
    address = client.lookup_registered_address("09370669")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing_extensions import override

from .exceptions import (
    CompaniesHouseApiError,
    CompaniesHouseAuthenticationError,
    CompanyNotFoundError,
    InvalidCompanyNumberError,
    InvalidResponseError,
    RateLimitExceededError,
    TransportError,
)
from .observability import get_logger
from .protocols import HttpTransport, RegisteredAddressLookup
from .types import Address, TransportResponse
from .validation import IncomingDataError, parse_company_profile

logger = get_logger("companies_house_client.client")

COMPANY_PROFILE_PATH = "/company/{company_number}"


def parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    """Parse a Retry-After header into whole seconds.

    Only plain ASCII digits are accepted. Absent or malformed values yield
    None; a malformed header never turns the rate-limit error it annotates
    into a different failure.
    """
    if not headers:
        return None
    value = headers.get("Retry-After")
    if value is None:
        return None
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        logger.warning("Failed to parse Retry-After header: %r", value)
        return None
    return int(text)


class CompaniesHouseClient(RegisteredAddressLookup):
    """Looks up registered office addresses via the company profile endpoint.

    Uses the full profile endpoint; the registered-office-address endpoint
    does not return ``care_of`` or ``po_box``.

    Error mapping:
    - 404 raises CompanyNotFoundError
    - 429 raises RateLimitExceededError with the Retry-After hint, if any
    - 401 raises CompaniesHouseAuthenticationError
    - other 4xx, 5xx and transport failures raise CompaniesHouseApiError
    - unreadable bodies or a missing address raise InvalidResponseError

    Nothing is retried. The client holds no mutable state, so it is safe to
    share across threads when the transport is.
    """

    def __init__(self, *, transport: HttpTransport) -> None:
        self.transport = transport

    @override
    def lookup_registered_address(self, company_number: str | None) -> Address:
        """Return the registered office address for a company.

        Raises:
            InvalidCompanyNumberError: If company_number is None or blank.
            CompanyNotFoundError: If the company does not exist (HTTP 404).
            RateLimitExceededError: If the API rate limit was hit (HTTP 429).
            CompaniesHouseAuthenticationError: If the API key was rejected (HTTP 401).
            InvalidResponseError: If the profile is unreadable or has no address.
            CompaniesHouseApiError: For server errors, other 4xx and network failures.
        """
        if company_number is None or not company_number.strip():
            raise InvalidCompanyNumberError()

        logger.debug("Fetching registered address for company: %s", company_number)

        try:
            response = self.transport.get(
                COMPANY_PROFILE_PATH, {"company_number": company_number}
            )
        except TransportError as exc:
            raise CompaniesHouseApiError(
                f"Failed to connect to Companies House API: {exc}"
            ) from exc

        if not response.is_success:
            raise _error_for_status(response, company_number)

        return _extract_address(response, company_number)


def _error_for_status(response: TransportResponse, company_number: str) -> CompaniesHouseApiError:
    """Map a non-2xx response onto the API error family."""
    status = response.status_code

    if status == 404:
        return CompanyNotFoundError(company_number)

    if status == 429:
        return RateLimitExceededError(parse_retry_after(response.headers))

    if status == 401:
        return CompaniesHouseAuthenticationError("check API key configuration")

    if 400 <= status < 500:
        logger.warning("Unexpected client error (HTTP %s) for company: %s", status, company_number)
        return CompaniesHouseApiError(f"Client error: HTTP {status}")

    if status >= 500:
        return CompaniesHouseApiError(f"Companies House API server error (HTTP {status})")

    return CompaniesHouseApiError(f"Unexpected HTTP {status}")


def _extract_address(response: TransportResponse, company_number: str) -> Address:
    try:
        profile = parse_company_profile(response.body)
    except IncomingDataError as exc:
        raise InvalidResponseError(
            f"Failed to parse API response for company: {company_number}"
        ) from exc

    if profile is None:
        raise InvalidResponseError(f"API returned null response for company: {company_number}")

    address = profile.registered_office_address
    if address is None:
        raise InvalidResponseError(f"No registered address found for company: {company_number}")

    logger.debug("Successfully retrieved address for company: %s", company_number)
    return address
