"""Tests for the registered address lookup and its error mapping."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

import companies_house_client.client as client_module
from companies_house_client.client import CompaniesHouseClient, parse_retry_after
from companies_house_client.exceptions import (
    CompaniesHouseApiError,
    CompaniesHouseAuthenticationError,
    CompanyNotFoundError,
    InvalidCompanyNumberError,
    InvalidResponseError,
    RateLimitExceededError,
    TransportError,
)
from companies_house_client.protocols import RegisteredAddressLookup
from companies_house_client.types import Address
from tests.fakes import FakeTransport


def _client(transport: FakeTransport) -> CompaniesHouseClient:
    return CompaniesHouseClient(transport=transport)


class TestSuccessfulLookup:
    """Tests for the 200 path."""

    def test_returns_address_matching_json(self, sample_profile_payload: dict[str, object]) -> None:
        transport = FakeTransport.returning_json(sample_profile_payload)

        address = _client(transport).lookup_registered_address("09370669")

        assert address == Address(
            address_line_1="123 High Street",
            address_line_2="Floor 2",
            locality="London",
            postal_code="SW1A 1AA",
            country="United Kingdom",
            region="Greater London",
            premises="Building A",
            care_of=None,
            po_box=None,
        )

    def test_requests_company_profile_endpoint(
        self, sample_profile_payload: dict[str, object]
    ) -> None:
        transport = FakeTransport.returning_json(sample_profile_payload)

        _client(transport).lookup_registered_address("09370669")

        assert transport.calls == [("/company/{company_number}", {"company_number": "09370669"})]

    def test_passes_company_number_through_unchanged(
        self, sample_profile_payload: dict[str, object]
    ) -> None:
        transport = FakeTransport.returning_json(sample_profile_payload)

        _client(transport).lookup_registered_address("  09370669 ")

        assert transport.calls[0][1] == {"company_number": "  09370669 "}

    def test_maps_care_of_and_po_box(self, care_of_profile_payload: dict[str, object]) -> None:
        transport = FakeTransport.returning_json(care_of_profile_payload)

        address = _client(transport).lookup_registered_address("12345678")

        assert address.care_of == "John Smith"
        assert address.po_box == "PO Box 123"
        assert address.premises == "Unit 5"
        assert address.address_line_1 == "Industrial Estate"
        assert address.postal_code == "M1 1AA"
        assert address.address_line_2 is None
        assert address.country is None

    def test_repeated_lookups_are_value_equal(
        self, sample_profile_payload: dict[str, object]
    ) -> None:
        transport = FakeTransport.returning_json(sample_profile_payload)
        client = _client(transport)

        first = client.lookup_registered_address("09370669")
        second = client.lookup_registered_address("09370669")

        assert first == second
        assert len(transport.calls) == 2

    def test_numeric_company_number_still_returns_address(
        self, sample_profile_payload: dict[str, object]
    ) -> None:
        payload = {**sample_profile_payload, "company_number": 9370669}
        transport = FakeTransport.returning_json(payload)

        address = _client(transport).lookup_registered_address("09370669")

        assert address.postal_code == "SW1A 1AA"

    def test_client_satisfies_lookup_protocol(self) -> None:
        assert isinstance(_client(FakeTransport()), RegisteredAddressLookup)


class TestInvalidCompanyNumber:
    """Invalid input never reaches the transport."""

    @pytest.mark.parametrize("company_number", [None, "", "   ", "\t\n"])
    def test_rejects_missing_or_blank(self, company_number: str | None) -> None:
        transport = FakeTransport()

        with pytest.raises(InvalidCompanyNumberError) as exc_info:
            _client(transport).lookup_registered_address(company_number)

        assert transport.calls == []
        assert "Company number" in str(exc_info.value)
        assert not isinstance(exc_info.value, CompaniesHouseApiError)


class TestStatusMapping:
    """Tests for the HTTP status decision table."""

    def test_404_raises_company_not_found(self) -> None:
        transport = FakeTransport(status_code=404, body='{"errors": []}')

        with pytest.raises(CompanyNotFoundError) as exc_info:
            _client(transport).lookup_registered_address("99999999")

        assert exc_info.value.company_number == "99999999"
        assert "99999999" in str(exc_info.value)

    @pytest.mark.parametrize("company_number", ["09370669", " 0937 ", "sc123456"])
    def test_404_echoes_company_number_as_given(self, company_number: str) -> None:
        transport = FakeTransport(status_code=404)

        with pytest.raises(CompanyNotFoundError) as exc_info:
            _client(transport).lookup_registered_address(company_number)

        assert exc_info.value.company_number == company_number

    def test_429_with_numeric_retry_after(self) -> None:
        transport = FakeTransport(status_code=429, headers={"Retry-After": "60"})

        with pytest.raises(RateLimitExceededError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert exc_info.value.retry_after == 60
        assert "rate limit" in str(exc_info.value).lower()

    def test_429_with_malformed_retry_after(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_logger = MagicMock()
        monkeypatch.setattr(client_module, "logger", fake_logger)
        transport = FakeTransport(status_code=429, headers={"Retry-After": "not-a-number"})

        with pytest.raises(RateLimitExceededError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert exc_info.value.retry_after is None
        fake_logger.warning.assert_called_once()

    def test_429_without_retry_after(self) -> None:
        transport = FakeTransport(status_code=429)

        with pytest.raises(RateLimitExceededError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert exc_info.value.retry_after is None

    def test_401_raises_authentication_error(self) -> None:
        transport = FakeTransport(status_code=401)

        with pytest.raises(CompaniesHouseAuthenticationError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert "authentication" in str(exc_info.value).lower()

    @pytest.mark.parametrize("status_code", [500, 502, 503, 504])
    def test_5xx_raises_api_error_with_status(self, status_code: int) -> None:
        transport = FakeTransport(status_code=status_code)

        with pytest.raises(CompaniesHouseApiError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert type(exc_info.value) is CompaniesHouseApiError
        assert str(status_code) in str(exc_info.value)
        assert "server error" in str(exc_info.value).lower()

    @pytest.mark.parametrize("status_code", [400, 403, 405, 418])
    def test_other_4xx_raises_client_error(self, status_code: int) -> None:
        transport = FakeTransport(status_code=status_code)

        with pytest.raises(CompaniesHouseApiError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert type(exc_info.value) is CompaniesHouseApiError
        assert str(exc_info.value) == f"Client error: HTTP {status_code}"

    def test_transport_failure_raises_api_error_with_cause(self) -> None:
        cause = TransportError("Connection refused")
        transport = FakeTransport(error=cause)

        with pytest.raises(CompaniesHouseApiError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert type(exc_info.value) is CompaniesHouseApiError
        assert "Failed to connect" in str(exc_info.value)
        assert "Connection refused" in str(exc_info.value)
        assert exc_info.value.__cause__ is cause


class TestInvalidResponses:
    """Tests for 200 responses that cannot yield an address."""

    def test_non_json_body(self) -> None:
        transport = FakeTransport(status_code=200, body="<html>oops</html>")

        with pytest.raises(InvalidResponseError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert "parse" in str(exc_info.value).lower()
        assert "09370669" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_json_array_body(self) -> None:
        transport = FakeTransport.returning_json([1, 2, 3])

        with pytest.raises(InvalidResponseError):
            _client(transport).lookup_registered_address("09370669")

    def test_wrong_field_type(self) -> None:
        transport = FakeTransport.returning_json(
            {"company_number": "09370669", "registered_office_address": "not an object"}
        )

        with pytest.raises(InvalidResponseError):
            _client(transport).lookup_registered_address("09370669")

    def test_null_body(self) -> None:
        transport = FakeTransport(status_code=200, body="null")

        with pytest.raises(InvalidResponseError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert "null response" in str(exc_info.value)
        assert "09370669" in str(exc_info.value)

    def test_missing_registered_office_address(self) -> None:
        transport = FakeTransport.returning_json(
            {"company_number": "09370669", "company_name": "Test Company"}
        )

        with pytest.raises(InvalidResponseError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert "No registered address" in str(exc_info.value)
        assert "09370669" in str(exc_info.value)

    def test_null_registered_office_address(self) -> None:
        transport = FakeTransport.returning_json(
            {"company_number": "09370669", "registered_office_address": None}
        )

        with pytest.raises(InvalidResponseError) as exc_info:
            _client(transport).lookup_registered_address("09370669")

        assert "09370669" in str(exc_info.value)


class TestParseRetryAfter:
    """Tests for Retry-After parsing."""

    def test_numeric_seconds(self) -> None:
        assert parse_retry_after({"Retry-After": "12"}) == 12

    def test_surrounding_whitespace(self) -> None:
        assert parse_retry_after({"Retry-After": " 30 "}) == 30

    def test_missing_header(self) -> None:
        assert parse_retry_after({}) is None
        assert parse_retry_after(None) is None

    def test_http_date_is_not_supported(self) -> None:
        assert parse_retry_after({"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}) is None

    def test_negative_value(self) -> None:
        assert parse_retry_after({"Retry-After": "-5"}) is None

    @pytest.mark.parametrize("value", ["6_0", "+60", "٦٠", "1.5", ""])
    def test_non_digit_values_are_rejected(self, value: str) -> None:
        assert parse_retry_after({"Retry-After": value}) is None
