"""Pydantic-based validation of inbound Companies House payloads."""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import TypedDict

from pydantic import ConfigDict, TypeAdapter, ValidationError, with_config

from .types import Address, CompanyProfile


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


_SCALAR_INPUT_CONFIG = ConfigDict(coerce_numbers_to_str=True)


@with_config(_SCALAR_INPUT_CONFIG)
class RegisteredOfficeAddressInput(TypedDict, total=False):
    address_line_1: str | None
    address_line_2: str | None
    locality: str | None
    postal_code: str | None
    country: str | None
    region: str | None
    premises: str | None
    care_of: str | None
    po_box: str | None


@with_config(_SCALAR_INPUT_CONFIG)
class CompanyProfileInput(TypedDict, total=False):
    company_number: str | None
    company_name: str | None
    company_status: str | None
    type: str | None
    date_of_creation: str | None
    jurisdiction: str | None
    registered_office_address: RegisteredOfficeAddressInput | None


_NullableProfileInput = CompanyProfileInput | None

SchemaT = TypeVar("SchemaT")


def validate_as(schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as(schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def parse_address(payload: RegisteredOfficeAddressInput) -> Address:
    return Address(
        address_line_1=payload.get("address_line_1"),
        address_line_2=payload.get("address_line_2"),
        locality=payload.get("locality"),
        postal_code=payload.get("postal_code"),
        country=payload.get("country"),
        region=payload.get("region"),
        premises=payload.get("premises"),
        care_of=payload.get("care_of"),
        po_box=payload.get("po_box"),
    )


def parse_company_profile(payload: str | bytes) -> CompanyProfile | None:
    """Parse a company profile response body.

    Returns None when the body is the JSON literal ``null``.

    Raises:
        IncomingDataError: If the body is not JSON, not an object, or a known
            field has the wrong type.
    """
    profile = validate_json_as(_NullableProfileInput, payload)
    if profile is None:
        return None
    address_input = profile.get("registered_office_address")
    return CompanyProfile(
        company_number=profile.get("company_number") or "",
        company_name=profile.get("company_name"),
        company_status=profile.get("company_status"),
        type=profile.get("type"),
        date_of_creation=profile.get("date_of_creation"),
        jurisdiction=profile.get("jurisdiction"),
        registered_office_address=None if address_input is None else parse_address(address_input),
    )
