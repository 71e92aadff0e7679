"""Typed parsing and validation for client config files.

Example file:
    schema_version = 1

    [companies_house]
    base_url = "https://api.company-information.service.gov.uk"
    connect_timeout_ms = 5000
    read_timeout_ms = 10000

The API key is not accepted here; it is read from the environment.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ClientConfigFile:
    """Validated client config values loaded from a TOML file."""

    base_url: str | None = None
    connect_timeout_ms: int | None = None
    read_timeout_ms: int | None = None


class _CompaniesHouseSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str | None = None
    connect_timeout_ms: int | None = None
    read_timeout_ms: int | None = None

    @field_validator("base_url")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("connect_timeout_ms", "read_timeout_ms")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    companies_house: _CompaniesHouseSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_client_config_file(path: Path) -> ClientConfigFile:
    """Load and validate a client TOML config file."""
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    if not path.is_file():
        raise ConfigFileParseError(str(path), "not a regular file")

    try:
        raw_payload = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.companies_house
    return ClientConfigFile(
        base_url=section.base_url,
        connect_timeout_ms=section.connect_timeout_ms,
        read_timeout_ms=section.read_timeout_ms,
    )
