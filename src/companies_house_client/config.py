"""Centralised, injectable configuration for the Companies House client."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import ClientConfigFile
from .exceptions import (
    InvalidConfigurationError,
    PlaceholderApiKeyError,
    PositiveIntegerEnvVarError,
)

DEFAULT_BASE_URL = "https://api.company-information.service.gov.uk"
DEFAULT_CONNECT_TIMEOUT_MS = 5000
DEFAULT_READ_TIMEOUT_MS = 10000

_PLACEHOLDER_MARKERS = ("REPLACE", "YOUR_API_KEY")


@dataclass(frozen=True)
class CompaniesHouseConfig:
    """Immutable, validated configuration for the client.

    Load from environment with `CompaniesHouseConfig.from_env()` or construct
    directly for testing. Construction fails with InvalidConfigurationError, so
    a config instance that exists is always usable.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.base_url.strip():
            raise InvalidConfigurationError("Base URL must not be blank")
        if not self.api_key.strip():
            raise InvalidConfigurationError("API key must not be blank")
        if any(marker in self.api_key for marker in _PLACEHOLDER_MARKERS):
            raise PlaceholderApiKeyError()
        if self.connect_timeout_ms < 1:
            raise InvalidConfigurationError("Connect timeout must be positive")
        if self.read_timeout_ms < 1:
            raise InvalidConfigurationError("Read timeout must be positive")

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            CompaniesHouseConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            api_key=os.getenv("COMPANIES_HOUSE_API_KEY", "").strip(),
            base_url=os.getenv("COMPANIES_HOUSE_BASE_URL", DEFAULT_BASE_URL).strip()
            or DEFAULT_BASE_URL,
            connect_timeout_ms=_parse_positive_int(
                os.getenv("COMPANIES_HOUSE_CONNECT_TIMEOUT_MS", ""),
                env_name="COMPANIES_HOUSE_CONNECT_TIMEOUT_MS",
                default=DEFAULT_CONNECT_TIMEOUT_MS,
            ),
            read_timeout_ms=_parse_positive_int(
                os.getenv("COMPANIES_HOUSE_READ_TIMEOUT_MS", ""),
                env_name="COMPANIES_HOUSE_READ_TIMEOUT_MS",
                default=DEFAULT_READ_TIMEOUT_MS,
            ),
        )

    def with_file_overrides(self, file_config: ClientConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            base_url=self.base_url if file_config.base_url is None else file_config.base_url,
            connect_timeout_ms=self.connect_timeout_ms
            if file_config.connect_timeout_ms is None
            else file_config.connect_timeout_ms,
            read_timeout_ms=self.read_timeout_ms
            if file_config.read_timeout_ms is None
            else file_config.read_timeout_ms,
        )


def _parse_positive_int(value: str, *, env_name: str, default: int) -> int:
    """Parse a positive integer from an environment variable, or return the default."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed
