"""Custom exceptions for the Companies House client.

Three families, kept apart because callers treat them differently:

- ``CompaniesHouseApiError`` and its subclasses are raised per lookup call.
- ``InvalidCompanyNumberError`` flags a caller bug, raised before any I/O.
- ``InvalidConfigurationError`` and its subclasses are raised at startup.
"""

from __future__ import annotations


class CompaniesHouseApiError(Exception):
    """Base exception for all Companies House API errors.

    Server errors, network failures and unclassified 4xx responses are raised
    as this class directly. The underlying cause is chained via ``raise ... from``.
    """

    __match_args__ = ("message",)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CompanyNotFoundError(CompaniesHouseApiError):
    """Raised when the company number does not exist in the registry (404)."""

    __match_args__ = ("company_number",)

    def __init__(self, company_number: str) -> None:
        self.company_number = company_number
        super().__init__(f"Company not found: {company_number}")


class RateLimitExceededError(CompaniesHouseApiError):
    """Raised when the API rate limit is exceeded (429 Too Many Requests).

    ``retry_after`` holds the ``Retry-After`` hint in seconds, or None when the
    header was absent or malformed. Retrying is left to the caller.
    """

    __match_args__ = ("retry_after",)

    def __init__(self, retry_after: int | None = None, message: str = "Rate limit exceeded") -> None:
        self.retry_after = retry_after
        if retry_after is not None:
            message = f"{message}. Retry after: {retry_after} seconds"
        super().__init__(message)


class CompaniesHouseAuthenticationError(CompaniesHouseApiError):
    """Raised when the API rejects the credentials (401 Unauthorized).

    This is fatal for the caller until the API key is fixed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Authentication failed: {message}")


class InvalidResponseError(CompaniesHouseApiError):
    """Raised when a successful response cannot be read as a company profile with an address."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to parse response: {message}")


class TransportError(Exception):
    """Raised by transports when no HTTP response was received."""


class InvalidCompanyNumberError(ValueError):
    """Raised when a lookup is attempted with a missing or blank company number."""

    def __init__(self) -> None:
        super().__init__("Company number must not be null or blank")


class InvalidConfigurationError(ValueError):
    """Raised when client configuration is missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid configuration: {message}")


class PlaceholderApiKeyError(InvalidConfigurationError):
    """Raised when the configured API key is still a template placeholder."""

    def __init__(self) -> None:
        super().__init__(
            "API key appears to be a placeholder. "
            "Please set COMPANIES_HOUSE_API_KEY in the environment or .env.\n"
            "Get a key at: https://developer.company-information.service.gov.uk/"
        )


class PositiveIntegerEnvVarError(InvalidConfigurationError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class ConfigFileNotFoundError(InvalidConfigurationError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"config file not found: {path}")


class ConfigFileParseError(InvalidConfigurationError):
    """Raised when a config file cannot be read or is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"could not parse config file {path}: {detail}")


class ConfigFileValidationError(InvalidConfigurationError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"config file {path} failed validation: {detail}")
