"""Client for the UK Companies House registered office address lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import CompaniesHouseClient
from .config import CompaniesHouseConfig
from .exceptions import (
    CompaniesHouseApiError,
    CompaniesHouseAuthenticationError,
    CompanyNotFoundError,
    InvalidCompanyNumberError,
    InvalidConfigurationError,
    InvalidResponseError,
    RateLimitExceededError,
)
from .types import Address, CompanyProfile

_PACKAGE_NAME = "companies-house-client"


def _resolve_version() -> str:
    try:
        return version(_PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _resolve_version()

__all__ = [
    "Address",
    "CompaniesHouseApiError",
    "CompaniesHouseAuthenticationError",
    "CompaniesHouseClient",
    "CompaniesHouseConfig",
    "CompanyNotFoundError",
    "CompanyProfile",
    "InvalidCompanyNumberError",
    "InvalidConfigurationError",
    "InvalidResponseError",
    "RateLimitExceededError",
    "__version__",
]
