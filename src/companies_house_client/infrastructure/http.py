"""Requests-backed HTTP transport for the Companies House API.

Usage example:
    from companies_house_client.infrastructure.http import RequestsTransport

    transport = RequestsTransport(
        base_url="https://api.company-information.service.gov.uk",
        api_key="your-key",
        connect_timeout_ms=5000,
        read_timeout_ms=10000,
    )
    response = transport.get("/company/{company_number}", {"company_number": "09370669"})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing_extensions import override
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from ..exceptions import TransportError
from ..observability import get_logger
from ..protocols import HttpTransport
from ..types import TransportResponse

logger = get_logger("companies_house_client.infrastructure.http")


def build_url(base_url: str, path: str, path_params: Mapping[str, str]) -> str:
    """Join base URL and path template, URL-quoting each substituted value."""
    quoted = {key: quote(value, safe="") for key, value in path_params.items()}
    return base_url.rstrip("/") + "/" + path.format(**quoted).lstrip("/")


class RequestsTransport(HttpTransport):
    """HTTP transport over a shared requests.Session.

    Companies House uses HTTP Basic auth with the API key as username and an
    empty password. The session is created once and reused across calls.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        connect_timeout_ms: int,
        read_timeout_ms: int,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = (connect_timeout_ms / 1000, read_timeout_ms / 1000)
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(api_key, "")
        self.session.headers.update({"Accept": "application/json"})

    @override
    def get(self, path: str, path_params: Mapping[str, str]) -> TransportResponse:
        url = build_url(self.base_url, path, path_params)
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc
        return TransportResponse(status_code=r.status_code, headers=r.headers, body=r.text)
