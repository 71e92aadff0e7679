"""Concrete infrastructure implementations."""

from .http import RequestsTransport, build_url

__all__ = ["RequestsTransport", "build_url"]
