"""Exports for test fakes."""

from .http import FakeTransport

__all__ = ["FakeTransport"]
