"""HTTP transport package."""

from .client import BINARY, JSON, HTTPClient

__all__ = ["HTTPClient", "JSON", "BINARY"]
