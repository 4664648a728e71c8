"""
Error taxonomy.

Every error carries the operation that produced it and renders as
``<operation>: <message>`` so the CLI can print it verbatim.
"""

from __future__ import annotations

from typing import Optional


class BikeAlertError(Exception):
    """Base class for all failures surfaced to the command line."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message


class ConfigurationError(BikeAlertError):
    """A required setting is missing or cannot be parsed."""


class TransportError(BikeAlertError):
    """The request could not be built or the network call failed."""


class FetchTimeoutError(BikeAlertError):
    """A request or a per-resource deadline elapsed."""


class UpstreamError(BikeAlertError):
    """The vendor answered with a non-success status."""

    def __init__(self, operation: str, status_code: int, body: Optional[str]):
        super().__init__(operation, f"got status code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(BikeAlertError):
    """The response envelope could not be decoded."""
