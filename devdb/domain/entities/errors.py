"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.

Per-device failures derive from DeviceQueryError and are isolated to the
device being resolved. DataStoreUnavailableError is the only batch-fatal
failure and aborts the whole request.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceQueryError(DomainError):
    """Raised when a query for a single device cannot be completed."""

    def __init__(
        self,
        device_name: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.device_name = device_name
        super().__init__(message, details)


class RowDecodeError(DeviceQueryError):
    """Raised when a row returned by the data store cannot be typed."""

    def __init__(
        self,
        device_name: str,
        column: str,
        value: Any,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.column = column
        self.value = value
        message = (
            f"Unable to decode column '{column}' for device {device_name}: "
            f"unexpected value {value!r}"
        )
        super().__init__(device_name, message, details)


class DataStoreUnavailableError(DomainError):
    """Raised when the data store connection itself is unusable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
