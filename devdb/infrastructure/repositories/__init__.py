"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of querying the device database.
"""

from .device_repository import DeviceRepository

__all__ = ["DeviceRepository"]
