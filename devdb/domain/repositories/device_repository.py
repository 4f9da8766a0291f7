"""
Device Repository Interface

This module defines the read-only interface used to fetch device
metadata rows. Implementations run one query per call and expose the
result as an async iterator of typed rows.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from devdb.domain.entities.device import ControlRow, ScalingRow


class IDeviceRepository(ABC):
    """Interface for device metadata repository implementations."""

    @abstractmethod
    def scaling_rows(self, name: str) -> AsyncIterator[ScalingRow]:
        """
        Stream the reading/setting scaling rows for a device.

        Args:
            name: Device name bound as the only query parameter

        Returns:
            Async iterator over rows whose property index is 12 or 13

        Raises:
            DeviceQueryError: If the query or decoding of a row fails
            DataStoreUnavailableError: If the data store cannot be reached
        """
        pass

    @abstractmethod
    def control_rows(self, name: str) -> AsyncIterator[ControlRow]:
        """
        Stream the digital control definitions for a device.

        Rows are yielded in the order defined by the data store.

        Args:
            name: Device name bound as the only query parameter

        Returns:
            Async iterator over control rows

        Raises:
            DeviceQueryError: If the query or decoding of a row fails
            DataStoreUnavailableError: If the data store cannot be reached
        """
        pass
