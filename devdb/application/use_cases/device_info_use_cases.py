"""
Device Info Use Cases - Application Layer

This module defines the use cases behind the GetDeviceInfo operation.
A resolver turns one device name into an InfoEntry, isolating per-device
failures, and the batch use case resolves a whole request in order.
"""

import asyncio
from typing import List, Sequence

from devdb.domain.entities.device import DeviceInfo, InfoEntry, InfoReply
from devdb.domain.entities.errors import DeviceQueryError
from devdb.domain.repositories.device_repository import IDeviceRepository
from devdb.domain.services.device_info_folding import (
    collect_control_items,
    fold_scaling_rows,
)
from devdb.shared import get_logger

logger = get_logger(__name__)


class ResolveDeviceInfoUseCase:
    """Use case resolving the metadata of a single device."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        """
        Initialize the use case with its dependencies.

        Args:
            device_repository: Repository providing scaling and control rows
        """
        self.device_repository = device_repository

    async def execute(self, name: str) -> InfoEntry:
        """
        Resolve one device name.

        The scaling query runs first; if it fails, the entry carries the
        error and the control query is skipped. A failing control query
        only clears the control list.

        Args:
            name: Device name to resolve

        Returns:
            InfoEntry: Resolved metadata or a per-device error message

        Raises:
            DataStoreUnavailableError: If the data store cannot be reached
        """
        try:
            summary = await fold_scaling_rows(
                self.device_repository.scaling_rows(name)
            )
        except DeviceQueryError as exc:
            logger.warning(
                "device_info.scaling_rows.failed",
                device=name,
                error=exc.message,
                details=exc.details,
            )
            return InfoEntry.failed(name, exc.message)

        control = await collect_control_items(self.device_repository.control_rows(name))

        return InfoEntry.found(
            name,
            DeviceInfo(
                index=summary.index,
                description=summary.description,
                reading=summary.reading,
                setting=summary.setting,
                control=control,
            ),
        )


class GetDeviceInfoUseCase:
    """Use case resolving a batch of device names into a single reply."""

    def __init__(
        self,
        resolver: ResolveDeviceInfoUseCase,
        max_concurrent_lookups: int = 1,
    ) -> None:
        """
        Initialize the use case with its dependencies.

        Args:
            resolver: Per-device resolver
            max_concurrent_lookups: Devices resolved at the same time; 1
                resolves them one after another
        """
        if max_concurrent_lookups < 1:
            raise ValueError("max_concurrent_lookups must be at least 1")
        self.resolver = resolver
        self._max_concurrent_lookups = max_concurrent_lookups

    async def execute(self, names: Sequence[str]) -> InfoReply:
        """
        Resolve every requested device name.

        Args:
            names: Device names in request order; duplicates are resolved
                independently

        Returns:
            InfoReply: One entry per name, in request order

        Raises:
            DataStoreUnavailableError: If the data store cannot be reached;
                no partial reply is produced
        """
        logger.info(
            "device_info.batch_started",
            count=len(names),
            max_concurrent_lookups=self._max_concurrent_lookups,
        )

        if self._max_concurrent_lookups == 1 or len(names) <= 1:
            entries = [await self.resolver.execute(name) for name in names]
        else:
            entries = await self._resolve_concurrently(names)

        failed = sum(1 for entry in entries if entry.is_error)
        logger.info(
            "device_info.batch_resolved",
            count=len(entries),
            failed=failed,
        )

        return InfoReply(entries=tuple(entries))

    async def _resolve_concurrently(self, names: Sequence[str]) -> List[InfoEntry]:
        semaphore = asyncio.Semaphore(self._max_concurrent_lookups)

        async def _bounded(name: str) -> InfoEntry:
            async with semaphore:
                return await self.resolver.execute(name)

        tasks: List[asyncio.Task] = [
            asyncio.create_task(_bounded(name)) for name in names
        ]
        try:
            # gather keeps results in argument order regardless of completion
            return list(await asyncio.gather(*tasks))
        except BaseException:
            pending: List[asyncio.Task] = [
                task for task in tasks if not task.done()
            ]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            raise
