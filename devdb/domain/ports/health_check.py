"""Ports used by the health endpoints."""

from __future__ import annotations

from typing import Protocol

from devdb.domain.entities.health import SystemHealth


class IDatabaseProbe(Protocol):
    """Minimal view of the device database needed to probe it."""

    @property
    def url(self) -> str:
        """Connection URL with the password masked."""
        ...

    async def ping(self) -> None:
        """Round trip to the database; raises when it is unreachable."""
        ...


class IHealthCheckService(Protocol):
    """Probes the dependencies lookups rely on."""

    async def evaluate(self) -> SystemHealth:
        ...
