"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from time import perf_counter
from typing import Optional

from devdb.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from devdb.domain.ports.health_check import IDatabaseProbe, IHealthCheckService
from devdb.shared import get_logger

logger = get_logger(__name__)

DATABASE_DEPENDENCY = "database"


class HealthCheckService(IHealthCheckService):
    """Probe the device database and report its availability."""

    def __init__(
        self,
        database: Optional[IDatabaseProbe],
        *,
        slow_query_ms: float = 1000.0,
    ) -> None:
        """
        Args:
            database: Database to probe; None reports UNKNOWN
            slow_query_ms: Ping latency above which the database is DEGRADED
        """
        self._database = database
        self._slow_query_ms = slow_query_ms

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies([await self._check_database()])

    async def _check_database(self) -> DependencyStatus:
        if self._database is None:
            return DependencyStatus(
                name=DATABASE_DEPENDENCY,
                status=ServiceStatus.UNKNOWN,
                message="Database client not configured.",
            )

        start = perf_counter()
        try:
            await self._database.ping()
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning(
                "health.database.ping_failed",
                error=str(exc),
                latency_ms=round(latency_ms, 2),
            )
            return DependencyStatus(
                name=DATABASE_DEPENDENCY,
                status=ServiceStatus.DOWN,
                message=f"Database ping failed: {exc}",
                latency_ms=latency_ms,
            )

        latency_ms = (perf_counter() - start) * 1000
        slow = latency_ms > self._slow_query_ms
        if slow:
            logger.warning(
                "health.database.slow_ping",
                latency_ms=round(latency_ms, 2),
                threshold_ms=self._slow_query_ms,
            )
        return DependencyStatus(
            name=DATABASE_DEPENDENCY,
            status=ServiceStatus.DEGRADED if slow else ServiceStatus.UP,
            message="Database ping successful",
            latency_ms=latency_ms,
            details={"url": self._database.url},
        )
