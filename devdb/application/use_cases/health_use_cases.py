"""Use cases behind the /health and /info endpoints."""

from datetime import datetime, timezone
from typing import Optional

from devdb.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from devdb.application.models import SystemInfo
from devdb.domain.entities.health import ApplicationInfo, LookupSettings
from devdb.domain.ports.health_check import IHealthCheckService
from devdb.shared import get_logger

logger = get_logger(__name__)


class GetHealthStatusUseCase:
    """Probe the device database and report the aggregated status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        if not system_health.status.is_serving:
            logger.warning(
                "health.status.not_serving",
                down=[
                    dep.name
                    for dep in system_health.dependencies
                    if not dep.status.is_serving
                ],
            )
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """Build the runtime snapshot: build metadata, uptime, health and config."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        """
        Args:
            started_at: When the application started; None means now
        """
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            health=system_health,
            lookups=LookupSettings(
                database_url=self._info.database_url,
                schema=self._info.database_schema,
                max_concurrent_lookups=self._info.max_concurrent_lookups,
            ),
        )
        return ApplicationInfoDTO.from_domain(info)
