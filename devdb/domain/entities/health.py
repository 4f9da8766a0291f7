"""
Health domain entities.

Availability of the device database as observed by the service, and the
runtime snapshot reported on /info.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @property
    def is_serving(self) -> bool:
        """Whether lookups can be answered in this state."""
        return self is not ServiceStatus.DOWN

    @classmethod
    def aggregate(cls, statuses: Iterable["ServiceStatus"]) -> "ServiceStatus":
        """
        Combine dependency statuses into one.

        DOWN beats DEGRADED, which beats UNKNOWN. With nothing to combine,
        or only UP statuses, the result is UP.
        """
        seen = set(statuses)
        for status in (cls.DOWN, cls.DEGRADED, cls.UNKNOWN):
            if status in seen:
                return status
        return cls.UP


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=_utcnow)
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    """Aggregated health for the service."""

    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(
        cls, dependencies: Iterable[DependencyStatus]
    ) -> "SystemHealth":
        probed = list(dependencies)
        return cls(
            status=ServiceStatus.aggregate(dep.status for dep in probed),
            dependencies=probed,
        )


@dataclass(frozen=True, slots=True)
class LookupSettings:
    """Effective lookup configuration; the URL never carries a password."""

    database_url: str
    schema: str
    max_concurrent_lookups: int


@dataclass(slots=True)
class ApplicationInfo:
    """Runtime snapshot surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: SystemHealth
    lookups: LookupSettings
