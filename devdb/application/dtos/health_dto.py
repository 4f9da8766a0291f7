"""
Health DTOs - Application Layer

Response models for the /health and /info endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from devdb.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    LookupSettings,
    ServiceStatus,
    SystemHealth,
)

_DATABASE_EXAMPLE = {
    "name": "database",
    "status": "up",
    "message": "Database ping successful",
    "checked_at": "2024-09-09T12:00:00Z",
    "latency_ms": 3.2,
    "details": {"url": "postgresql+psycopg://devdb:***@db:5432/devdb"},
}


class DependencyStatusDTO(BaseModel):
    """Probe result for one dependency."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(default=None, description="Probe outcome")
    checked_at: datetime = Field(description="When the probe ran")
    latency_ms: Optional[float] = Field(
        default=None, description="Probe round trip in milliseconds"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Probe specific details"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )

    model_config = {"json_schema_extra": {"example": _DATABASE_EXAMPLE}}


class SystemHealthDTO(BaseModel):
    """DTO for the /health response."""

    status: ServiceStatus = Field(description="Aggregated service status")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Per dependency probe results"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {"status": "up", "dependencies": [_DATABASE_EXAMPLE]}
        }
    }


class LookupSettingsDTO(BaseModel):
    """Effective lookup configuration."""

    database_url: str = Field(description="Device database URL, password masked")
    schema_name: str = Field(description="Schema holding the device tables")
    max_concurrent_lookups: int = Field(
        description="Devices of one request resolved at the same time"
    )

    @classmethod
    def from_domain(cls, lookups: LookupSettings) -> "LookupSettingsDTO":
        return cls(
            database_url=lookups.database_url,
            schema_name=lookups.schema,
            max_concurrent_lookups=lookups.max_concurrent_lookups,
        )


class ApplicationInfoDTO(BaseModel):
    """DTO for the /info response."""

    name: str = Field(description="Service name")
    description: str = Field(description="Service description")
    version: str = Field(description="Service version")
    environment: str = Field(description="Deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Process start timestamp")
    uptime_seconds: float = Field(description="Seconds since start")
    status: ServiceStatus = Field(description="Aggregated service status")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Dependency probe snapshot"
    )
    lookups: LookupSettingsDTO = Field(description="Lookup configuration")

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        health = SystemHealthDTO.from_domain(info.health)
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=health.status,
            dependencies=health.dependencies,
            lookups=LookupSettingsDTO.from_domain(info.lookups),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "DevDB",
                "description": "Device metadata lookup service",
                "version": "1.0.0",
                "environment": "production",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "dependencies": [_DATABASE_EXAMPLE],
                "lookups": {
                    "database_url": "postgresql+psycopg://devdb:***@db:5432/devdb",
                    "schema_name": "accdb",
                    "max_concurrent_lookups": 1,
                },
            }
        }
    }
