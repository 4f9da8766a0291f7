"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from devdb.application.models import SystemInfo
from devdb.application.use_cases.device_info_use_cases import (
    GetDeviceInfoUseCase,
    ResolveDeviceInfoUseCase,
)
from devdb.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from devdb.infrastructure.database import PostgresDatabase
from devdb.infrastructure.repositories.device_repository import DeviceRepository
from devdb.infrastructure.services.health_check_service import HealthCheckService
from devdb.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()
    # Infrastructure
    database = providers.Singleton(
        PostgresDatabase,
        url=config.database.url,
        pool_size=config.database.pool_size,
        max_overflow=config.database.max_overflow,
        pool_timeout=config.database.pool_timeout,
        echo=config.database.echo,
    )

    device_repository = providers.Singleton(
        DeviceRepository,
        database=database,
        schema=config.database.schema_name,
    )

    # Application (use cases)
    resolve_device_info_use_case = providers.Factory(
        ResolveDeviceInfoUseCase,
        device_repository=device_repository,
    )

    get_device_info_use_case = providers.Factory(
        GetDeviceInfoUseCase,
        resolver=resolve_device_info_use_case,
        max_concurrent_lookups=config.devdb.max_concurrent_lookups,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        database=database,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.server.title,
        description=config.server.description,
        version=config.server.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.server.git_commit,
        build_time=config.server.build_time,
        database_url=database.provided.url,
        database_schema=config.database.schema_name,
        max_concurrent_lookups=config.devdb.max_concurrent_lookups,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The database is pinged at startup so an unreachable store shows up in
    the logs early; the service still starts and answers 503 until the
    store comes back. The connection pool is disposed on shutdown.
    """
    container = get_container()

    database = container.database()

    try:
        logger.info("container.database.ensure_connection")
        try:
            await database.ping()
        except Exception as exc:
            logger.warning("container.database.unreachable", error=str(exc))

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.database.close")
        database.close()

        logger.info("container.resources.shutdown")
