"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devdb.shared import (
    DEFAULT_DB_SCHEMA,
    DEFAULT_HOST,
    DEFAULT_PORT,
    EnumEnvironment,
    EnumLogLevel,
)
from devdb.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Device database configuration settings."""

    url: str = Field(
        default="postgresql+psycopg://devdb@localhost:5432/devdb",
        description="SQLAlchemy URL of the device database",
    )
    schema_name: str = Field(
        default=DEFAULT_DB_SCHEMA,
        description="Schema holding the device tables",
        validation_alias=AliasChoices("DB_SCHEMA", "DB_SCHEMA_NAME"),
    )
    pool_size: int = Field(
        default=5, ge=1, description="Connections kept in the pool"
    )
    max_overflow: int = Field(
        default=0, ge=0, description="Connections allowed above pool_size"
    )
    pool_timeout: float = Field(
        default=30.0, gt=0, description="Seconds to wait for a pooled connection"
    )
    echo: bool = Field(default=False, description="Log SQL statements")

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class DevDBSettings(BaseSettings):
    """Device lookup configuration settings."""

    max_concurrent_lookups: int = Field(
        default=1,
        ge=1,
        description="Devices of one request resolved at the same time",
    )

    model_config = SettingsConfigDict(
        env_prefix="DEVDB_", case_sensitive=False, extra="ignore"
    )


class ServerSettings(BaseSettings):
    """HTTP server and service metadata settings."""

    title: str = Field(default="DevDB", description="Service title")
    description: str = Field(
        default="Read-only lookup service resolving device names "
        "to scaling, description and digital control metadata",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVER_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVER_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default=DEFAULT_HOST, description="Address to bind the server")
    port: int = Field(default=DEFAULT_PORT, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    devdb: DevDBSettings = Field(default_factory=DevDBSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
