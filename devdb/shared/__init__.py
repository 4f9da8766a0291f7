"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, log levels)
- Configuring structured logging and per-request log context
- Resolving Docker-style secret files into environment variables

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    DEFAULT_DB_SCHEMA,
    DEFAULT_HOST,
    DEFAULT_PORT,
    SERVICE_NAME,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import (
    configure_logging,
    get_logger,
    request_context,
    update_logging_from_settings,
)

__all__ = [
    "DEFAULT_DB_SCHEMA",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "SERVICE_NAME",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "request_context",
    "update_logging_from_settings",
]
