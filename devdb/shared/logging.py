"""
Logging Configuration - Shared Layer

Application code logs through structlog with dotted event names and
key-value context. Library loggers (SQLAlchemy, uvicorn) go through the
same stdlib handlers, so both end up in one stream with one renderer:
console output in development, JSON in production.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from devdb.shared.consts import SERVICE_NAME, EnumEnvironment

# Library loggers that are too chatty at INFO.
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access")


def _env_overrides() -> Dict[str, Optional[str]]:
    """Bootstrap values read before the settings system is available."""
    return {
        "level": os.environ.get("LOG_LEVEL"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _add_service_name(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _shared_processors() -> List[Processor]:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_service_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _build_handlers(
    log_file: Optional[str], formatter: logging.Formatter
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _quiet_library_loggers(numeric_level: int) -> None:
    library_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Route stdlib logging and structlog through a shared set of handlers.

    Call once at import time with no arguments, then again through
    :func:`update_logging_from_settings` once settings are loaded.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        file_path: Extra file to log to; falls back to LOG_FILE_PATH.
        environment: Application environment; production renders JSON.
    """
    env = _env_overrides()
    log_level = level or env["level"] or "INFO"
    log_file = file_path or env["file_path"]
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared = _shared_processors()
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_renderer(environment),
        foreign_pre_chain=[
            *shared,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = _build_handlers(log_file, formatter)
    root_logger.setLevel(numeric_level)
    _quiet_library_loggers(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: The application settings object from Pydantic.
    """
    try:
        level = settings.logging.level
        environment = settings.environment
        configure_logging(
            level=getattr(level, "value", level),
            file_path=settings.logging.file_path,
            environment=getattr(environment, "value", environment),
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def request_context(**values: Any):
    """Bind values to every log line emitted inside the ``with`` block."""
    return structlog.contextvars.bound_contextvars(**values)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
