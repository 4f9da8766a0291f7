"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .device import (
    READING_PROPERTY,
    SETTING_PROPERTY,
    ControlItem,
    ControlRow,
    DeviceInfo,
    InfoEntry,
    InfoReply,
    Property,
    ScalingRow,
)
from .errors import (
    DataStoreUnavailableError,
    DeviceQueryError,
    DomainError,
    RowDecodeError,
)
from .health import (
    ApplicationInfo,
    DependencyStatus,
    LookupSettings,
    ServiceStatus,
    SystemHealth,
)

__all__ = [
    "READING_PROPERTY",
    "SETTING_PROPERTY",
    "ScalingRow",
    "ControlRow",
    "Property",
    "ControlItem",
    "DeviceInfo",
    "InfoEntry",
    "InfoReply",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "LookupSettings",
    "DomainError",
    "DeviceQueryError",
    "RowDecodeError",
    "DataStoreUnavailableError",
]
