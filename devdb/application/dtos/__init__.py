"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_info_dto import (
    ControlItemDTO,
    DeviceInfoDTO,
    DeviceInfoReplyDTO,
    DeviceListDTO,
    InfoEntryDTO,
    PropertyDTO,
)
from .health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    LookupSettingsDTO,
    SystemHealthDTO,
)

__all__ = [
    "DeviceListDTO",
    "PropertyDTO",
    "ControlItemDTO",
    "DeviceInfoDTO",
    "InfoEntryDTO",
    "DeviceInfoReplyDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
    "LookupSettingsDTO",
]
