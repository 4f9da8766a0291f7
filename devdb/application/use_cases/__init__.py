"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .device_info_use_cases import GetDeviceInfoUseCase, ResolveDeviceInfoUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "ResolveDeviceInfoUseCase",
    "GetDeviceInfoUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
