"""
Main module - Composition Root

Settings, the dependency container and the FastAPI/uvicorn entry points.
Nothing outside this package constructs infrastructure objects.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
