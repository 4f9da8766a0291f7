"""
Presentation Layer Package

FastAPI routers exposing GetDeviceInfo and the operational endpoints.
"""

from devdb.presentation import controllers

__all__ = ["controllers"]
