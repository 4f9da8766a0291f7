"""Domain ports package."""

from .health_check import IDatabaseProbe, IHealthCheckService

__all__ = ["IDatabaseProbe", "IHealthCheckService"]
