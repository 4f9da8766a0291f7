"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the device
database and its connection pool.
"""

from devdb.infrastructure import database, repositories, services

__all__ = ["database", "repositories", "services"]
