"""
Database package - Infrastructure Layer

This package contains database-related implementations for the DevDB service.
It provides the relational database client and its connection pool, used by
the repositories to run read-only queries.
"""

from devdb.infrastructure.database.postgres_database import (
    DatabaseConnectionError,
    PostgresDatabase,
)

__all__ = ["DatabaseConnectionError", "PostgresDatabase"]
