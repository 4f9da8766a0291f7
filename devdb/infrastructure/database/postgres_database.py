"""
Relational Database - Infrastructure Layer

This module provides a SQLAlchemy-backed client for the device database.
It owns the connection pool and runs read-only parameterized queries.
"""

import asyncio
from typing import Any, Dict, List, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Connection, Engine

from devdb.shared import get_logger

logger = get_logger(__name__)


class DatabaseConnectionError(Exception):
    """Raised when no working connection can be checked out of the pool."""


class PostgresDatabase:
    """Relational database client backed by a bounded connection pool."""

    def __init__(
        self,
        url: str,
        pool_size: int = 5,
        max_overflow: int = 0,
        pool_timeout: float = 30.0,
        echo: bool = False,
    ):
        """
        Initialize the database client.

        Args:
            url: SQLAlchemy database URL
            pool_size: Connections kept open in the pool
            max_overflow: Connections allowed above pool_size
            pool_timeout: Seconds to wait for a free connection
            echo: Log every statement through SQLAlchemy
        """
        self.engine: Engine = create_engine(
            url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            echo=echo,
        )

    @property
    def url(self) -> str:
        """Database URL with the password masked."""
        return self.engine.url.render_as_string(hide_password=True)

    def _connect(self) -> Connection:
        try:
            return self.engine.connect()
        except sa_exc.DBAPIError as exc:
            raise DatabaseConnectionError(str(exc.orig)) from exc

    def _fetch_all(self, query: str, params: Dict[str, Any]) -> List[Sequence[Any]]:
        with self._connect() as connection:
            result = connection.execute(text(query), params)
            return [tuple(row) for row in result]

    async def fetch_all(
        self, query: str, params: Dict[str, Any]
    ) -> List[Sequence[Any]]:
        """
        Run a read-only query and return its raw rows.

        The blocking round trip runs in a worker thread so the event loop
        stays free while the pool hands out a connection.

        Args:
            query: SQL text with named bind parameters
            params: Values for the bind parameters

        Returns:
            List of raw rows in the order returned by the database

        Raises:
            DatabaseConnectionError: If no connection can be checked out
            sqlalchemy.exc.SQLAlchemyError: If the query fails
        """
        return await asyncio.to_thread(self._fetch_all, query, params)

    def _ping(self) -> None:
        with self._connect() as connection:
            connection.execute(text("SELECT 1"))

    async def ping(self) -> None:
        """
        Check that a connection can be checked out and used.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database is unreachable
        """
        await asyncio.to_thread(self._ping)

    def close(self) -> None:
        """Dispose the connection pool."""
        logger.info("database.pool.dispose", url=self.url)
        self.engine.dispose()
