"""
SQL Device Repository - Infrastructure Layer

This module implements the IDeviceRepository interface on top of the
relational device database. Each method runs exactly one query and
decodes its raw rows lazily while the caller iterates.
"""

from typing import Any, AsyncIterator, Dict, List, NoReturn, Sequence

from sqlalchemy import exc as sa_exc

from devdb.domain.entities.device import (
    READING_PROPERTY,
    SETTING_PROPERTY,
    ControlRow,
    ScalingRow,
)
from devdb.domain.entities.errors import (
    DataStoreUnavailableError,
    DeviceQueryError,
    RowDecodeError,
)
from devdb.domain.repositories.device_repository import IDeviceRepository
from devdb.infrastructure.database import DatabaseConnectionError, PostgresDatabase
from devdb.shared import DEFAULT_DB_SCHEMA, get_logger

logger = get_logger(__name__)

SCALING_QUERY = """
SELECT D.device_index, P.property_index, D.description,
       S.primary_text, S.common_text
FROM {schema}.device D
JOIN {schema}.property P ON P.device_index = D.device_index
JOIN {schema}.device_scaling S
  ON S.device_index = P.device_index AND S.property_index = P.property_index
WHERE D.name = :name AND P.property_index IN ({reading}, {setting})
"""

CONTROL_QUERY = """
SELECT C.value, C.short_name, C.long_name
FROM {schema}.device D
JOIN {schema}.digital_control C ON C.device_index = D.device_index
WHERE D.name = :name
ORDER BY C.order_number
"""

SCALING_COLUMNS = (
    "device_index",
    "property_index",
    "description",
    "primary_text",
    "common_text",
)
CONTROL_COLUMNS = ("value", "short_name", "long_name")

_CONNECTIVITY_ERRORS = (
    DatabaseConnectionError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


def _short_reason(error: Exception) -> str:
    """First line of the driver message, without the SQL text or parameters."""
    source = error
    if isinstance(error, sa_exc.DBAPIError) and error.orig is not None:
        source = error.orig
    text = str(source.args[0]) if source.args else ""
    lines = text.strip().splitlines()
    return lines[0] if lines else type(source).__name__


class DeviceRepository(IDeviceRepository):
    """SQL implementation of the IDeviceRepository."""

    def __init__(self, database: PostgresDatabase, schema: str = DEFAULT_DB_SCHEMA):
        """
        Initialize the SQL device repository.

        Args:
            database: Database client owning the connection pool
            schema: Schema holding the device tables
        """
        self.db = database
        self.scaling_query = SCALING_QUERY.format(
            schema=schema, reading=READING_PROPERTY, setting=SETTING_PROPERTY
        )
        self.control_query = CONTROL_QUERY.format(schema=schema)

    async def scaling_rows(self, name: str) -> AsyncIterator[ScalingRow]:
        for raw in await self._fetch("scaling", self.scaling_query, name):
            yield self._to_scaling_row(name, raw)

    async def control_rows(self, name: str) -> AsyncIterator[ControlRow]:
        for raw in await self._fetch("control", self.control_query, name):
            yield self._to_control_row(name, raw)

    async def _fetch(
        self, query_name: str, query: str, name: str
    ) -> List[Sequence[Any]]:
        params: Dict[str, Any] = {"name": name}
        try:
            rows = await self.db.fetch_all(query, params)
        except _CONNECTIVITY_ERRORS as e:
            self._raise_unavailable(query_name, name, e)
        except sa_exc.DBAPIError as e:
            # Statement errors leave the connection usable unless it was invalidated
            if e.connection_invalidated:
                self._raise_unavailable(query_name, name, e)
            self._raise_query_error(query_name, name, e)
        except sa_exc.SQLAlchemyError as e:
            self._raise_query_error(query_name, name, e)

        logger.debug(
            "database.query.rows", query=query_name, device=name, rows=len(rows)
        )
        return rows

    def _raise_unavailable(
        self, query_name: str, name: str, error: Exception
    ) -> NoReturn:
        logger.error(
            "database.connection.failed",
            query=query_name,
            device=name,
            error=str(error),
            exc_info=error,
        )
        raise DataStoreUnavailableError(
            "Device database unavailable",
            details={"error": _short_reason(error)},
        ) from error

    def _raise_query_error(
        self, query_name: str, name: str, error: sa_exc.SQLAlchemyError
    ) -> NoReturn:
        logger.warning(
            "database.query.failed",
            query=query_name,
            device=name,
            error=str(error),
        )
        raise DeviceQueryError(
            name,
            f"{query_name.capitalize()} query failed for {name}: "
            f"{_short_reason(error)}",
            details={"error": str(error)},
        ) from error

    def _to_scaling_row(self, name: str, raw: Sequence[Any]) -> ScalingRow:
        self._check_width(name, raw, SCALING_COLUMNS)
        return ScalingRow(
            device_index=self._as_int(name, SCALING_COLUMNS[0], raw[0]),
            property_index=self._as_int(name, SCALING_COLUMNS[1], raw[1]),
            description=self._as_text(name, SCALING_COLUMNS[2], raw[2]),
            primary_units=self._as_text(name, SCALING_COLUMNS[3], raw[3]),
            common_units=self._as_text(name, SCALING_COLUMNS[4], raw[4]),
        )

    def _to_control_row(self, name: str, raw: Sequence[Any]) -> ControlRow:
        self._check_width(name, raw, CONTROL_COLUMNS)
        return ControlRow(
            value=self._as_int(name, CONTROL_COLUMNS[0], raw[0]),
            short_name=self._as_text(name, CONTROL_COLUMNS[1], raw[1]),
            long_name=self._as_text(name, CONTROL_COLUMNS[2], raw[2]),
        )

    def _check_width(
        self, name: str, raw: Sequence[Any], columns: Sequence[str]
    ) -> None:
        if len(raw) != len(columns):
            raise RowDecodeError(name, "row", tuple(raw))

    def _as_int(self, name: str, column: str, value: Any) -> int:
        if isinstance(value, bool):
            raise RowDecodeError(name, column, value)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise RowDecodeError(name, column, value)
        raise RowDecodeError(name, column, value)

    def _as_text(self, name: str, column: str, value: Any) -> str:
        if not isinstance(value, str):
            raise RowDecodeError(name, column, value)
        return value
