"""Domain service helpers for turning row streams into device metadata."""

from dataclasses import dataclass
from typing import AsyncIterator, List, Optional, Tuple

from devdb.domain.entities.device import (
    READING_PROPERTY,
    ControlItem,
    ControlRow,
    Property,
    ScalingRow,
)
from devdb.domain.entities.errors import DeviceQueryError
from devdb.shared import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScalingSummary:
    """Values folded out of a device's scaling rows."""

    index: int = 0
    description: str = ""
    reading: Optional[Property] = None
    setting: Optional[Property] = None


async def fold_scaling_rows(rows: AsyncIterator[ScalingRow]) -> ScalingSummary:
    """Fold scaling rows into index, description, reading and setting.

    Every row overwrites the index and description, and the property for
    its property index, so the last row seen wins.

    Raises:
        DeviceQueryError: Propagated unchanged from the row stream.
    """

    index = 0
    description = ""
    reading: Optional[Property] = None
    setting: Optional[Property] = None

    async for row in rows:
        index = row.device_index
        description = row.description
        prop = Property(
            primary_units=row.primary_units, common_units=row.common_units
        )
        # The query only returns property indices 12 and 13.
        if row.property_index == READING_PROPERTY:
            reading = prop
        else:
            setting = prop

    return ScalingSummary(
        index=index, description=description, reading=reading, setting=setting
    )


async def collect_control_items(
    rows: AsyncIterator[ControlRow],
) -> Optional[Tuple[ControlItem, ...]]:
    """Collect control rows in source order.

    Returns None when there are no rows, or when any row fails; a partial
    control list is never returned.
    """

    items: List[ControlItem] = []

    try:
        async for row in rows:
            items.append(
                ControlItem(
                    value=row.value,
                    short_name=row.short_name,
                    long_name=row.long_name,
                )
            )
    except DeviceQueryError as exc:
        logger.warning(
            "device_info.control_rows.discarded",
            device=exc.device_name,
            collected=len(items),
            error=exc.message,
        )
        return None

    return tuple(items) if items else None
