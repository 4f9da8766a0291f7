"""Domain entities for device metadata lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

READING_PROPERTY = 12
SETTING_PROPERTY = 13


@dataclass(frozen=True, slots=True)
class ScalingRow:
    """One record of the property scaling query."""

    device_index: int
    property_index: int
    description: str
    primary_units: str
    common_units: str


@dataclass(frozen=True, slots=True)
class ControlRow:
    """One record of the digital control query."""

    value: int
    short_name: str
    long_name: str


@dataclass(frozen=True, slots=True)
class Property:
    """Engineering units used to scale a reading or a setting."""

    primary_units: str
    common_units: str


@dataclass(frozen=True, slots=True)
class ControlItem:
    """A named discrete state a device can be commanded to."""

    value: int
    short_name: str
    long_name: str


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Resolved metadata for a single device."""

    index: int = 0
    description: str = ""
    reading: Optional[Property] = None
    setting: Optional[Property] = None
    control: Optional[Tuple[ControlItem, ...]] = None


@dataclass(frozen=True, slots=True)
class InfoEntry:
    """
    Result of resolving one requested device name.

    Exactly one of ``device`` and ``error_message`` is populated. Use
    :meth:`found` and :meth:`failed` to build instances.
    """

    name: str
    device: Optional[DeviceInfo] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.device is None) == (self.error_message is None):
            raise ValueError(
                "InfoEntry requires exactly one of device or error_message"
            )

    @classmethod
    def found(cls, name: str, device: DeviceInfo) -> "InfoEntry":
        return cls(name=name, device=device)

    @classmethod
    def failed(cls, name: str, error_message: str) -> "InfoEntry":
        return cls(name=name, error_message=error_message)

    @property
    def is_error(self) -> bool:
        return self.error_message is not None


@dataclass(frozen=True, slots=True)
class InfoReply:
    """Entries for a batch request, in request order."""

    entries: Tuple[InfoEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)
