"""
Device Info DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the GetDeviceInfo
operation. These DTOs are used to transfer data between the application
layer and the presentation layer (API).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from devdb.domain.entities.device import (
    ControlItem,
    DeviceInfo,
    InfoEntry,
    InfoReply,
    Property,
)


class DeviceListDTO(BaseModel):
    """DTO for a GetDeviceInfo request."""

    device: List[str] = Field(
        default_factory=list, description="Device names to resolve, in order"
    )

    model_config = {
        "json_schema_extra": {"example": {"device": ["M:OUTTMP", "G:AMANDA"]}}
    }


class PropertyDTO(BaseModel):
    """DTO for reading/setting scaling units."""

    primary_units: str = Field(description="Primary (raw) units text")
    common_units: str = Field(description="Common (engineering) units text")

    @classmethod
    def from_domain(cls, prop: Property) -> "PropertyDTO":
        return cls(primary_units=prop.primary_units, common_units=prop.common_units)


class ControlItemDTO(BaseModel):
    """DTO for a digital control state."""

    value: int = Field(description="Value sent to the device")
    short_name: str = Field(description="Short command name")
    long_name: str = Field(description="Descriptive command name")

    @classmethod
    def from_domain(cls, item: ControlItem) -> "ControlItemDTO":
        return cls(
            value=item.value, short_name=item.short_name, long_name=item.long_name
        )


class DeviceInfoDTO(BaseModel):
    """DTO for resolved device metadata."""

    index: int = Field(description="Device index (0 when unknown)")
    description: str = Field(description="Device description")
    reading: Optional[PropertyDTO] = Field(
        default=None, description="Reading scaling units"
    )
    setting: Optional[PropertyDTO] = Field(
        default=None, description="Setting scaling units"
    )
    control: Optional[List[ControlItemDTO]] = Field(
        default=None, description="Digital control states in source order"
    )

    @classmethod
    def from_domain(cls, info: DeviceInfo) -> "DeviceInfoDTO":
        return cls(
            index=info.index,
            description=info.description,
            reading=PropertyDTO.from_domain(info.reading) if info.reading else None,
            setting=PropertyDTO.from_domain(info.setting) if info.setting else None,
            control=(
                [ControlItemDTO.from_domain(item) for item in info.control]
                if info.control is not None
                else None
            ),
        )


class InfoEntryDTO(BaseModel):
    """DTO for a single requested device; either device or error_message is set."""

    name: str = Field(description="Requested device name")
    device: Optional[DeviceInfoDTO] = Field(
        default=None, description="Resolved metadata"
    )
    error_message: Optional[str] = Field(
        default=None, description="Reason the device could not be resolved"
    )

    @classmethod
    def from_domain(cls, entry: InfoEntry) -> "InfoEntryDTO":
        return cls(
            name=entry.name,
            device=DeviceInfoDTO.from_domain(entry.device) if entry.device else None,
            error_message=entry.error_message,
        )


class DeviceInfoReplyDTO(BaseModel):
    """DTO for a complete GetDeviceInfo reply."""

    set: List[InfoEntryDTO] = Field(
        default_factory=list, description="One entry per requested name, in order"
    )

    @classmethod
    def from_domain(cls, reply: InfoReply) -> "DeviceInfoReplyDTO":
        return cls(set=[InfoEntryDTO.from_domain(entry) for entry in reply.entries])

    model_config = {
        "json_schema_extra": {
            "example": {
                "set": [
                    {
                        "name": "M:OUTTMP",
                        "device": {
                            "index": 27235,
                            "description": "Outdoor temperature",
                            "reading": {"primary_units": "V", "common_units": "degF"},
                            "setting": None,
                            "control": None,
                        },
                        "error_message": None,
                    },
                    {
                        "name": "Z:BROKEN",
                        "device": None,
                        "error_message": "Unable to decode column 'description'",
                    },
                ]
            }
        }
    }
