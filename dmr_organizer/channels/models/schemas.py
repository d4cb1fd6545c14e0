"""Pydantic models for the structured (JSON) channel format."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .channel import POWER_HIGH, TIMESLOT_1, ChannelRecord


class ChannelPayload(BaseModel):
    """One channel as written to / read from a JSON export.

    String fields are optional so that missing or ``null`` values fall back
    to the form defaults on import.
    """

    alias: Optional[str] = None
    rx_only: bool = False
    frequency_mhz: float = Field(default=0.0, alias="frequencyMHz")
    color_code: int = 0
    timeslot: Optional[str] = None
    talk_group: Optional[str] = None
    contact: Optional[str] = None
    power: Optional[str] = None
    zone: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_record(self) -> ChannelRecord:
        return ChannelRecord(
            alias=self.alias or "",
            rx_only=self.rx_only,
            frequency_mhz=self.frequency_mhz,
            color_code=self.color_code,
            timeslot=self.timeslot or TIMESLOT_1,
            talk_group=self.talk_group or "",
            contact=self.contact or "",
            power=self.power or POWER_HIGH,
            zone=self.zone or "",
            notes=self.notes or "",
        )
