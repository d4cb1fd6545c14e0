"""Domain model for a DMR channel entry."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


TIMESLOT_1 = "1"
TIMESLOT_2 = "2"
TIMESLOT_XPT = "XPT"
TIMESLOTS: Tuple[str, ...] = (TIMESLOT_1, TIMESLOT_2, TIMESLOT_XPT)

POWER_HIGH = "High"
POWER_LOW = "Low"
POWER_LEVELS: Tuple[str, ...] = (POWER_HIGH, POWER_LOW)

FREQUENCY_MIN_MHZ = 30.0
FREQUENCY_MAX_MHZ = 1300.0
COLOR_CODE_MIN = 0
COLOR_CODE_MAX = 15

# Two frequencies closer than this are the same channel.
FREQUENCY_TOLERANCE = 0.0001

# Editable fields, in interchange column order.
CHANNEL_FIELDS: Tuple[str, ...] = (
    "alias",
    "rx_only",
    "frequency_mhz",
    "color_code",
    "timeslot",
    "talk_group",
    "contact",
    "power",
    "zone",
    "notes",
)


def new_channel_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True, eq=False)
class ChannelRecord:
    """Representation of a single channel in the catalog.

    ``id`` is assigned on creation and never changes; editing a channel
    overwrites the other fields in place.
    """

    alias: str = ""
    rx_only: bool = False
    frequency_mhz: float = 0.0
    color_code: int = 0
    timeslot: str = TIMESLOT_1
    talk_group: str = ""
    contact: str = ""
    power: str = POWER_HIGH
    zone: str = ""
    notes: str = ""
    id: str = field(default_factory=new_channel_id)

    @property
    def search_blob(self) -> str:
        """Lower-cased text used for substring search.

        Computed on access so it always reflects the current field values.
        """
        return "|".join(
            [
                self.alias,
                f"{self.frequency_mhz:.3f}",
                str(self.color_code),
                self.timeslot,
                self.talk_group,
                self.contact,
                self.zone,
                self.power,
                "RxOnly" if self.rx_only else "TxRx",
                self.notes,
            ]
        ).lower()

    def same_channel_as(self, other: "ChannelRecord") -> bool:
        """Return True when ``other`` has the same frequency/colour code/timeslot."""
        return (
            abs(self.frequency_mhz - other.frequency_mhz) < FREQUENCY_TOLERANCE
            and self.color_code == other.color_code
            and self.timeslot.casefold() == other.timeslot.casefold()
        )

    def values(self) -> Dict[str, Any]:
        """Return the editable fields as a mapping (``id`` excluded)."""
        payload = asdict(self)
        payload.pop("id", None)
        return payload

    def apply(self, values: Dict[str, Any]) -> None:
        """Overwrite editable fields from ``values``; unknown keys are ignored."""
        for key in CHANNEL_FIELDS:
            if key in values:
                setattr(self, key, values[key])

    def copy(self) -> "ChannelRecord":
        return ChannelRecord(id=self.id, **self.values())


__all__ = [
    "ChannelRecord",
    "CHANNEL_FIELDS",
    "COLOR_CODE_MAX",
    "COLOR_CODE_MIN",
    "FREQUENCY_MAX_MHZ",
    "FREQUENCY_MIN_MHZ",
    "FREQUENCY_TOLERANCE",
    "POWER_HIGH",
    "POWER_LEVELS",
    "POWER_LOW",
    "TIMESLOT_1",
    "TIMESLOT_2",
    "TIMESLOT_XPT",
    "TIMESLOTS",
    "new_channel_id",
]
