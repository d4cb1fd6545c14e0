"""Channel record model and interchange schema."""

from .channel import (
    CHANNEL_FIELDS,
    POWER_LEVELS,
    TIMESLOTS,
    ChannelRecord,
)
from .schemas import ChannelPayload

__all__ = [
    "CHANNEL_FIELDS",
    "POWER_LEVELS",
    "TIMESLOTS",
    "ChannelRecord",
    "ChannelPayload",
]
