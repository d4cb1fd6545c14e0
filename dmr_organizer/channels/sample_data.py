"""Starter channels loaded when no autosave snapshot is available."""

from __future__ import annotations

from typing import List

from .models import ChannelRecord


def sample_channels() -> List[ChannelRecord]:
    return [
        ChannelRecord(
            alias="City Center",
            frequency_mhz=443.600,
            color_code=1,
            timeslot="1",
            talk_group="Local",
            contact="TG 91",
            zone="City Repeaters",
            rx_only=False,
            power="High",
            notes="Main repeater downtown.",
        ),
        ChannelRecord(
            alias="Highway Link",
            frequency_mhz=442.725,
            color_code=4,
            timeslot="XPT",
            talk_group="Regional",
            contact="TG 3000",
            zone="Highways",
            rx_only=False,
            power="High",
            notes="Highway communication.",
        ),
    ]


__all__ = ["sample_channels"]
