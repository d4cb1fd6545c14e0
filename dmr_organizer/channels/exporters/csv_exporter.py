"""CSV reader/writer for channel catalogs (also the autosave snapshot format)."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..models import ChannelRecord

logger = logging.getLogger(__name__)


COLUMNS: Sequence[str] = (
    "Alias",
    "RxOnly",
    "FrequencyMHz",
    "ColorCode",
    "Timeslot",
    "TalkGroup",
    "Contact",
    "Power",
    "Zone",
    "Notes",
)


def _channel_row(channel: ChannelRecord) -> List[str]:
    return [
        channel.alias,
        "Yes" if channel.rx_only else "No",
        f"{channel.frequency_mhz:.3f}",
        str(channel.color_code),
        channel.timeslot,
        channel.talk_group,
        channel.contact,
        channel.power,
        channel.zone,
        channel.notes,
    ]


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def channel_from_cells(cells: Sequence[object]) -> Optional[ChannelRecord]:
    """Build a channel from one row of cells, or None if the row is unusable.

    Shared with the spreadsheet reader: a row needs at least ten cells, a
    numeric frequency and an integer colour code.
    """
    if len(cells) < len(COLUMNS):
        return None
    values = ["" if cell is None else str(cell).strip() for cell in cells[: len(COLUMNS)]]
    frequency = _parse_float(values[2])
    if frequency is None:
        return None
    color_code = _parse_int(values[3])
    if color_code is None:
        return None
    return ChannelRecord(
        alias=values[0],
        rx_only=values[1].casefold() == "yes",
        frequency_mhz=frequency,
        color_code=color_code,
        timeslot=values[4],
        talk_group=values[5],
        contact=values[6],
        power=values[7],
        zone=values[8],
        notes=values[9],
    )


def export_channels(channels: Iterable[ChannelRecord], path: Path) -> Path:
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(list(COLUMNS))
        for channel in channels:
            writer.writerow(_channel_row(channel))
    return path


def read_channels(path: Path) -> List[ChannelRecord]:
    """Read channels from ``path``; malformed rows are skipped, not fatal."""
    path = Path(path)
    channels: List[ChannelRecord] = []
    skipped = 0
    with path.open(newline="", encoding="utf-8-sig") as fh:
        reader = csv.reader(fh)
        next(reader, None)  # header
        for line_no, row in enumerate(reader, start=2):
            if not row:
                continue
            channel = channel_from_cells(row)
            if channel is None:
                logger.debug("skipping malformed CSV row %d in %s", line_no, path)
                skipped += 1
                continue
            channels.append(channel)
    if skipped:
        logger.info("skipped %d malformed row(s) reading %s", skipped, path)
    return channels


__all__ = ["COLUMNS", "channel_from_cells", "export_channels", "read_channels"]
