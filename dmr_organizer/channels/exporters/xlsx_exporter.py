"""Excel workbook reader/writer for channel catalogs."""

from __future__ import annotations

from pathlib import Path
from zipfile import BadZipFile
from typing import Iterable, List, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from ..models import ChannelRecord
from .csv_exporter import channel_from_cells

SHEET_TITLE = "Channels"

HEADERS: Sequence[str] = (
    "Alias",
    "Rx Only",
    "Frequency (MHz)",
    "Color Code",
    "Timeslot",
    "Talk Group",
    "Contact",
    "Power",
    "Zone",
    "Notes",
)


def _text(value: str) -> str:
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def _channel_row(channel: ChannelRecord) -> List[object]:
    row: List[object] = [
        channel.alias,
        "Yes" if channel.rx_only else "No",
        channel.frequency_mhz,
        channel.color_code,
        channel.timeslot,
        channel.talk_group,
        channel.contact,
        channel.power,
        channel.zone,
        channel.notes,
    ]
    return [_text(value) if isinstance(value, str) else value for value in row]


def _autosize_columns(sheet) -> None:
    widths: dict[int, int] = {}
    for row in sheet.iter_rows():
        for cell in row:
            if cell.value is None:
                continue
            length = max(len(line) for line in str(cell.value).splitlines() or [""])
            widths[cell.column] = max(widths.get(cell.column, 0), length)
    for column, width in widths.items():
        sheet.column_dimensions[get_column_letter(column)].width = width + 2


def export_channels(channels: Iterable[ChannelRecord], path: Path) -> Path:
    path = Path(path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(list(HEADERS))
    bold = Font(bold=True)
    for cell in sheet[1]:
        cell.font = bold
    for channel in channels:
        sheet.append(_channel_row(channel))
        # cell text is data, never a formula
        for cell in sheet[sheet.max_row]:
            if isinstance(cell.value, str):
                cell.data_type = "s"
    _autosize_columns(sheet)
    workbook.save(path)
    return path


def read_channels(path: Path) -> List[ChannelRecord]:
    """Read the first worksheet using the same row rules as the CSV reader."""
    try:
        workbook = load_workbook(Path(path), read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException, KeyError) as exc:
        raise ValueError(f"{path} is not a valid workbook: {exc}") from exc
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        next(rows, None)  # header
        channels: List[ChannelRecord] = []
        for line in rows:
            cells = list(line)
            if not any(value not in (None, "") for value in cells):
                continue
            # trailing empty cells are not stored in the workbook
            cells.extend([None] * (len(HEADERS) - len(cells)))
            channel = channel_from_cells(cells)
            if channel is not None:
                channels.append(channel)
        return channels
    finally:
        workbook.close()


__all__ = ["HEADERS", "SHEET_TITLE", "export_channels", "read_channels"]
