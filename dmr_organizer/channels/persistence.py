"""Import/export entry points for channel catalogs."""

from __future__ import annotations

import csv
import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from .exceptions import ExportFailed, ImportFailed, UnsupportedFormat
from .exporters import csv_exporter, json_exporter, xlsx_exporter
from .models import ChannelRecord

logger = logging.getLogger(__name__)


class ChannelExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    XLSX = "xlsx"

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_path(cls, path: Path | str) -> "ChannelExportFormat":
        suffix = Path(path).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            raise UnsupportedFormat(path) from None


_CODECS = {
    ChannelExportFormat.CSV: csv_exporter,
    ChannelExportFormat.JSON: json_exporter,
    ChannelExportFormat.XLSX: xlsx_exporter,
}


class ChannelPersistenceService:
    """Reads and writes channel lists as CSV, JSON or XLSX.

    Holds no channel state between calls.
    """

    def export(
        self,
        path: Path | str,
        channels: Iterable[ChannelRecord],
        fmt: Optional[ChannelExportFormat | str] = None,
    ) -> Path:
        """Write ``channels`` to ``path``.

        ``fmt`` defaults to the format implied by the extension. I/O
        failures are raised as :class:`ExportFailed` with the OS error as
        ``cause``.
        """
        target = Path(path)
        if fmt is None:
            fmt = ChannelExportFormat.from_path(target)
        elif not isinstance(fmt, ChannelExportFormat):
            try:
                fmt = ChannelExportFormat(str(fmt).lower().lstrip("."))
            except ValueError:
                raise UnsupportedFormat(target) from None
        rows = list(channels)
        try:
            _CODECS[fmt].export_channels(rows, target)
        except OSError as exc:
            logger.debug("export to %s failed: %s", target, exc)
            raise ExportFailed(target, exc) from exc
        logger.debug("exported %d channel(s) to %s as %s", len(rows), target, fmt.value)
        return target

    def import_from(self, path: Path | str) -> List[ChannelRecord]:
        """Return every channel that could be parsed from ``path``.

        Unknown extensions raise :class:`UnsupportedFormat` before the file
        is touched. Unreadable or structurally invalid files raise
        :class:`ImportFailed`; individual bad CSV/XLSX rows are skipped.
        """
        source = Path(path)
        fmt = ChannelExportFormat.from_path(source)
        try:
            channels = _CODECS[fmt].read_channels(source)
        except (OSError, ValueError, csv.Error) as exc:
            logger.debug("import from %s failed: %s", source, exc)
            raise ImportFailed(source, exc) from exc
        logger.debug("imported %d channel(s) from %s", len(channels), source)
        return channels


__all__ = ["ChannelExportFormat", "ChannelPersistenceService"]
