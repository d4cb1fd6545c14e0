"""Custom exceptions for the channel catalog."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import ChannelRecord


class ChannelCatalogError(RuntimeError):
    """Base exception for channel catalog operations."""


class DuplicateChannel(ChannelCatalogError):
    """Raised when frequency, colour code and timeslot are already in use."""

    def __init__(self, existing: "ChannelRecord", candidate: "ChannelRecord") -> None:
        super().__init__(
            "Duplicate detected (Frequency + Color Code + Timeslot must be unique): "
            f"{candidate.frequency_mhz:.3f} MHz CC{candidate.color_code} TS {candidate.timeslot} "
            f"already used by '{existing.alias}'"
        )
        self.existing = existing
        self.candidate = candidate


class ChannelNotFound(ChannelCatalogError):
    """Raised when a channel id is not present in the catalog."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Channel {record_id} not found")
        self.record_id = record_id


class ChannelPersistenceError(ChannelCatalogError):
    """Base class for import/export failures."""

    def __init__(self, message: str, path: Path | str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.cause = cause


class UnsupportedFormat(ChannelPersistenceError):
    """Raised when a file extension does not map to a known codec."""

    def __init__(self, path: Path | str) -> None:
        suffix = Path(path).suffix or "(none)"
        super().__init__(
            f"Unsupported file type {suffix}. Choose CSV, JSON or XLSX.",
            path,
        )


class ImportFailed(ChannelPersistenceError):
    """Raised when a file cannot be read or parsed at all."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        super().__init__(f"Import from {path} failed: {cause}", path, cause)


class ExportFailed(ChannelPersistenceError):
    """Raised when writing an export fails; ``cause`` holds the OS error."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        super().__init__(f"Export to {path} failed: {cause}", path, cause)


__all__ = [
    "ChannelCatalogError",
    "ChannelNotFound",
    "ChannelPersistenceError",
    "DuplicateChannel",
    "ExportFailed",
    "ImportFailed",
    "UnsupportedFormat",
]
