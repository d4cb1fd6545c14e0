"""Service layer tying the channel catalog, form, view and files together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from utils.app_signals import app_signals

from .autosave import AutosaveController
from .form_state import ChannelFormState
from .models import ChannelRecord
from .persistence import ChannelExportFormat, ChannelPersistenceService
from .store import ChannelCatalogStore
from .view import ChannelQuery, ChannelView

logger = logging.getLogger(__name__)


class ChannelCatalogService:
    """High-level API consumed by windows and dialogs.

    Dialogs, file choosers and message boxes stay with the caller: this
    class raises ``DuplicateChannel`` / ``UnsupportedFormat`` /
    ``ImportFailed`` / ``ExportFailed`` and returns plain values.
    """

    def __init__(
        self,
        *,
        store: Optional[ChannelCatalogStore] = None,
        persistence: Optional[ChannelPersistenceService] = None,
        autosave: Optional[AutosaveController] = None,
        autosave_path: Optional[Path | str] = None,
        enable_autosave: bool = True,
    ) -> None:
        self.store = store or ChannelCatalogStore()
        self.persistence = persistence or ChannelPersistenceService()
        self.form = ChannelFormState(zone_provider=self.store.zones)
        self.view = ChannelView(self.store, ChannelQuery(group_by_zone=True))
        self.autosave = autosave
        if self.autosave is None and enable_autosave:
            self.autosave = AutosaveController(
                self.store, path=autosave_path, persistence=self.persistence
            )
        self._selected_id: Optional[str] = None
        self.store.zoneRemoved.connect(self._on_zone_removed)
        self.form.reset()

    # ------------------------------------------------------------------
    # Selection / form
    # ------------------------------------------------------------------
    @property
    def selected_channel(self) -> Optional[ChannelRecord]:
        if self._selected_id is None:
            return None
        return self.store.get(self._selected_id)

    def select_channel(self, record_id: Optional[str]) -> Optional[ChannelRecord]:
        record = self.store.get(record_id) if record_id is not None else None
        self._selected_id = record.id if record is not None else None
        if record is None:
            self.form.reset()
        else:
            self.form.load_record(record)
        return record

    def start_new_channel(self) -> None:
        self.select_channel(None)

    def save_form(self) -> tuple[Optional[ChannelRecord], str]:
        """Save the form as a new channel or over the selected one.

        Returns ``(record, "")`` on success or ``(None, reason)`` when the
        form does not validate. Raises ``DuplicateChannel`` on a key clash.
        """
        record, error = self.form.try_build_record()
        if record is None:
            return None, error
        selected = self.selected_channel
        if selected is None:
            saved = self.store.add(record)
            self.start_new_channel()
        else:
            saved = self.store.update(selected.id, record)
        return saved, ""

    def delete_selected(self) -> bool:
        selected = self.selected_channel
        if selected is None:
            return False
        self.store.remove(selected.id)
        self.start_new_channel()
        return True

    # ------------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------------
    def add_zone(self, name: str) -> Optional[str]:
        if not name or not name.strip():
            return None
        zone = name.strip()
        self.store.ensure_zone(zone)
        self.form.set_field("zone", zone)
        return zone

    def delete_zone(self, name: str) -> bool:
        return self.store.delete_zone(name)

    def _on_zone_removed(self, zone: str) -> None:
        current = str(self.form.get_field("zone") or "")
        if current.casefold() == zone.casefold():
            self.form.set_field("zone", self.form.default_zone())

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------
    def import_from(self, path: Path | str) -> int:
        """Merge channels from ``path``; duplicates are skipped.

        Returns the number of channels added.
        """
        imported = self.persistence.import_from(path)
        if not imported:
            logger.info("no channels found in %s", path)
            return 0
        added = self.store.merge(imported)
        logger.info("imported %d of %d channel(s) from %s", len(added), len(imported), path)
        app_signals.catalogImported.emit(len(added))
        return len(added)

    def export_to(
        self,
        path: Path | str,
        fmt: Optional[ChannelExportFormat | str] = None,
        channels: Optional[List[ChannelRecord]] = None,
    ) -> Path:
        rows = list(channels) if channels is not None else list(self.store.records())
        return self.persistence.export(path, rows, fmt)


__all__ = ["ChannelCatalogService"]
