"""Autosave snapshot handling for the channel catalog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from PySide6.QtCore import QObject

from utils import app_settings
from utils.app_signals import app_signals

from .exceptions import ChannelPersistenceError, ExportFailed
from .models import ChannelRecord
from .persistence import ChannelExportFormat, ChannelPersistenceService
from .sample_data import sample_channels
from .store import ChannelCatalogStore

logger = logging.getLogger(__name__)


class AutosaveController(QObject):
    """Restores the catalog from the CSV snapshot and rewrites it on change.

    Construction tries the snapshot at ``path``; when it is missing, empty
    or unreadable the catalog is seeded instead (unless the
    ``seed_samples`` setting is off). Afterwards every
    ``store.changed`` rewrites the whole snapshot. Write failures are logged,
    kept in ``last_error`` and announced through
    ``app_signals.autosaveFailed``; they never propagate.
    """

    def __init__(
        self,
        store: ChannelCatalogStore,
        *,
        path: Optional[Path | str] = None,
        persistence: Optional[ChannelPersistenceService] = None,
        seed: Optional[Callable[[], Iterable[ChannelRecord]]] = sample_channels,
        enabled: Optional[bool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        # the store owns the controller unless a parent is given
        super().__init__(parent if parent is not None else store)
        self.store = store
        self.path = Path(path) if path is not None else app_settings.autosave_path()
        self.persistence = persistence or ChannelPersistenceService()
        self.enabled = app_settings.autosave_enabled() if enabled is None else enabled
        self.last_error: Optional[ExportFailed] = None
        self._saving = False

        self.restored = self.restore()
        if not self.restored and seed is not None and app_settings.seed_samples_enabled():
            seeded = store.merge(seed())
            logger.info("seeded catalog with %d sample channel(s)", len(seeded))
            self.save()
        store.changed.connect(self.save)

    def restore(self) -> bool:
        """Load the snapshot into the store; True when channels were restored."""
        if not self.path.exists():
            logger.debug("no autosave snapshot at %s", self.path)
            return False
        try:
            channels: List[ChannelRecord] = self.persistence.import_from(self.path)
        except ChannelPersistenceError as exc:
            logger.warning("ignoring unreadable autosave snapshot %s: %s", self.path, exc)
            return False
        if not channels:
            logger.info("autosave snapshot %s is empty", self.path)
            return False
        added = self.store.merge(channels)
        logger.info("restored %d channel(s) from %s", len(added), self.path)
        return True

    def save(self) -> bool:
        """Rewrite the snapshot; False when disabled, re-entered or failed."""
        if not self.enabled or self._saving:
            return False
        self._saving = True
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.persistence.export(tmp, self.store.records(), ChannelExportFormat.CSV)
            tmp.replace(self.path)
        except ExportFailed as exc:
            self._discard(tmp)
            self._record_failure(exc)
            return False
        except OSError as exc:
            self._discard(tmp)
            self._record_failure(ExportFailed(self.path, exc))
            return False
        finally:
            self._saving = False
        self.last_error = None
        logger.debug("autosaved %d channel(s) to %s", len(self.store), self.path)
        return True

    @staticmethod
    def _discard(tmp: Path) -> None:
        try:
            tmp.unlink(missing_ok=True)
        except OSError as exc:
            logger.debug("could not remove partial snapshot %s: %s", tmp, exc)

    def _record_failure(self, error: ExportFailed) -> None:
        self.last_error = error
        logger.warning("AutoSave failed: %s", error)
        app_signals.autosaveFailed.emit(str(error))


__all__ = ["AutosaveController"]
