"""In-memory catalog of channels and zones."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal

from .exceptions import ChannelNotFound, DuplicateChannel
from .models import ChannelRecord

logger = logging.getLogger(__name__)


def _zone_key(name: str) -> str:
    return name.casefold()


class ChannelCatalogStore(QObject):
    """Owns the ordered channel list and the zone registry.

    Every mutation commits first and then emits exactly one ``changed``
    signal. Handlers must not call back into ``add``/``update``/``remove``
    from inside a ``changed`` slot.
    """

    changed = Signal()
    zoneAdded = Signal(str)
    zoneRemoved = Signal(str)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._records: List[ChannelRecord] = []
        self._zones: List[str] = []

    # Queries --------------------------------------------------------------
    def records(self) -> Tuple[ChannelRecord, ...]:
        return tuple(self._records)

    def zones(self) -> List[str]:
        return list(self._zones)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(tuple(self._records))

    def get(self, record_id: str) -> Optional[ChannelRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_duplicate(
        self, candidate: ChannelRecord, ignore_id: Optional[str] = None
    ) -> Optional[ChannelRecord]:
        """Return the record sharing ``candidate``'s dedup key, if any."""
        for record in self._records:
            if ignore_id is not None and record.id == ignore_id:
                continue
            if record.same_channel_as(candidate):
                return record
        return None

    # Channel mutations ----------------------------------------------------
    def add(self, record: ChannelRecord) -> ChannelRecord:
        existing = self.find_duplicate(record)
        if existing is not None:
            raise DuplicateChannel(existing, record)
        self._records.append(record)
        self._register_zone(record.zone)
        logger.debug("channel added: %s (%s)", record.alias, record.id)
        self.changed.emit()
        return record

    def update(
        self, record_id: str, values: Union[ChannelRecord, Mapping[str, Any]]
    ) -> ChannelRecord:
        """Overwrite the record with ``record_id`` in place.

        ``values`` may be a ``ChannelRecord`` (its id is ignored) or a mapping
        of field names; omitted fields keep their current value.
        """
        target = self.get(record_id)
        if target is None:
            raise ChannelNotFound(record_id)
        if isinstance(values, ChannelRecord):
            patch: Dict[str, Any] = values.values()
        else:
            patch = dict(values)
        candidate = target.copy()
        candidate.apply(patch)
        existing = self.find_duplicate(candidate, ignore_id=record_id)
        if existing is not None:
            raise DuplicateChannel(existing, candidate)
        target.apply(patch)
        self._register_zone(target.zone)
        logger.debug("channel updated: %s (%s)", target.alias, target.id)
        self.changed.emit()
        return target

    def remove(self, record_id: str) -> bool:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                logger.debug("channel removed: %s (%s)", record.alias, record.id)
                self.changed.emit()
                return True
        return False

    def merge(self, records: Iterable[ChannelRecord]) -> List[ChannelRecord]:
        """Append every record whose dedup key is free; skip the rest.

        Emits a single ``changed`` for the whole batch and returns the
        records that were added.
        """
        added: List[ChannelRecord] = []
        skipped = 0
        for record in records:
            if self.find_duplicate(record) is not None:
                skipped += 1
                continue
            self._records.append(record)
            self._register_zone(record.zone)
            added.append(record)
        if skipped:
            logger.info("skipped %d duplicate channel(s) while merging", skipped)
        if added:
            self.changed.emit()
        return added

    # Zone registry --------------------------------------------------------
    def ensure_zone(self, name: str) -> bool:
        """Register ``name`` as a zone; True when it was newly added."""
        if not self._register_zone(name):
            return False
        self.changed.emit()
        return True

    def delete_zone(self, name: str) -> bool:
        """Remove a zone and unassign every channel that referenced it."""
        index = self._find_zone(name)
        if index is None:
            return False
        zone = self._zones.pop(index)
        key = _zone_key(zone)
        cleared = 0
        for record in self._records:
            if record.zone and _zone_key(record.zone) == key:
                record.zone = ""
                cleared += 1
        logger.debug("zone removed: %s (%d channel(s) unassigned)", zone, cleared)
        self.zoneRemoved.emit(zone)
        self.changed.emit()
        return True

    def _find_zone(self, name: str) -> Optional[int]:
        if not name or not name.strip():
            return None
        key = _zone_key(name.strip())
        for index, zone in enumerate(self._zones):
            if _zone_key(zone) == key:
                return index
        return None

    def _register_zone(self, name: str) -> bool:
        if not name or not name.strip():
            return False
        zone = name.strip()
        if self._find_zone(zone) is not None:
            return False
        key = _zone_key(zone)
        index = 0
        while index < len(self._zones) and _zone_key(self._zones[index]) < key:
            index += 1
        self._zones.insert(index, zone)
        self.zoneAdded.emit(zone)
        return True


__all__ = ["ChannelCatalogStore"]
