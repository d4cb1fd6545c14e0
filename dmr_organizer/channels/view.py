"""Filtered, sorted and zone-grouped projection of the channel catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from .models import ChannelRecord
from .store import ChannelCatalogStore

logger = logging.getLogger(__name__)


SORT_ALIAS = "alias"
SORT_FREQUENCY = "frequency"
SORT_COLOR_CODE = "colorCode"
SORT_TIMESLOT = "timeslot"
SORT_POWER = "power"
SORT_ZONE = "zone"

_SORT_KEYS: Dict[str, Callable[[ChannelRecord], Any]] = {
    SORT_ALIAS: lambda r: r.alias.casefold(),
    SORT_FREQUENCY: lambda r: r.frequency_mhz,
    SORT_COLOR_CODE: lambda r: r.color_code,
    SORT_TIMESLOT: lambda r: r.timeslot.casefold(),
    SORT_POWER: lambda r: r.power.casefold(),
    SORT_ZONE: lambda r: r.zone.casefold(),
}


class FilterOption(NamedTuple):
    """Pairs a display label with the filter value it selects."""

    label: str
    value: Any


SORT_FIELDS: Tuple[FilterOption, ...] = (
    FilterOption("Alias", SORT_ALIAS),
    FilterOption("Frequency", SORT_FREQUENCY),
    FilterOption("Color Code", SORT_COLOR_CODE),
    FilterOption("Timeslot", SORT_TIMESLOT),
    FilterOption("Power", SORT_POWER),
    FilterOption("Zone", SORT_ZONE),
)

TIMESLOT_FILTER_OPTIONS: Tuple[FilterOption, ...] = (
    FilterOption("Any", None),
    FilterOption("Timeslot 1", "1"),
    FilterOption("Timeslot 2", "2"),
    FilterOption("XPT", "XPT"),
)

POWER_FILTER_OPTIONS: Tuple[FilterOption, ...] = (
    FilterOption("Any", None),
    FilterOption("High", "High"),
    FilterOption("Low", "Low"),
)

RX_ONLY_FILTER_OPTIONS: Tuple[FilterOption, ...] = (
    FilterOption("Any", None),
    FilterOption("Rx Only", True),
    FilterOption("Tx/Rx", False),
)

COLOR_CODE_FILTER_OPTIONS: Tuple[FilterOption, ...] = (FilterOption("Any", None),) + tuple(
    FilterOption(f"CC {code}", code) for code in range(16)
)


def zone_filter_options(zones: Iterable[str]) -> List[FilterOption]:
    options = [FilterOption("All Zones", None)]
    options.extend(FilterOption(zone, zone) for zone in zones)
    return options


@dataclass(frozen=True)
class ChannelQuery:
    """Filter/sort/group criteria for the channel view.

    ``None`` (or an empty search string) means "do not filter on this".
    """

    text_search: str = ""
    timeslot: Optional[str] = None
    color_code: Optional[int] = None
    power: Optional[str] = None
    rx_only: Optional[bool] = None
    zone: Optional[str] = None
    order_by: str = SORT_FREQUENCY
    order_desc: bool = False
    group_by_zone: bool = False


def matches(record: ChannelRecord, query: ChannelQuery) -> bool:
    needle = (query.text_search or "").strip().lower()
    if needle and needle not in record.search_blob:
        return False
    if query.timeslot and record.timeslot.casefold() != query.timeslot.casefold():
        return False
    if query.color_code is not None and record.color_code != query.color_code:
        return False
    if query.power and record.power.casefold() != query.power.casefold():
        return False
    if query.rx_only is not None and record.rx_only != query.rx_only:
        return False
    if query.zone and record.zone.casefold() != query.zone.casefold():
        return False
    return True


def _sorted(records: Iterable[ChannelRecord], query: ChannelQuery) -> List[ChannelRecord]:
    key = _SORT_KEYS.get(query.order_by, _SORT_KEYS[SORT_FREQUENCY])
    # sorted() is stable in both directions, so ties keep catalog order.
    return sorted(records, key=key, reverse=query.order_desc)


def group_channels(
    records: Iterable[ChannelRecord], query: ChannelQuery
) -> List[Tuple[str, List[ChannelRecord]]]:
    """Return ``(zone, channels)`` groups.

    Groups appear in the order their first channel appears in the sorted
    list; zones that differ only by case share a group.
    """
    groups: Dict[str, Tuple[str, List[ChannelRecord]]] = {}
    for record in _sorted((r for r in records if matches(r, query)), query):
        key = record.zone.casefold()
        if key not in groups:
            groups[key] = (record.zone, [])
        groups[key][1].append(record)
    return list(groups.values())


def compute(records: Iterable[ChannelRecord], query: Optional[ChannelQuery] = None) -> List[ChannelRecord]:
    """Return the channels that pass ``query`` in display order.

    A pure function of its inputs: nothing is cached and no record is
    modified.
    """
    query = query or ChannelQuery()
    if query.group_by_zone:
        return [record for _zone, members in group_channels(records, query) for record in members]
    return _sorted((r for r in records if matches(r, query)), query)


_QUERY_FIELDS = {f.name for f in fields(ChannelQuery)}


class ChannelView(QObject):
    """Live view over a :class:`ChannelCatalogStore`.

    Rows are recomputed from scratch whenever the store changes or a
    criterion is set.
    """

    criteriaChanged = Signal()
    rowsChanged = Signal()

    def __init__(
        self,
        store: ChannelCatalogStore,
        query: Optional[ChannelQuery] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self._query = query or ChannelQuery()
        self._rows: List[ChannelRecord] = []
        store.changed.connect(self.refresh)
        store.zoneRemoved.connect(self._on_zone_removed)
        self.refresh()

    @property
    def query(self) -> ChannelQuery:
        return self._query

    def rows(self) -> List[ChannelRecord]:
        return list(self._rows)

    def groups(self) -> List[Tuple[str, List[ChannelRecord]]]:
        return group_channels(self.store.records(), self._query)

    def zone_filter_choices(self) -> List[FilterOption]:
        return zone_filter_options(self.store.zones())

    def set_criterion(self, key: str, value: Any) -> None:
        if key not in _QUERY_FIELDS:
            raise KeyError(key)
        if getattr(self._query, key) == value:
            return
        self.set_query(replace(self._query, **{key: value}))

    def set_query(self, query: ChannelQuery) -> None:
        self._query = query
        self.criteriaChanged.emit()
        self.refresh()

    def clear_filters(self) -> None:
        self.set_query(
            ChannelQuery(
                order_by=self._query.order_by,
                order_desc=self._query.order_desc,
                group_by_zone=self._query.group_by_zone,
            )
        )

    def refresh(self) -> None:
        self._rows = compute(self.store.records(), self._query)
        self.rowsChanged.emit()

    def _on_zone_removed(self, zone: str) -> None:
        if self._query.zone and self._query.zone.casefold() == zone.casefold():
            logger.debug("clearing zone filter for deleted zone %s", zone)
            self._query = replace(self._query, zone=None)
            self.criteriaChanged.emit()
        # rows are refreshed by the store's ``changed`` that follows


__all__ = [
    "COLOR_CODE_FILTER_OPTIONS",
    "ChannelQuery",
    "ChannelView",
    "FilterOption",
    "POWER_FILTER_OPTIONS",
    "RX_ONLY_FILTER_OPTIONS",
    "SORT_ALIAS",
    "SORT_COLOR_CODE",
    "SORT_FIELDS",
    "SORT_FREQUENCY",
    "SORT_POWER",
    "SORT_TIMESLOT",
    "SORT_ZONE",
    "TIMESLOT_FILTER_OPTIONS",
    "compute",
    "group_channels",
    "matches",
    "zone_filter_options",
]
