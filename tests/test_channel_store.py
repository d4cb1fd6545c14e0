from __future__ import annotations

import pytest

from dmr_organizer.channels.exceptions import ChannelNotFound, DuplicateChannel


def test_add_then_duplicate_leaves_catalog_unchanged(store, channel_factory):
    events: list[str] = []
    store.changed.connect(lambda: events.append("changed"))

    first = store.add(channel_factory())
    assert len(store) == 1
    with pytest.raises(DuplicateChannel) as info:
        store.add(channel_factory(alias="Other"))
    assert info.value.existing is first
    assert len(store) == 1
    assert events == ["changed"]


def test_distinct_keys_coexist(store, channel_factory):
    store.add(channel_factory())
    store.add(channel_factory(timeslot="2"))
    store.add(channel_factory(color_code=2))
    store.add(channel_factory(frequency_mhz=443.601))
    assert len(store) == 4


def test_dedup_key_tolerance_and_case(store, channel_factory):
    store.add(channel_factory(timeslot="XPT"))
    with pytest.raises(DuplicateChannel):
        store.add(channel_factory(frequency_mhz=443.60005, timeslot="xpt"))


def test_update_in_place_keeps_identity(store, channel_factory):
    record = store.add(channel_factory())
    original_id = record.id
    updated = store.update(record.id, channel_factory(alias="Renamed", notes="x"))
    assert updated is record
    assert record.id == original_id
    assert record.alias == "Renamed"
    # saving unchanged values never collides with itself
    store.update(record.id, record.copy())
    store.update(record.id, {"notes": "y"})
    assert record.notes == "y"


def test_update_colliding_with_other_record(store, channel_factory):
    store.add(channel_factory())
    second = store.add(channel_factory(alias="B", timeslot="2"))
    with pytest.raises(DuplicateChannel):
        store.update(second.id, {"timeslot": "1"})
    assert second.timeslot == "2"


def test_update_unknown_id(store, channel_factory):
    with pytest.raises(ChannelNotFound):
        store.update("missing", channel_factory())


def test_remove(store, channel_factory):
    record = store.add(channel_factory())
    events: list[str] = []
    store.changed.connect(lambda: events.append("changed"))
    assert store.remove("missing") is False
    assert events == []
    assert store.remove(record.id) is True
    assert len(store) == 0
    assert events == ["changed"]


def test_zones_sorted_case_insensitively(store, channel_factory):
    added: list[str] = []
    store.zoneAdded.connect(added.append)
    store.ensure_zone("bravo")
    store.ensure_zone("Alpha")
    store.ensure_zone("charlie")
    assert store.ensure_zone("ALPHA") is False
    assert store.ensure_zone("   ") is False
    store.add(channel_factory(zone="Delta"))
    assert store.zones() == ["Alpha", "bravo", "charlie", "Delta"]
    assert added == ["bravo", "Alpha", "charlie", "Delta"]


def test_delete_zone_clears_references(store, channel_factory):
    on_highway = store.add(channel_factory(alias="H1", zone="Highways"))
    also = store.add(channel_factory(alias="H2", zone="highways", timeslot="2"))
    other = store.add(channel_factory(alias="C", zone="City", color_code=3))
    before = other.values()
    removed: list[str] = []
    store.zoneRemoved.connect(removed.append)

    assert store.delete_zone("HIGHWAYS") is True
    assert removed == ["Highways"]
    assert on_highway.zone == ""
    assert also.zone == ""
    assert on_highway.alias == "H1"
    assert other.values() == before
    assert store.zones() == ["City"]
    assert len(store) == 3
    assert store.delete_zone("Highways") is False


def test_merge_skips_duplicates_and_emits_once(store, channel_factory):
    store.add(channel_factory())
    events: list[str] = []
    store.changed.connect(lambda: events.append("changed"))
    added = store.merge(
        [
            channel_factory(alias="dup"),
            channel_factory(alias="new", timeslot="2", zone="Z2"),
            channel_factory(alias="dup-in-batch", timeslot="2"),
        ]
    )
    assert [r.alias for r in added] == ["new"]
    assert events == ["changed"]
    assert store.zones() == ["Z1", "Z2"]
