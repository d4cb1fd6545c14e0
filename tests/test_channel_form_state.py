from __future__ import annotations

import pytest

from dmr_organizer.channels import form_state as form_module
from dmr_organizer.channels import validators
from dmr_organizer.channels.form_state import ChannelFormState


def _fill(form: ChannelFormState, **overrides) -> None:
    values = {
        "alias": "  City Center ",
        "frequency_text": "443.6",
        "color_code": 1,
        "timeslot": "1",
        "talk_group": " Local ",
        "contact": "TG 91",
        "power": "High",
        "zone": " City Repeaters ",
        "notes": "  downtown  ",
    }
    values.update(overrides)
    for name, value in values.items():
        form.set_field(name, value)


def test_set_field_replaces_errors_and_emits():
    form = ChannelFormState()
    changed: list[str] = []
    form.errorsChanged.connect(changed.append)

    form.set_field("frequency_text", "abc")
    assert form.get_errors("frequency_text") == [validators.MSG_FREQUENCY_INVALID]

    form.set_field("frequency_text", "2000")
    assert form.get_errors("frequency_text") == [validators.MSG_FREQUENCY_RANGE]

    form.set_field("frequency_text", "443.6")
    assert form.get_errors("frequency_text") == []
    assert changed == ["frequency_text", "frequency_text", "frequency_text"]
    assert not form.has_errors


def test_unknown_field_rejected():
    form = ChannelFormState()
    with pytest.raises(KeyError):
        form.set_field("bogus", 1)


def test_validate_all_flags_every_missing_field():
    form = ChannelFormState()
    assert form.validate_all() is False
    errors = form.errors()
    assert set(errors) == {"alias", "frequency_text", "talk_group", "contact", "zone"}
    assert all(len(messages) == 1 for messages in errors.values())


def test_try_build_record_trims_strings():
    form = ChannelFormState()
    _fill(form, rx_only=True)
    record, error = form.try_build_record()
    assert error == ""
    assert record is not None
    assert record.alias == "City Center"
    assert record.talk_group == "Local"
    assert record.zone == "City Repeaters"
    assert record.notes == "downtown"
    assert record.frequency_mhz == pytest.approx(443.6)
    assert record.color_code == 1
    assert record.rx_only is True


def test_try_build_record_reports_validation_first():
    form = ChannelFormState()
    _fill(form, alias="", frequency_text="abc")
    record, error = form.try_build_record()
    assert record is None
    assert error == form_module.MSG_FIX_ERRORS


def test_try_build_record_each_call_gets_new_id():
    form = ChannelFormState()
    _fill(form)
    first, _ = form.try_build_record()
    second, _ = form.try_build_record()
    assert first.id != second.id


def test_reset_restores_defaults_and_first_zone():
    zones = ["Alpha", "Bravo"]
    form = ChannelFormState(zone_provider=lambda: zones)
    _fill(form, timeslot="XPT", power="Low", color_code=9, rx_only=True)
    form.set_field("alias", "")
    assert form.has_errors

    form.reset()
    values = form.values()
    assert values["timeslot"] == "1"
    assert values["power"] == "High"
    assert values["color_code"] == 1
    assert values["rx_only"] is False
    assert values["zone"] == "Alpha"
    assert values["alias"] == ""
    assert values["frequency_text"] == ""
    assert not form.has_errors


def test_reset_without_zones_leaves_zone_empty():
    form = ChannelFormState(zone_provider=lambda: [])
    form.reset()
    assert form.get_field("zone") == ""


def test_load_record_round_trip(channel_factory):
    form = ChannelFormState()
    original = channel_factory(frequency_mhz=442.725, timeslot="XPT", notes="n")
    form.load_record(original)
    assert form.get_field("frequency_text") == "442.725"
    record, error = form.try_build_record()
    assert error == ""
    assert record.values() == original.values()
