from __future__ import annotations

import pytest
from PySide6.QtCore import QLocale

from dmr_organizer.channels import validators
from dmr_organizer.channels.validators import (
    parse_color_code,
    parse_frequency,
    validate_alias,
    validate_color_code,
    validate_contact,
    validate_frequency,
    validate_power,
    validate_talk_group,
    validate_timeslot,
    validate_zone,
)


@pytest.mark.parametrize("text", ["443.6", "30", "1300", " 146.520 ", "1.3e3"])
def test_frequency_in_range_is_valid(text):
    assert validate_frequency(text) is None


@pytest.mark.parametrize("text", ["29.999", "1300.001", "0", "-443.6"])
def test_frequency_out_of_range(text):
    assert validate_frequency(text) == validators.MSG_FREQUENCY_RANGE


@pytest.mark.parametrize("text", ["", "   ", "abc", "443.6MHz", "nan", "inf", None])
def test_frequency_parse_failure(text):
    assert validate_frequency(text) == validators.MSG_FREQUENCY_INVALID


def test_frequency_falls_back_to_locale_decimal_comma():
    previous = QLocale()
    QLocale.setDefault(QLocale("de_DE"))
    try:
        assert parse_frequency("443,6") == pytest.approx(443.6)
        # the invariant form still wins first
        assert parse_frequency("443.600") == pytest.approx(443.6)
    finally:
        QLocale.setDefault(previous)


@pytest.mark.parametrize("locale_name, text", [("en_US", "1,250"), ("de_DE", "1.250,5")])
def test_frequency_rejects_group_separators(locale_name, text):
    previous = QLocale()
    QLocale.setDefault(QLocale(locale_name))
    try:
        assert parse_frequency(text) is None
        assert validate_frequency(text) == validators.MSG_FREQUENCY_INVALID
    finally:
        QLocale.setDefault(previous)


def test_color_code_bounds():
    assert validate_color_code(0) is None
    assert validate_color_code(15) is None
    assert validate_color_code("7") is None
    assert validate_color_code(16) == validators.MSG_COLOR_CODE_RANGE
    assert validate_color_code(-1) == validators.MSG_COLOR_CODE_RANGE
    assert validate_color_code(None) == validators.MSG_COLOR_CODE_RANGE
    assert validate_color_code(True) == validators.MSG_COLOR_CODE_RANGE


def test_parse_color_code():
    assert parse_color_code(" 3 ") == 3
    assert parse_color_code("x") is None
    assert parse_color_code(2.5) is None


def test_timeslot_and_power_are_exact():
    assert validate_timeslot("1") is None
    assert validate_timeslot("XPT") is None
    assert validate_timeslot("xpt") == validators.MSG_TIMESLOT_INVALID
    assert validate_timeslot("3") == validators.MSG_TIMESLOT_INVALID
    assert validate_power("Low") is None
    assert validate_power("low") == validators.MSG_POWER_INVALID


@pytest.mark.parametrize(
    "validator, message",
    [
        (validate_alias, validators.MSG_ALIAS_REQUIRED),
        (validate_talk_group, validators.MSG_TALK_GROUP_REQUIRED),
        (validate_contact, validators.MSG_CONTACT_REQUIRED),
        (validate_zone, validators.MSG_ZONE_REQUIRED),
    ],
)
def test_required_text_fields(validator, message):
    assert validator("value") is None
    assert validator("") == message
    assert validator("  \t") == message
    assert validator(None) == message
