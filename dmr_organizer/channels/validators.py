"""Field validation helpers for channel entry.

Every validator returns ``None`` when the value is acceptable, otherwise a
human readable reason. Nothing here raises.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import QLocale

from .models.channel import (
    COLOR_CODE_MAX,
    COLOR_CODE_MIN,
    FREQUENCY_MAX_MHZ,
    FREQUENCY_MIN_MHZ,
    POWER_LEVELS,
    TIMESLOTS,
)


MSG_ALIAS_REQUIRED = "Alias is required."
MSG_FREQUENCY_INVALID = "Enter a valid numeric frequency (MHz)."
MSG_FREQUENCY_RANGE = "Frequency must be between 30 and 1300 MHz."
MSG_COLOR_CODE_RANGE = "Color code must be between 0 and 15."
MSG_TIMESLOT_INVALID = "Select a valid timeslot (1, 2, or XPT)."
MSG_TALK_GROUP_REQUIRED = "Talk group is required."
MSG_CONTACT_REQUIRED = "Contact is required."
MSG_POWER_INVALID = "Power must be High or Low."
MSG_ZONE_REQUIRED = "Zone is required."


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def parse_frequency(text: Any) -> Optional[float]:
    """Parse ``text`` as MHz, trying the invariant form before the locale.

    ``"443.6"`` always parses; ``"443,6"`` parses when the default
    ``QLocale`` uses a decimal comma. Non-finite values are rejected.
    """
    if text is None:
        return None
    raw = str(text).strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        locale = QLocale()
        locale.setNumberOptions(QLocale.NumberOption.RejectGroupSeparator)
        value, ok = locale.toDouble(raw)
        if not ok:
            return None
    if not math.isfinite(value):
        return None
    return value


def parse_color_code(value: Any) -> Optional[int]:
    """Return ``value`` as an int, accepting digit strings; ``None`` otherwise."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    if isinstance(value, int):
        return value
    return None


def validate_alias(value: Any) -> Optional[str]:
    return MSG_ALIAS_REQUIRED if _is_blank(value) else None


def validate_frequency(text: Any) -> Optional[str]:
    frequency = parse_frequency(text)
    if frequency is None:
        return MSG_FREQUENCY_INVALID
    if frequency < FREQUENCY_MIN_MHZ or frequency > FREQUENCY_MAX_MHZ:
        return MSG_FREQUENCY_RANGE
    return None


def validate_color_code(value: Any) -> Optional[str]:
    code = parse_color_code(value)
    if code is None or code < COLOR_CODE_MIN or code > COLOR_CODE_MAX:
        return MSG_COLOR_CODE_RANGE
    return None


def validate_timeslot(value: Any) -> Optional[str]:
    return None if value in TIMESLOTS else MSG_TIMESLOT_INVALID


def validate_talk_group(value: Any) -> Optional[str]:
    return MSG_TALK_GROUP_REQUIRED if _is_blank(value) else None


def validate_contact(value: Any) -> Optional[str]:
    return MSG_CONTACT_REQUIRED if _is_blank(value) else None


def validate_power(value: Any) -> Optional[str]:
    return None if value in POWER_LEVELS else MSG_POWER_INVALID


def validate_zone(value: Any) -> Optional[str]:
    return MSG_ZONE_REQUIRED if _is_blank(value) else None


# Form field name -> validator. ``rx_only`` and ``notes`` are unconstrained.
FIELD_VALIDATORS: Dict[str, Callable[[Any], Optional[str]]] = {
    "alias": validate_alias,
    "frequency_text": validate_frequency,
    "color_code": validate_color_code,
    "timeslot": validate_timeslot,
    "talk_group": validate_talk_group,
    "contact": validate_contact,
    "power": validate_power,
    "zone": validate_zone,
}


__all__ = [
    "FIELD_VALIDATORS",
    "parse_color_code",
    "parse_frequency",
    "validate_alias",
    "validate_color_code",
    "validate_contact",
    "validate_frequency",
    "validate_power",
    "validate_talk_group",
    "validate_timeslot",
    "validate_zone",
]
