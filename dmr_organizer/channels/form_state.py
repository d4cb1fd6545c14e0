"""Staging area for the channel entry form."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from .models import ChannelRecord
from .models.channel import POWER_HIGH, TIMESLOT_1
from .validators import FIELD_VALIDATORS, parse_color_code, parse_frequency

logger = logging.getLogger(__name__)

MSG_FIX_ERRORS = "Please fix validation errors before saving."
MSG_FREQUENCY_REQUIRED = "Frequency must be between 30 and 1300 MHz."
MSG_COLOR_CODE_REQUIRED = "Color code is required."

FORM_FIELDS: Tuple[str, ...] = (
    "alias",
    "frequency_text",
    "rx_only",
    "color_code",
    "timeslot",
    "talk_group",
    "contact",
    "power",
    "zone",
    "notes",
)


def _defaults() -> Dict[str, Any]:
    return {
        "alias": "",
        "frequency_text": "",
        "rx_only": False,
        "color_code": 1,
        "timeslot": TIMESLOT_1,
        "talk_group": "",
        "contact": "",
        "power": POWER_HIGH,
        "zone": "",
        "notes": "",
    }


class ChannelFormState(QObject):
    """Unvalidated mirror of a channel being composed or edited.

    Each ``set_field`` call re-runs that field's validator and replaces the
    field's error list, then emits ``errorsChanged(field)`` so a form can
    redraw its messages.
    """

    fieldChanged = Signal(str)
    errorsChanged = Signal(str)

    def __init__(
        self,
        zone_provider: Optional[Callable[[], Sequence[str]]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._zone_provider = zone_provider
        self._values: Dict[str, Any] = _defaults()
        self._errors: Dict[str, List[str]] = {}

    # Field access ---------------------------------------------------------
    def get_field(self, name: str) -> Any:
        if name not in self._values:
            raise KeyError(name)
        return self._values[name]

    def set_field(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(name)
        self._values[name] = value
        self._validate_field(name)
        self.fieldChanged.emit(name)

    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    # Errors ---------------------------------------------------------------
    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_errors(self, name: Optional[str] = None) -> List[str]:
        if name is None:
            return []
        return list(self._errors.get(name, []))

    def errors(self) -> Dict[str, List[str]]:
        return {key: list(value) for key, value in self._errors.items()}

    def _set_or_clear_error(self, name: str, error: Optional[str]) -> None:
        if not error:
            if self._errors.pop(name, None) is not None:
                self.errorsChanged.emit(name)
            return
        self._errors[name] = [error]
        self.errorsChanged.emit(name)

    def _validate_field(self, name: str) -> None:
        validator = FIELD_VALIDATORS.get(name)
        if validator is None:
            return
        self._set_or_clear_error(name, validator(self._values[name]))

    def validate_all(self) -> bool:
        """Re-run every validator; True when the form is error free."""
        for name in FIELD_VALIDATORS:
            self._validate_field(name)
        return not self.has_errors

    # Record conversion ----------------------------------------------------
    def try_get_frequency(self) -> Optional[float]:
        return parse_frequency(self._values["frequency_text"])

    def try_build_record(self) -> Tuple[Optional[ChannelRecord], str]:
        """Return ``(record, "")`` or ``(None, reason)``.

        Checks run in order: all validators, frequency parse, colour code
        presence. The first failure wins.
        """
        if not self.validate_all():
            return None, MSG_FIX_ERRORS
        frequency = self.try_get_frequency()
        if frequency is None:
            return None, MSG_FREQUENCY_REQUIRED
        color_code = parse_color_code(self._values["color_code"])
        if color_code is None:
            return None, MSG_COLOR_CODE_REQUIRED
        values = self._values
        record = ChannelRecord(
            alias=str(values["alias"]).strip(),
            frequency_mhz=frequency,
            rx_only=bool(values["rx_only"]),
            color_code=color_code,
            timeslot=values["timeslot"],
            talk_group=str(values["talk_group"]).strip(),
            contact=str(values["contact"]).strip(),
            power=values["power"],
            zone=str(values["zone"]).strip(),
            notes=str(values["notes"] or "").strip(),
        )
        return record, ""

    def load_record(self, record: ChannelRecord) -> None:
        """Populate the form from an existing channel for editing."""
        self.set_field("alias", record.alias)
        self.set_field("frequency_text", f"{record.frequency_mhz:.3f}")
        self.set_field("rx_only", record.rx_only)
        self.set_field("color_code", record.color_code)
        self.set_field("timeslot", record.timeslot)
        self.set_field("talk_group", record.talk_group)
        self.set_field("contact", record.contact)
        self.set_field("power", record.power)
        self.set_field("zone", record.zone)
        self.set_field("notes", record.notes)

    def default_zone(self) -> str:
        if self._zone_provider is None:
            return ""
        zones = self._zone_provider()
        return zones[0] if zones else ""

    def reset(self) -> None:
        """Restore defaults and clear every error."""
        self._values = _defaults()
        self._values["zone"] = self.default_zone()
        cleared = list(self._errors)
        self._errors.clear()
        for name in cleared:
            self.errorsChanged.emit(name)
        for name in FORM_FIELDS:
            self.fieldChanged.emit(name)
        logger.debug("channel form reset (zone=%r)", self._values["zone"])


__all__ = ["ChannelFormState", "FORM_FIELDS"]
