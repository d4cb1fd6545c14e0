"""Application settings used by the channel organizer.

The data directory defaults to the per-user data location reported by Qt
(``QStandardPaths``) and can be redirected with ``DMR_ORGANIZER_DATA_DIR``.
An optional ``app.ini`` in that directory may carry an ``[app]`` section
with ``autosave`` and ``seed_samples`` switches (``true/false/1/0``);
``DMR_ORGANIZER_AUTOSAVE`` / ``DMR_ORGANIZER_SEED_SAMPLES`` override them.
"""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from PySide6.QtCore import QStandardPaths

logger = logging.getLogger(__name__)

APP_DIR_NAME = "DMROrganizer"
AUTOSAVE_FILE_NAME = "autosave.csv"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def data_dir() -> Path:
    """Return the directory holding the autosave snapshot and ``app.ini``."""
    override = os.environ.get("DMR_ORGANIZER_DATA_DIR")
    if override:
        return Path(override)
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
    if location:
        return Path(location) / APP_DIR_NAME
    return Path("data")


def autosave_path() -> Path:
    return data_dir() / AUTOSAVE_FILE_NAME


def _read_ini_flag(key: str, default: bool) -> bool:
    ini_path = data_dir() / "app.ini"
    if not ini_path.exists():
        return default
    try:
        cp = configparser.ConfigParser()
        cp.read(ini_path, encoding="utf-8")
        raw = cp.get("app", key, fallback="").strip().lower()
    except configparser.Error as exc:
        logger.warning("ignoring unreadable settings file %s: %s", ini_path, exc)
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def _flag(key: str, default: bool) -> bool:
    raw = str(os.environ.get(f"DMR_ORGANIZER_{key.upper()}", "")).strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return _read_ini_flag(key, default)


def autosave_enabled() -> bool:
    return _flag("autosave", True)


def seed_samples_enabled() -> bool:
    return _flag("seed_samples", True)


__all__ = [
    "autosave_enabled",
    "autosave_path",
    "data_dir",
    "seed_samples_enabled",
]
