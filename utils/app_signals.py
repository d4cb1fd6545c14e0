from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class AppSignals(QObject):
    """Global Qt signals for app-wide events.

    Windows can subscribe to these to show non-blocking notices.
    """

    # Emitted after an import merged channels into the catalog; provides the count added
    catalogImported = Signal(int)
    # Emitted when writing the autosave snapshot failed; provides the error text
    autosaveFailed = Signal(str)


# Global singleton instance
app_signals = AppSignals()


__all__ = ["app_signals", "AppSignals"]
