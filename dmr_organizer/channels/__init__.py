"""Channel catalog engine."""

from .exceptions import (
    ChannelCatalogError,
    ChannelNotFound,
    ChannelPersistenceError,
    DuplicateChannel,
    ExportFailed,
    ImportFailed,
    UnsupportedFormat,
)
from .form_state import ChannelFormState
from .models import ChannelPayload, ChannelRecord
from .persistence import ChannelExportFormat, ChannelPersistenceService
from .store import ChannelCatalogStore
from .view import ChannelQuery, ChannelView, compute

__all__ = [
    "ChannelCatalogError",
    "ChannelCatalogStore",
    "ChannelExportFormat",
    "ChannelFormState",
    "ChannelNotFound",
    "ChannelPayload",
    "ChannelPersistenceError",
    "ChannelPersistenceService",
    "ChannelQuery",
    "ChannelRecord",
    "ChannelView",
    "DuplicateChannel",
    "ExportFailed",
    "ImportFailed",
    "UnsupportedFormat",
    "compute",
]
