"""JSON reader/writer for channel catalogs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from pydantic import TypeAdapter

from ..models import ChannelPayload, ChannelRecord

_PAYLOAD_LIST = TypeAdapter(List[ChannelPayload])


def export_channels(channels: Iterable[ChannelRecord], path: Path) -> Path:
    path = Path(path)
    payload = [
        ChannelPayload.model_validate(channel.values()).model_dump(by_alias=True)
        for channel in channels
    ]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def read_channels(path: Path) -> List[ChannelRecord]:
    """Read channels; a ``null`` document yields an empty list.

    Raises ``ValueError`` (``json.JSONDecodeError`` or pydantic's
    ``ValidationError``) when the document is not a list of channels.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8-sig"))
    if data is None:
        return []
    return [item.to_record() for item in _PAYLOAD_LIST.validate_python(data)]


__all__ = ["export_channels", "read_channels"]
