from __future__ import annotations

import os

# Qt requires a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from dmr_organizer.channels.models import ChannelRecord
from dmr_organizer.channels.store import ChannelCatalogStore


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep autosave snapshots and app.ini out of the real user profile."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv("DMR_ORGANIZER_DATA_DIR", str(data_dir))
    monkeypatch.delenv("DMR_ORGANIZER_AUTOSAVE", raising=False)
    monkeypatch.delenv("DMR_ORGANIZER_SEED_SAMPLES", raising=False)
    return data_dir


def make_channel(**overrides) -> ChannelRecord:
    values = dict(
        alias="A",
        rx_only=False,
        frequency_mhz=443.600,
        color_code=1,
        timeslot="1",
        talk_group="Local",
        contact="TG91",
        power="High",
        zone="Z1",
        notes="",
    )
    values.update(overrides)
    return ChannelRecord(**values)


@pytest.fixture
def channel_factory():
    return make_channel


@pytest.fixture
def store():
    return ChannelCatalogStore()


@pytest.fixture
def sample_catalog():
    return [
        make_channel(alias="City Center", frequency_mhz=443.6, zone="City Repeaters", contact="TG 91"),
        make_channel(
            alias="Highway Link",
            frequency_mhz=442.725,
            color_code=4,
            timeslot="XPT",
            talk_group="Regional",
            contact="TG 3000",
            zone="Highways",
            notes='Says "hi", then\nwraps',
        ),
        make_channel(
            alias="Valley Simplex",
            frequency_mhz=145.5,
            color_code=0,
            timeslot="2",
            talk_group="Simplex",
            contact="TG 99",
            power="Low",
            zone="",
            rx_only=True,
            notes="Monitor, only",
        ),
    ]
