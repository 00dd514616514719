import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services import config_manager
from services.storage import StorageManager, SupabaseError


class FakeRemote:
    """In-memory stand-in for SupabaseStorage."""

    def __init__(self, rows=None, available=True, fail_with=None):
        self.rows = list(rows or [])
        self.available = available
        self.fail_with = fail_with
        self.disabled = False
        self.inserted = []

    def is_available(self):
        return self.available and not self.disabled

    def disable(self):
        self.disabled = True

    def list_rows(self):
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.rows)

    def insert_row(self, payload):
        if self.fail_with is not None:
            raise self.fail_with
        row = dict(payload)
        row["id"] = max([r["id"] for r in self.rows] or [0]) + 1
        self.rows.append(row)
        self.inserted.append(row)
        return row


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_TABLE", "DISABLE_SUPABASE", "VENDORS_CACHE_PATH"):
        monkeypatch.delenv(name, raising=False)
    yield
    config_manager.set_storage(None)


@pytest.fixture
def vendor_rows():
    return [
        {
            "id": 1,
            "name": "Stall 1",
            "vendor": "Maria Santos",
            "contact": "09171234567",
            "type": "Fish",
            "monthly_rent": 1500,
            "last_payment": "2024-05-01",
            "next_due": "2024-06-01",
            "status": "current",
        },
        {
            "id": 2,
            "name": "Stall 1",
            "vendor": "Jose Reyes",
            "contact": "09181234567",
            "type": "Meat",
            "monthly_rent": "2000.50",
            "last_payment": "2024-05-10",
            "next_due": "2024-06-10",
            "status": "current",
        },
        {
            "id": 3,
            "name": "Stall 2",
            "vendor": "Ana Cruz",
            "contact": "09191234567",
            "type": "fish ",
            "monthly_rent": 1200,
            "last_payment": "2024-05-15",
            "next_due": "2024-06-15",
            "status": "current",
        },
    ]


@pytest.fixture
def stalls():
    return [
        {"id": "stall-2", "name": "Stall 3", "type": "Fish"},
        {"id": "stall-7", "name": "Stall 1", "type": "Meat"},
    ]


@pytest.fixture
def fake_remote(vendor_rows):
    return FakeRemote(vendor_rows)


@pytest.fixture
def storage(tmp_path, fake_remote):
    manager = StorageManager(local_path=tmp_path / "vendors.json", remote=fake_remote)
    config_manager.set_storage(manager)
    return manager


@pytest.fixture
def offline_storage(tmp_path):
    manager = StorageManager(local_path=tmp_path / "vendors.json", remote=FakeRemote(available=False))
    config_manager.set_storage(manager)
    return manager


@pytest.fixture
def failing_remote():
    return FakeRemote(fail_with=SupabaseError("Supabase insert failed (HTTP 500)"))
