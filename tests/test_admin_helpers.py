from datetime import date

from admin.views import helpers
from admin.views.helpers import ALL_TYPES, stall_table_rows, status_counts, type_filter_value

TODAY = date(2024, 6, 10)

STALLS = [
    {"id": "stall-1", "name": "Stall 1", "vendor": "A", "type": "Fish", "monthlyRent": 100.456,
     "nextDue": "2024-06-01", "occupied": True},
    {"id": "stall-2", "name": "Stall 2", "vendor": "B", "type": "Fish", "nextDue": "2024-06-12", "occupied": True},
    {"id": "stall-3", "name": "Stall 1", "vendor": "", "type": "Meat", "occupied": False},
]


def test_type_filter_value():
    assert type_filter_value(ALL_TYPES) is None
    assert type_filter_value("Fish") == "Fish"


def test_status_counts():
    assert status_counts(STALLS, TODAY) == {"current": 0, "due": 1, "overdue": 1, "vacant": 1}


def test_stall_table_rows():
    rows = stall_table_rows(STALLS, TODAY)
    assert rows[0]["Stall"] == "Stall 1 - A"
    assert rows[0]["Rent (₱)"] == 100.46
    assert rows[0]["Status"] == helpers.status_badge("overdue")
    assert rows[2]["Stall"] == "Stall 1"
