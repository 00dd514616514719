from datetime import date

from services.catalog import (
    BASE_TYPE_OPTIONS,
    canonical_type,
    create_initial_stalls,
    derive_status,
    format_stall_display,
    type_options,
)

TODAY = date(2024, 6, 10)


def test_initial_stalls_empty():
    assert create_initial_stalls() == []


def test_format_stall_display():
    assert format_stall_display({"name": "Stall 3", "vendor": "Maria"}) == "Stall 3 - Maria"
    assert format_stall_display({"name": "Stall 3", "vendor": ""}) == "Stall 3"


def test_derive_status_vacant():
    assert derive_status({"occupied": False, "nextDue": "2020-01-01"}, TODAY) == "vacant"


def test_derive_status_by_due_date():
    assert derive_status({"occupied": True, "nextDue": "2024-06-09"}, TODAY) == "overdue"
    assert derive_status({"occupied": True, "nextDue": "2024-06-10"}, TODAY) == "due"
    assert derive_status({"occupied": True, "nextDue": "2024-06-17"}, TODAY) == "due"
    assert derive_status({"occupied": True, "nextDue": "2024-06-18"}, TODAY) == "current"


def test_derive_status_without_due_date_keeps_stored():
    assert derive_status({"occupied": True, "status": "due", "nextDue": ""}, TODAY) == "due"
    assert derive_status({"occupied": True, "status": "weird", "nextDue": "soon"}, TODAY) == "current"


def test_type_options_appends_unknown_types():
    options = type_options([{"type": "fish"}, {"type": "Flowers"}, {"type": " flowers "}, {"type": ""}])
    assert options[: len(BASE_TYPE_OPTIONS)] == BASE_TYPE_OPTIONS
    assert options[len(BASE_TYPE_OPTIONS):] == ["Flowers"]


def test_canonical_type():
    assert canonical_type(" fish ") == "Fish"
    assert canonical_type("Flowers") is None
    assert canonical_type("flowers", ["Flowers"]) == "Flowers"
    assert canonical_type("") is None
