# services/catalog.py
"""
Stall catalog.
- Known stall types and statuses
- Display helpers for stall records
"""
from __future__ import annotations
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

STALL_STATUSES = ("current", "due", "overdue", "vacant")

BASE_TYPE_OPTIONS: List[str] = [
    "Vegetables",
    "Fish",
    "Meat",
    "Rice",
    "Grocery",
    "Clothing",
    "Others",
]

# nextDue within this many days counts as "due"
DUE_SOON_DAYS = 7


def create_initial_stalls() -> List[Dict[str, Any]]:
    """Starting collection before anything is loaded."""
    return []


def format_stall_display(stall: Dict[str, Any]) -> str:
    """'Stall 3 - Maria Santos', or just the name for a vacant stall."""
    vendor = stall.get("vendor")
    suffix = f" - {vendor}" if vendor else ""
    return f"{stall.get('name', '')}{suffix}"


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def derive_status(stall: Dict[str, Any], today: Optional[date] = None) -> str:
    """Payment status for display, based on occupancy and next due date."""
    if not stall.get("occupied", True):
        return "vacant"

    stored = stall.get("status")
    if stored not in STALL_STATUSES:
        stored = "current"

    due = _parse_date(stall.get("nextDue"))
    if due is None:
        return stored

    today = today or date.today()
    if due < today:
        return "overdue"
    if due <= today + timedelta(days=DUE_SOON_DAYS):
        return "due"
    return "current"


def type_options(stalls: Iterable[Dict[str, Any]] = ()) -> List[str]:
    """Base types first, then any other types found in the records."""
    options = list(BASE_TYPE_OPTIONS)
    seen = {o.casefold() for o in options}
    for stall in stalls:
        t = str(stall.get("type") or "").strip()
        if t and t.casefold() not in seen:
            seen.add(t.casefold())
            options.append(t)
    return options


def canonical_type(value: str, options: Optional[Iterable[str]] = None) -> Optional[str]:
    """Return the option matching value case-insensitively, or None."""
    wanted = (value or "").strip().casefold()
    if not wanted:
        return None
    for option in (options if options is not None else BASE_TYPE_OPTIONS):
        if option.strip().casefold() == wanted:
            return option
    return None
