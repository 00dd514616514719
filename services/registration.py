"""
Vendor registration.
- Validates and cleans the registration form
- Builds the row inserted into the vendors table
- Shapes the submitted record used by the QR code and the receipt
"""

from __future__ import annotations
import calendar
import math
import re
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .catalog import canonical_type, type_options
from .utils.id_generator import format_stall_id, format_stall_name, next_stall_numbers

CONTACT_PATTERN = re.compile(r"^09\d{9}$", re.ASCII)
CONTACT_MAX_DIGITS = 11
CONTACT_ERROR = "Please enter a valid 11-digit contact number starting with 09"


class RegistrationError(ValueError):
    """Raised when a registration cannot be completed."""


class ValidationError(RegistrationError):
    """Raised when form input is invalid. Holds every message."""

    def __init__(self, messages: List[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)


def sanitize_contact(value: Any) -> str:
    """Digits only, at most 11."""
    return re.sub(r"\D", "", str(value or ""), flags=re.ASCII)[:CONTACT_MAX_DIGITS]


def validate_form(
    form: Dict[str, Any],
    known_types: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Validate registration input.

    Args:
        form: Raw form values (vendor, contact, type, monthlyRent)
        known_types: Allowed stall types; defaults to the base types

    Returns:
        Cleaned dict with vendor, contact, type and monthlyRent (float)

    Raises:
        ValidationError: If any field is invalid
    """
    errors: List[str] = []

    vendor = str(form.get("vendor") or "").strip()
    if not vendor:
        errors.append("Vendor name is required.")

    contact = sanitize_contact(form.get("contact"))
    if not CONTACT_PATTERN.match(contact):
        errors.append(CONTACT_ERROR)

    raw_type = str(form.get("type") or "").strip()
    stall_type = canonical_type(raw_type, known_types if known_types is not None else type_options())
    if not raw_type:
        errors.append("Please select a stall type.")
    elif stall_type is None:
        errors.append(f"Unknown stall type: {raw_type}")

    raw_rent = form.get("monthlyRent")
    rent = 0.0
    if raw_rent not in (None, ""):
        try:
            rent = float(raw_rent)
        except (TypeError, ValueError):
            errors.append("Monthly rent must be a number.")
        else:
            if not math.isfinite(rent):
                errors.append("Monthly rent must be a number.")
            elif rent < 0:
                errors.append("Monthly rent cannot be negative.")

    if errors:
        raise ValidationError(errors)

    return {
        "vendor": vendor,
        "contact": contact,
        "type": stall_type,
        "monthlyRent": rent,
    }


def add_one_month(day: date) -> date:
    """Same day next month, clamped to the month's last day."""
    year = day.year + (1 if day.month == 12 else 0)
    month = 1 if day.month == 12 else day.month + 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def build_vendor_payload(
    cleaned: Dict[str, Any],
    stalls: Iterable[Dict[str, Any]],
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Build the row to insert for a validated registration.

    The display name is numbered within the stall type, from the given
    snapshot of stall records. The database assigns the id.
    """
    today = today or date.today()
    numbers = next_stall_numbers(stalls, cleaned["type"])

    return {
        "name": format_stall_name(numbers.next_name_number),
        "vendor": cleaned["vendor"],
        "contact": cleaned["contact"],
        "type": cleaned["type"],
        "monthly_rent": cleaned["monthlyRent"],
        "last_payment": today.isoformat(),
        "next_due": add_one_month(today).isoformat(),
        "status": "current",
    }


def to_submitted(row: Dict[str, Any], cleaned: Dict[str, Any]) -> Dict[str, Any]:
    """Finalized record as stored, for the QR code and receipt."""
    rent = row.get("monthly_rent")
    if rent is None:
        rent = cleaned.get("monthlyRent")
    try:
        rent = float(rent or 0)
    except (TypeError, ValueError):
        rent = 0.0

    db_id = row.get("id")
    try:
        stall_id = format_stall_id(db_id)
    except (TypeError, ValueError):
        stall_id = None

    return {
        "id": db_id,
        "stallId": stall_id,
        "name": row.get("name"),
        "vendor": row.get("vendor", cleaned.get("vendor")),
        "contact": row.get("contact", cleaned.get("contact")),
        "type": row.get("type", cleaned.get("type")),
        "monthlyRent": rent,
        "last_payment": row.get("last_payment"),
        "next_due": row.get("next_due"),
    }
