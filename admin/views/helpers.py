# admin/views/helpers.py
"""
Shared helpers for admin pages: status labels, table rows and UI blocks.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

import streamlit as st

from services.catalog import derive_status, format_stall_display
from services.utils import StallNumbers, format_stall_id, format_stall_name, next_stall_numbers

ALL_TYPES = "All types"

STATUS_BADGES = {
    "current": "🟢 current",
    "due": "🟡 due",
    "overdue": "🔴 overdue",
    "vacant": "⚪ vacant",
}


# ---------------- Small helpers ----------------
def status_badge(status: str) -> str:
    """Return a display label for a stall status."""
    return STATUS_BADGES.get(status, status)


def type_filter_value(choice: str) -> Optional[str]:
    """Map the type selector choice to an allocator filter (None = all)."""
    return None if choice == ALL_TYPES else choice


def stall_table_rows(stalls: List[Dict[str, Any]], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Rows for st.dataframe."""
    return [
        {
            "ID": s.get("id", ""),
            "Stall": format_stall_display(s),
            "Type": s.get("type", ""),
            "Contact": s.get("contact", ""),
            "Rent (₱)": round(float(s.get("monthlyRent") or 0.0), 2),
            "Next Due": s.get("nextDue", ""),
            "Status": status_badge(derive_status(s, today)),
        }
        for s in stalls
    ]


def status_counts(stalls: List[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, int]:
    """Number of stalls per derived status."""
    counts = {k: 0 for k in STATUS_BADGES}
    for s in stalls:
        status = derive_status(s, today)
        counts[status] = counts.get(status, 0) + 1
    return counts


# ---------------- UI blocks ----------------
def next_numbers_block(stalls: List[Dict[str, Any]], stall_type: Optional[str]) -> StallNumbers:
    """Show the suggested id and name for the next stall."""
    numbers = next_stall_numbers(stalls, stall_type)
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Next ID", format_stall_id(numbers.next_id_number))
    with c2:
        label = f"Next name ({stall_type})" if stall_type else "Next name"
        st.metric(label, format_stall_name(numbers.next_name_number))
    st.caption("Suggestions only. The database assigns the final ID on save.")
    return numbers
