"""Stall repository - maps vendor rows to stall records and queries them."""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from ..catalog import STALL_STATUSES
from ..utils.id_generator import format_stall_id, format_stall_name, normalize_type


class StallRepository:
    """Manages stall record lookups over vendor rows."""

    @staticmethod
    def from_row(row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Convert a database row into a stall record.

        Returns:
            Stall record dict, or None when the row has no integer id
        """
        try:
            db_id = int(row.get("id"))
        except (TypeError, ValueError):
            return None

        try:
            rent = float(row.get("monthly_rent") or 0.0)
        except (TypeError, ValueError):
            rent = 0.0

        vendor = str(row.get("vendor") or "").strip()
        status = row.get("status")
        if status not in STALL_STATUSES:
            status = "current"

        return {
            "id": format_stall_id(db_id),
            "dbId": db_id,
            "name": str(row.get("name") or "").strip() or format_stall_name(db_id),
            "vendor": vendor,
            "contact": str(row.get("contact") or ""),
            "type": str(row.get("type") or ""),
            "monthlyRent": rent,
            "lastPayment": row.get("last_payment") or "",
            "nextDue": row.get("next_due") or "",
            "status": status,
            "occupied": bool(vendor),
        }

    @staticmethod
    def list_all(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Convert rows to stall records, sorted by database id."""
        stalls = []
        for row in rows or []:
            if not isinstance(row, dict):
                continue
            stall = StallRepository.from_row(row)
            if stall is not None:
                stalls.append(stall)
        return sorted(stalls, key=lambda s: s["dbId"])

    @staticmethod
    def get_by_id(stalls: List[Dict[str, Any]], stall_id: str) -> Optional[Dict[str, Any]]:
        """Get stall by its 'stall-<n>' id."""
        for s in stalls:
            if str(s.get("id", "")) == str(stall_id):
                return s
        return None

    @staticmethod
    def filter_by_type(stalls: List[Dict[str, Any]], stall_type: Optional[str]) -> List[Dict[str, Any]]:
        """Stalls of one type (trimmed, case-insensitive). None keeps all."""
        if stall_type is None:
            return list(stalls)
        wanted = normalize_type(stall_type)
        return [s for s in stalls if normalize_type(s.get("type")) == wanted]

    @staticmethod
    def search(stalls: List[Dict[str, Any]], text: str) -> List[Dict[str, Any]]:
        """Case-insensitive match on name, vendor or contact."""
        needle = (text or "").strip().casefold()
        if not needle:
            return list(stalls)
        return [
            s for s in stalls
            if any(needle in str(s.get(k, "")).casefold() for k in ("name", "vendor", "contact"))
        ]
