"""Excel export of the stall directory."""

from __future__ import annotations
from io import BytesIO
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import pandas as pd
import streamlit as st

from services.catalog import derive_status
from services.utils import slugify

COLUMNS = ["ID", "Stall", "Vendor", "Contact", "Type", "Monthly Rent", "Last Payment", "Next Due", "Status"]


def stalls_to_frame(stalls: List[Dict[str, Any]], today: Optional[date] = None) -> pd.DataFrame:
    """One row per stall, with the displayed status."""
    rows = [
        {
            "ID": s.get("id", ""),
            "Stall": s.get("name", ""),
            "Vendor": s.get("vendor", ""),
            "Contact": s.get("contact", ""),
            "Type": s.get("type", ""),
            "Monthly Rent": float(s.get("monthlyRent") or 0.0),
            "Last Payment": s.get("lastPayment", ""),
            "Next Due": s.get("nextDue", ""),
            "Status": derive_status(s, today),
        }
        for s in stalls
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def export_to_excel(stalls: List[Dict[str, Any]], title: str) -> None:
    """Render Excel download button."""
    buf = BytesIO()
    export_id = datetime.now().strftime("%Y%m%d-%H%M%S")

    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = stalls_to_frame(stalls)
        df.to_excel(xw, index=False, sheet_name="Stalls")
        ws = xw.sheets["Stalls"]
        ws.set_column(0, 1, 12)
        ws.set_column(2, 2, 28)
        ws.set_column(3, 8, 14)

    st.download_button(
        "Download Excel",
        data=buf.getvalue(),
        file_name=f"stalls_{slugify(title)}_{export_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
