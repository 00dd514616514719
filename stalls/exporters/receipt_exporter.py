"""Printable registration receipt."""

from __future__ import annotations
from datetime import date, datetime
from html import escape
from typing import Any, Dict, List, Optional, Tuple
import streamlit as st
import streamlit.components.v1 as components

from services.utils import slugify

MARKET_TITLE = "SIBULAN MARKET PAY"


def receipt_rows(submitted: Dict[str, Any], issued: date) -> List[Tuple[str, str]]:
    """Label/value lines printed on the receipt."""
    rows: List[Tuple[str, str]] = []
    if submitted.get("name"):
        rows.append(("Stall", str(submitted["name"])))
    rows += [
        ("Vendor", str(submitted.get("vendor") or "")),
        ("Contact", str(submitted.get("contact") or "")),
        ("Stall Type", str(submitted.get("type") or "")),
        ("Monthly Rent", f"₱{float(submitted.get('monthlyRent') or 0):,.2f}"),
        ("Date Registered", issued.strftime("%Y-%m-%d")),
        ("Next Due", str(submitted.get("next_due") or "N/A")),
    ]
    return rows


def receipt_filename(submitted: Dict[str, Any]) -> str:
    return f"stall-receipt-{slugify(str(submitted.get('vendor') or ''))}.html"


def generate_receipt_html(
    submitted: Dict[str, Any],
    qr_data_url: Optional[str],
    issued: Optional[date] = None,
    auto_print: bool = False,
) -> str:
    """Build the A4 receipt page."""
    issued = issued or datetime.now().date()
    rows_html = "".join(
        f"<tr><th>{escape(k)}</th><td>{escape(v)}</td></tr>"
        for k, v in receipt_rows(submitted, issued)
    )
    qr_html = (
        f"<div class='qr'><div>QR Code:</div><img src='{escape(qr_data_url)}' alt='QR Code' /></div>"
        if qr_data_url else ""
    )
    script = "<script>window.onload = () => window.print();</script>" if auto_print else ""

    return f"""
    <html>
      <head>
        <meta charset="utf-8" />
        <title>Stall Registration Receipt - {escape(str(submitted.get('vendor') or ''))}</title>
        <style>
          body {{ font-family: Arial, sans-serif; padding: 18px; }}
          h1 {{ font-size: 20px; margin: 0 0 4px; text-align: center; }}
          h2 {{ font-size: 14px; margin: 0 0 18px; text-align: center; font-weight: normal; }}
          table {{ width: 100%; border-collapse: collapse; margin-bottom: 14px; }}
          th, td {{ border: 1px solid #ddd; padding: 6px 8px; font-size: 12px; text-align: left; }}
          th {{ background: #f5f5f5; width: 35%; }}
          .qr img {{ width: 180px; height: 180px; }}
          .thanks {{ text-align: center; font-size: 11px; margin-top: 18px; color: #444; }}
          @media print {{ @page {{ size: A4 portrait; margin: 12mm; }} }}
        </style>
      </head>
      <body>
        <h1>{MARKET_TITLE}</h1>
        <h2>Stall Registration Receipt</h2>
        <table><tbody>{rows_html}</tbody></table>
        {qr_html}
        <div class="thanks">Thank you for registering with Sibulan Market Pay!</div>
        {script}
      </body>
    </html>
    """


def export_receipt(submitted: Dict[str, Any], qr_data_url: Optional[str]) -> None:
    """Render download and print buttons for the receipt."""
    html = generate_receipt_html(submitted, qr_data_url)
    st.download_button(
        "Download Receipt",
        data=html.encode("utf-8"),
        file_name=receipt_filename(submitted),
        mime="text/html",
        use_container_width=True,
        disabled=not qr_data_url,
    )
    if st.button("Print Receipt", use_container_width=True, disabled=not qr_data_url):
        components.html(
            generate_receipt_html(submitted, qr_data_url, auto_print=True),
            height=0,
        )
        st.toast("Opening print dialog…", icon="🖨️")
