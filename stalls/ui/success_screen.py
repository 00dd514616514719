"""Success screen shown after a registration: QR code and receipt."""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional
import streamlit as st

from services.qr_code import make_qr_png, to_data_url
from stalls.exporters import export_receipt
from .registration_form import PUBLIC_STATE_KEY, qr_key, reset_form

logger = logging.getLogger(__name__)


def _qr_png(submitted: Dict[str, Any], state_key: str) -> Optional[bytes]:
    """QR image for the submission, generated once per registration."""
    ss = st.session_state
    key = qr_key(state_key)
    if ss.get(key) is None:
        try:
            ss[key] = make_qr_png(submitted)
        except Exception as e:  # noqa: BLE001
            logger.exception("QR generation failed")
            st.error(f"Could not generate QR code: {e}")
            return None
    return ss[key]


def success_screen(submitted: Dict[str, Any], state_key: str = PUBLIC_STATE_KEY) -> None:
    st.success("Registration Successful!")
    st.caption("Thank you for registering. Please present this QR code for verification.")

    png = _qr_png(submitted, state_key)
    _, mid, _ = st.columns([1, 2, 1])
    with mid:
        if png:
            st.image(png, width=220, caption=submitted.get("name") or None)
        else:
            st.write("Generating QR code...")

        export_receipt(submitted, to_data_url(png) if png else None)
        st.button(
            "Register Another Stall",
            on_click=reset_form,
            args=(state_key,),
            key=f"{state_key}_register_another",
            use_container_width=True,
        )
