# admin/views/add_stall.py
"""
Admin • Add Stall

Behavior
--------
- The numbering preview follows the Stall Type chosen in the form
- Same validation and persistence as the public form
- After save: show the stored record with its QR code and receipt
- The stored record lives under its own session key, apart from the public page
"""

from __future__ import annotations

import streamlit as st

from services.catalog import type_options
from services.config_manager import load_stalls
from stalls.ui import ADMIN_STATE_KEY, chosen_type, registration_form, store_submission, success_screen

from .helpers import next_numbers_block


def page_add_stall():
    st.title("Admin • Add Stall")

    ss = st.session_state
    if ss.get(ADMIN_STATE_KEY):
        success_screen(ss[ADMIN_STATE_KEY], ADMIN_STATE_KEY)
        return

    stalls = load_stalls()
    options = type_options(stalls)

    # the type selector is outside the form, so its value is current on every rerun
    preview_type = chosen_type(ss.get("reg_type"))
    if preview_type:
        next_numbers_block(stalls, preview_type)
    else:
        st.caption("Pick a stall type to preview the next stall number.")
    st.markdown("---")

    record = registration_form(options, key_prefix="admin_")
    if record:
        store_submission(ss, ADMIN_STATE_KEY, record)
        st.rerun()
