"""
Streamlit entrypoint for Stall Registration.
- Main screen shows the vendor registration form -> QR code + receipt
- Sidebar has an Admin Login -> if correct, jump to Admin Panel
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from stalls.ui import (
    ADMIN_STATE_KEY,
    PUBLIC_STATE_KEY,
    clear_submission,
    registration_form,
    store_submission,
    success_screen,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

LOGO_PATH = ROOT / "assets" / "logo.png"

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Stall Registration", layout="centered")
st.markdown("<style>.stImage img { border-radius: 0 !important; }</style>", unsafe_allow_html=True)


def _logo() -> None:
    if LOGO_PATH.exists():
        st.image(str(LOGO_PATH), width=140)


# -----------------------------------------------------------------------------
# Passwords
# -----------------------------------------------------------------------------
ADMIN_PASSWORD = st.secrets.get("ADMIN_PASSWORD", os.environ.get("ADMIN_PASSWORD"))


def _logout_admin() -> None:
    # also empties the shared form inputs
    st.session_state.is_admin = False
    clear_submission(st.session_state, ADMIN_STATE_KEY)


# =============================
# Admin Login + Admin Panel
# =============================
st.sidebar.markdown("### Admin Login")
if "is_admin" not in st.session_state:
    st.session_state.is_admin = False

if not st.session_state.is_admin:
    admin_pw = st.sidebar.text_input("Password", type="password", placeholder="••••••••", key="admin_pw")
    if st.sidebar.button("Login", use_container_width=True, key="admin_login_btn"):
        if ADMIN_PASSWORD and admin_pw == str(ADMIN_PASSWORD):
            st.session_state.is_admin = True
            st.sidebar.success("✅ Admin access granted")
            st.rerun()
        else:
            st.sidebar.error("❌ Wrong password")
else:
    st.sidebar.success("🟢 Logged in as Admin")
    st.sidebar.button(
        "Logout Admin",
        use_container_width=True,
        key="admin_logout_btn",
        on_click=_logout_admin,
    )

if st.session_state.is_admin:
    _logo()
    st.title("🛠️ Admin Panel")

    choice = st.sidebar.radio(
        "Admin Pages",
        options=["Stall directory", "Add stall"],
        index=0,
        key="admin_page_choice",
    )

    try:
        from admin.views import admin_router
        admin_router(choice)
    except Exception as e:  # noqa: BLE001
        st.error("Admin views are not available.")
        st.exception(e)

    st.stop()  # registration form is not rendered in admin mode

# -----------------------------------------------------------------------------
# Registration (public)
# -----------------------------------------------------------------------------
_logo()

if st.session_state.get(PUBLIC_STATE_KEY):
    success_screen(st.session_state[PUBLIC_STATE_KEY], PUBLIC_STATE_KEY)
    st.stop()

st.title("Stall Registration")
record = registration_form()
if record:
    store_submission(st.session_state, PUBLIC_STATE_KEY, record)
    st.rerun()
