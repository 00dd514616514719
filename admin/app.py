# admin/app.py
"""
Streamlit entrypoint for the Admin Panel.

Run from project root:
    streamlit run admin/app.py --server.port 8502 --server.address 127.0.0.1

Authentication:
- Use ADMIN_PASSWORD in .streamlit/secrets.toml
  or an environment variable ADMIN_PASSWORD.
"""

# Add project root to sys.path so "admin", "services" and "stalls" imports resolve
import logging
import os
import sys

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import streamlit as st
from admin.views import admin_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def check_admin_password() -> bool:
    """Return True if admin is authenticated; otherwise show a login form."""
    secret_pw = st.secrets.get("ADMIN_PASSWORD", os.environ.get("ADMIN_PASSWORD"))
    if not secret_pw:
        return True

    if st.session_state.get("admin_auth_ok"):
        return True

    st.title("🛠️ Admin Login")
    pw = st.text_input("Admin Password", type="password", placeholder="Enter admin password…")
    if st.button("Sign in"):
        st.session_state.admin_auth_ok = pw == str(secret_pw)
        if not st.session_state.admin_auth_ok:
            st.error("Incorrect password.")
        else:
            st.rerun()
    return False


st.set_page_config(page_title="Stall Registration Admin", page_icon="🛠️", layout="wide")

# Auth gate
if not check_admin_password():
    st.stop()

hdr_c, hdr_r = st.columns([6, 1])
with hdr_c:
    st.title("🛠️ Admin Panel")
with hdr_r:
    if st.button("Log out"):
        st.session_state.pop("admin_auth_ok", None)
        st.rerun()

st.markdown("---")

choice = st.radio(
    "Choose an action",
    ["Stall directory", "Add stall"],
    horizontal=True,
)

try:
    admin_router(choice)
except Exception as e:  # noqa: BLE001
    st.exception(e)
    st.error("admin_router(choice) raised an error. Please check admin/views/*.py.")
