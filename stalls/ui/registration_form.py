"""
Registration Form UI Component
==============================

Vendor registration form: collects vendor, contact, stall type and monthly
rent, persists the registration and hands the stored record to the success
screen through session state.

Related Files:
- services/config_manager.py: register_vendor, load_stalls
- services/registration.py: validation rules
- stalls/ui/success_screen.py: QR code and receipt
"""

from __future__ import annotations
from typing import Any, Dict, List, MutableMapping, Optional
import streamlit as st

from services.catalog import type_options
from services.config_manager import get_last_warning, load_stalls, register_vendor
from services.registration import RegistrationError, ValidationError, sanitize_contact

TYPE_PLACEHOLDER = "Select type"

# session keys holding the stored record after a successful registration
PUBLIC_STATE_KEY = "submitted"
ADMIN_STATE_KEY = "admin_submitted"

FORM_DEFAULTS: Dict[str, Any] = {
    "reg_vendor": "",
    "reg_contact": "",
    "reg_type": TYPE_PLACEHOLDER,
    "reg_rent": 0.0,
}


def qr_key(state_key: str) -> str:
    return f"{state_key}_qr_png"


def chosen_type(choice: Any) -> Optional[str]:
    """Stall type picked in the selector, None while the placeholder is shown."""
    if choice in (None, "", TYPE_PLACEHOLDER):
        return None
    return str(choice)


def store_submission(state: MutableMapping[str, Any], state_key: str, record: Dict[str, Any]) -> None:
    state[state_key] = record
    state[qr_key(state_key)] = None


def clear_submission(state: MutableMapping[str, Any], state_key: str) -> None:
    """Drop the stored record and its QR code and empty the form inputs."""
    state.pop(state_key, None)
    state.pop(qr_key(state_key), None)
    for key, default in FORM_DEFAULTS.items():
        state[key] = default


def reset_form(state_key: str = PUBLIC_STATE_KEY) -> None:
    """Clear the submitted record and all form inputs."""
    clear_submission(st.session_state, state_key)


def _clean_contact() -> None:
    st.session_state.reg_contact = sanitize_contact(st.session_state.get("reg_contact"))


def registration_form(options: Optional[List[str]] = None, key_prefix: str = "") -> Optional[Dict[str, Any]]:
    """
    Render the registration form.

    Returns:
        Submitted record when a registration succeeded on this run, else None
    """
    ss = st.session_state
    for key, default in FORM_DEFAULTS.items():
        ss.setdefault(key, default)

    if options is None:
        options = type_options(load_stalls())

    warn = get_last_warning()
    if warn:
        st.info(warn)

    st.text_input("Vendor Name", key="reg_vendor")
    # outside the form so the digits-only filter applies as the user types
    st.text_input(
        "Contact Number",
        key="reg_contact",
        max_chars=11,
        placeholder="09xxxxxxxxx",
        on_change=_clean_contact,
    )

    # outside the form so callers can follow the chosen type before submit
    st.selectbox("Stall Type", [TYPE_PLACEHOLDER] + options, key="reg_type")

    with st.form(f"{key_prefix}registration_form", clear_on_submit=False):
        st.number_input(
            "Monthly Rent (PHP)",
            min_value=0.0,
            step=50.0,
            format="%.2f",
            key="reg_rent",
        )
        submitted = st.form_submit_button("Submit Registration", type="primary", use_container_width=True)

    if not submitted:
        return None

    form = {
        "vendor": ss.reg_vendor,
        "contact": ss.reg_contact,
        "type": chosen_type(ss.reg_type) or "",
        "monthlyRent": ss.reg_rent,
    }

    with st.spinner("Submitting..."):
        try:
            record = register_vendor(form)
        except ValidationError as e:
            for msg in e.messages:
                st.error(msg)
            return None
        except RegistrationError as e:
            st.error(str(e))
            return None

    st.toast("Registration successful!", icon="✅")
    return record
