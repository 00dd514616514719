# admin/views/stall_directory.py
"""
Admin • Stall Directory

Lists registered stalls with type and text filters, payment status and the
next free stall numbers, and exports the filtered list to Excel.
"""

from __future__ import annotations

import streamlit as st

from services.catalog import type_options
from services.config_manager import cache_mtime, get_last_warning, load_stalls
from services.repositories import StallRepository
from stalls.exporters import export_to_excel

from .helpers import (
    ALL_TYPES,
    next_numbers_block,
    stall_table_rows,
    status_badge,
    status_counts,
    type_filter_value,
)


def page_stall_directory():
    st.title("Admin • Stall Directory")

    stalls = load_stalls()
    warn = get_last_warning()
    if warn:
        st.info(warn)

    c1, c2 = st.columns([1, 2])
    with c1:
        choice = st.selectbox("Stall type", [ALL_TYPES] + type_options(stalls), key="dir_type")
    with c2:
        query = st.text_input("Search", placeholder="Stall name, vendor or contact", key="dir_query")

    stall_type = type_filter_value(choice)
    shown = StallRepository.search(StallRepository.filter_by_type(stalls, stall_type), query)

    counts = status_counts(shown)
    cols = st.columns(len(counts))
    for col, (status, n) in zip(cols, counts.items()):
        col.metric(status_badge(status), n)

    st.markdown("---")
    next_numbers_block(stalls, stall_type)
    st.markdown("---")

    if not shown:
        st.info("No stalls match the current filters.")
        return

    st.dataframe(stall_table_rows(shown), use_container_width=True, hide_index=True)
    st.caption(f"{len(shown)} of {len(stalls)} stalls • local cache updated {cache_mtime()}")

    export_to_excel(shown, choice)

    if st.button("🔄 Refresh"):
        st.rerun()
