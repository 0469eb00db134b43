"""Applied filter chips with per-chip removal and a clear-all action."""

from typing import List

import streamlit as st

from src.inventory.chips import AppliedFilterEntry

from .state import get_filter_store


def render_applied_filters(entries: List[AppliedFilterEntry], key: str = "vm_chips") -> None:
    """
    Render one removable chip per applied filter value.

    Args:
        entries: Entries from the current view.
        key: Unique key prefix for widgets.
    """
    if not entries:
        return

    store = get_filter_store()
    st.caption(f"{len(entries)} filter{'s' if len(entries) != 1 else ''} applied")

    cols = st.columns(min(len(entries), 6) + 1)
    for i, entry in enumerate(entries):
        with cols[i % (len(cols) - 1)]:
            st.button(
                f"{entry.category}: {entry.label} ✕",
                key=f"{key}_{entry.key}",
                help=f"Remove {entry.category.lower()} filter",
                on_click=store.remove_applied_entry,
                args=(entry.key,),
            )

    with cols[-1]:
        st.button("Clear all filters", key=f"{key}_clear", type="tertiary", on_click=store.clear_all)
