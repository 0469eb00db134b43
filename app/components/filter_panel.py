"""Filter panel for the VMs tab.

Edits a draft copy of the applied filters. Apply commits the draft in one
step; Cancel throws it away and leaves the table untouched.
"""

import streamlit as st

from config.constants import READINESS_LABELS, get_status_label
from src.inventory.facets import FacetOptions
from src.inventory.filter_store import ISSUES_FLAG_HAS, ISSUES_FLAG_NONE

from .state import get_draft_generation, get_filter_store, open_filter_draft


def _checkbox(label: str, value: bool, key: str, on_change, *args) -> None:
    st.checkbox(label, value=value, key=key, on_change=on_change, args=args)


def render_filter_panel(facets: FacetOptions, key: str = "vm_filters") -> None:
    """
    Render the filter toggle button and, when open, the draft editor.

    Args:
        facets: Option lists for the current inventory.
        key: Unique key prefix for widgets.
    """
    store = get_filter_store()

    if not store.is_draft_open:
        st.button("Filters", key=f"{key}_open", icon=":material/filter_list:", on_click=open_filter_draft)
        return

    draft = store.draft
    prefix = f"{key}_{get_draft_generation()}"

    with st.container(border=True):
        cols = st.columns(7)

        with cols[0]:
            st.markdown("**Issues**")
            _checkbox("No issues", draft.no_issues, f"{prefix}_no_issues",
                      store.toggle_draft_issues, ISSUES_FLAG_NONE)
            _checkbox("Has issues", draft.has_issues, f"{prefix}_has_issues",
                      store.toggle_draft_issues, ISSUES_FLAG_HAS)

        with cols[1]:
            st.markdown("**Data center**")
            for datacenter in facets.datacenters:
                _checkbox(datacenter, datacenter in draft.datacenters,
                          f"{prefix}_dc_{datacenter}", store.toggle_draft_datacenter, datacenter)

        with cols[2]:
            st.markdown("**Cluster**")
            for cluster in facets.clusters:
                _checkbox(cluster, cluster in draft.clusters,
                          f"{prefix}_cluster_{cluster}", store.toggle_draft_cluster, cluster)

        with cols[3]:
            st.markdown("**Disk size**")
            for option in facets.disk_ranges:
                _checkbox(option.label, draft.disk_range == option.range,
                          f"{prefix}_disk_{option.label}", store.toggle_draft_disk_range, option.range)

        with cols[4]:
            st.markdown("**Memory size**")
            for option in facets.memory_ranges:
                _checkbox(option.label, draft.memory_range == option.range,
                          f"{prefix}_mem_{option.label}", store.toggle_draft_memory_range, option.range)

        with cols[5]:
            st.markdown("**Status**")
            for status in facets.statuses:
                _checkbox(get_status_label(status), status in draft.statuses,
                          f"{prefix}_status_{status}", store.toggle_draft_status, status)

        with cols[6]:
            st.markdown("**Migration Readiness**")
            for readiness in facets.migration_readiness:
                _checkbox(READINESS_LABELS.get(readiness, readiness),
                          readiness in draft.migration_readiness,
                          f"{prefix}_ready_{readiness}",
                          store.toggle_draft_migration_readiness, readiness)

        apply_col, cancel_col, _ = st.columns([1, 1, 8])
        with apply_col:
            st.button("Apply filters", key=f"{prefix}_apply", type="primary", on_click=store.commit)
        with cancel_col:
            st.button("Cancel", key=f"{prefix}_cancel", on_click=store.cancel)
