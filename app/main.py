"""
VM Inventory Browser - Main Streamlit Application

Run with: streamlit run app/main.py
"""

import streamlit as st
from pathlib import Path
import sys
from typing import List

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config, SCOPE_OVERVIEW, SCOPE_VMS
from config.logging_config import DEFAULT_LOG_FILE, get_logger, setup_logging
from src.inventory.facets import summarize_migration
from src.inventory.loader import AgentInventoryClient, InventoryFetchError, load_records_file
from src.inventory.models import VMRecord
from src.inventory.navigation import create_vm_filter_url
from src.inventory.pipeline import build_view

from app.components import (
    get_active_tab,
    get_filter_store,
    get_sort_spec,
    render_applied_filters,
    render_filter_panel,
    render_migration_chart,
    render_vm_table,
    set_active_tab,
    sync_from_url,
)

logger = get_logger("app")

TABS = {
    SCOPE_OVERVIEW: "Overview",
    SCOPE_VMS: "Virtual Machines",
}


@st.cache_data(ttl=300, show_spinner=False)
def load_inventory() -> List[VMRecord]:
    """Load records from the agent API, INVENTORY_FILE or the bundled sample."""
    if config.agent.enabled:
        with AgentInventoryClient() as client:
            return client.fetch_records()
    path = config.inventory.file_path or config.inventory.sample_path
    return load_records_file(path)


def main():
    """Main application entry point."""
    setup_logging(
        config.app.log_level,
        log_file=DEFAULT_LOG_FILE if config.app.log_to_file else None,
        log_to_console=True,
    )

    # Page configuration
    st.set_page_config(
        page_title=config.app.name,
        page_icon="🖥️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Pick up filter changes made through the URL before anything renders
    sync_from_url()

    # Sidebar
    with st.sidebar:
        st.title("🖥️ VM Inventory")
        st.caption(f"v{config.app.version}")

        st.divider()

        # Navigation
        st.subheader("Navigation")
        tab_keys = list(TABS.keys())
        active = get_active_tab(SCOPE_OVERVIEW)
        selected = st.radio(
            "Go to",
            options=tab_keys,
            index=tab_keys.index(active) if active in tab_keys else 0,
            format_func=TABS.get,
            label_visibility="collapsed",
        )
        if selected != active:
            set_active_tab(selected)
            st.rerun()

        st.divider()

        st.subheader("Inventory Source")
        if config.agent.enabled:
            st.caption(f"Agent: {config.agent.base_url}")
        else:
            path = config.inventory.file_path or config.inventory.sample_path
            st.caption(f"File: {Path(path).name}")
        if st.button("🔄 Reload inventory"):
            load_inventory.clear()
            st.rerun()

    # Main content area
    st.title(TABS[selected])

    try:
        with st.spinner("Loading inventory..."):
            records = load_inventory()
    except InventoryFetchError as e:
        logger.error(f"Inventory load failed: {e}")
        st.error(f"Could not load inventory: {e}")
        return

    if selected == SCOPE_VMS:
        render_vms_tab(records)
    else:
        render_overview_tab(records)


def render_overview_tab(records: List[VMRecord]):
    """Render the overview tab."""
    summary = summarize_migration(records)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total VMs", f"{summary.total:,}")
    with col2:
        st.metric("Migratable", f"{summary.migratable:,}")
    with col3:
        st.metric("With issues", f"{summary.with_issues:,}")

    render_migration_chart(summary)


def render_vms_tab(records: List[VMRecord]):
    """Render the VM table with its filter panel and chips."""
    store = get_filter_store()

    search_col, filter_col = st.columns([3, 1])
    with search_col:
        search = st.text_input(
            "Search",
            value=store.applied.search,
            placeholder="Search by name",
            label_visibility="collapsed",
        )
        if search != store.applied.search:
            store.set_search(search)

    view = build_view(records, store.applied, get_sort_spec(), store.page_state)

    with filter_col:
        st.caption(f"{view.total_count:,} of {len(records):,} VMs")

    render_filter_panel(view.facets)
    render_applied_filters(view.entries)

    if view.entries:
        with st.expander("Share this view"):
            st.code(create_vm_filter_url(store.applied, config.app.base_path), language=None)

    vm_id = render_vm_table(view)
    if vm_id:
        render_vm_details(records, vm_id)


def render_vm_details(records: List[VMRecord], vm_id: str):
    """Show the clicked VM."""
    record = next((r for r in records if r.id == vm_id), None)
    if record is None:
        return
    with st.expander(f"VM: {record.name or record.id}", expanded=True):
        st.json(
            {
                "id": record.id,
                "name": record.name,
                "vCenterState": record.state,
                "datacenter": record.datacenter,
                "cluster": record.cluster,
                "diskSize": record.disk_size,
                "memory": record.memory,
                "issues": record.issue_count,
                "migratable": record.migratable,
            }
        )


if __name__ == "__main__":
    main()
