"""Session-scoped browser state for the VMs tab.

The FilterStore, its LocationSynchronizer and the sort order live in
Streamlit session state so they survive reruns. The synchronizer is polled at
the top of each run to pick up navigation from links or other tabs.
"""

from typing import Optional

import streamlit as st

from config import config
from config.config_loader import get_table_config
from config.logging_config import get_logger
from src.inventory.filter_store import FilterStore
from src.inventory.location_sync import LocationSynchronizer
from src.inventory.sorting import SortSpec

from .location import StreamlitLocation

logger = get_logger("app.state")

# Session state keys
STORE_KEY = "vm_filter_store"
SYNC_KEY = "vm_location_sync"
SORT_KEY = "vm_sort_spec"
DRAFT_GENERATION_KEY = "vm_draft_generation"


def _default_page_size() -> int:
    options = get_table_config().page_size_options
    size = config.app.default_page_size
    return size if size in options else get_table_config().default_page_size


def get_filter_store() -> FilterStore:
    """
    Get the filter store for this session, creating it on first use.

    Filters encoded in the URL at first load (with ``tab=vms``) become the
    initial applied filters.
    """
    if STORE_KEY not in st.session_state:
        location = StreamlitLocation()
        store = FilterStore(page_size=_default_page_size())
        sync = LocationSynchronizer(store, location)
        initial = sync.initial_filters()
        if initial is not None:
            store.replace_applied(initial)
            logger.info(f"Initial filters from URL: {initial.get_summary()}")
        st.session_state[STORE_KEY] = store
        st.session_state[SYNC_KEY] = sync

    return st.session_state[STORE_KEY]


def get_synchronizer() -> LocationSynchronizer:
    get_filter_store()
    return st.session_state[SYNC_KEY]


def sync_from_url() -> bool:
    """
    Apply URL changes made outside the store (links, chart clicks).

    Returns:
        True if the applied filters changed.
    """
    return get_synchronizer().poll()


def get_sort_spec() -> Optional[SortSpec]:
    return st.session_state.get(SORT_KEY)


def set_sort_spec(spec: Optional[SortSpec]) -> None:
    st.session_state[SORT_KEY] = spec


def get_draft_generation() -> int:
    """Counter used to give each opened draft fresh widget keys."""
    return st.session_state.get(DRAFT_GENERATION_KEY, 0)


def open_filter_draft() -> None:
    get_filter_store().open_draft()
    st.session_state[DRAFT_GENERATION_KEY] = get_draft_generation() + 1
