"""Reusable UI components for the VM Inventory Browser."""

from .state import (
    get_filter_store,
    get_synchronizer,
    sync_from_url,
    get_sort_spec,
    set_sort_spec,
)
from .location import StreamlitLocation, get_active_tab, set_active_tab
from .filter_panel import render_filter_panel
from .applied_filters import render_applied_filters
from .vm_table import render_vm_table
from .migration_chart import render_migration_chart, open_segment

__all__ = [
    "get_filter_store",
    "get_synchronizer",
    "sync_from_url",
    "get_sort_spec",
    "set_sort_spec",
    "StreamlitLocation",
    "get_active_tab",
    "set_active_tab",
    "render_filter_panel",
    "render_applied_filters",
    "render_vm_table",
    "render_migration_chart",
    "open_segment",
]
