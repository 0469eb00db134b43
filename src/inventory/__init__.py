"""Faceted filter, sort and paginate engine for the VM inventory table."""

from .models import VMRecord, SizeRange, AppliedFilters, DraftFilters
from .predicate import matches, filter_records
from .sorting import SortColumn, SortDirection, SortSpec, sort_records, toggle_sort
from .pagination import PageState, paginate
from .facets import (
    FacetOptions,
    RangeOption,
    MigrationSummary,
    extract_facets,
    available_clusters,
    available_datacenters,
    summarize_migration,
)
from .filter_store import FilterStore
from .query_codec import (
    encode_filters,
    decode_filters,
    encode_query,
    decode_query,
)
from .location_sync import Location, MemoryLocation, LocationSynchronizer
from .chips import (
    AppliedFilterEntry,
    applied_filter_entries,
    format_disk_size,
    format_memory_size,
)
from .navigation import create_vm_filter_url, filters_for_segment, navigate_to_vms
from .pipeline import InventoryView, build_view, visible_records

__all__ = [
    # Models
    "VMRecord",
    "SizeRange",
    "AppliedFilters",
    "DraftFilters",
    # Predicate
    "matches",
    "filter_records",
    # Sorting
    "SortColumn",
    "SortDirection",
    "SortSpec",
    "sort_records",
    "toggle_sort",
    # Pagination
    "PageState",
    "paginate",
    # Facets
    "FacetOptions",
    "RangeOption",
    "MigrationSummary",
    "extract_facets",
    "available_clusters",
    "available_datacenters",
    "summarize_migration",
    # State
    "FilterStore",
    # Serialization and sync
    "encode_filters",
    "decode_filters",
    "encode_query",
    "decode_query",
    "Location",
    "MemoryLocation",
    "LocationSynchronizer",
    # Chips
    "AppliedFilterEntry",
    "applied_filter_entries",
    "format_disk_size",
    "format_memory_size",
    # Navigation
    "create_vm_filter_url",
    "filters_for_segment",
    "navigate_to_vms",
    # Pipeline
    "InventoryView",
    "build_view",
    "visible_records",
]
