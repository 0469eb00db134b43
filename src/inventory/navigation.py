"""Click-through navigation to a pre-filtered VMs tab.

Charts and summary cards resolve a clicked segment to a filter delta and
navigate with it:

    filters = filters_for_segment("Migratable")
    url = create_vm_filter_url(filters)   # /report?migrationReadiness=ready&tab=vms
"""

from typing import Optional

from config.constants import (
    READINESS_NOT_READY,
    READINESS_READY,
    SCOPE_PARAM,
    SCOPE_VMS,
    SEGMENT_MIGRATABLE,
    SEGMENT_NON_MIGRATABLE,
    STATUS_LABELS,
)
from config.logging_config import get_logger
from src.inventory.facets import disk_range_options, memory_range_options
from src.inventory.models import AppliedFilters
from src.inventory.query_codec import encode_filters, encode_query

logger = get_logger("navigation")

SEGMENT_HAS_ISSUES = "Has issues"


def create_vm_filter_url(filters: AppliedFilters, base_path: str = "/report") -> str:
    """
    Create a URL that opens the VMs tab with the given filters.

    Args:
        filters: Filters to apply; usually a partial delta from a chart.
        base_path: Path of the report page.

    Returns:
        URL string with the filters and the ``tab=vms`` marker encoded.
    """
    return f"{base_path}?{encode_query(filters, scoped=True)}"


def filters_for_segment(segment: str) -> Optional[AppliedFilters]:
    """
    Resolve an aggregate chart segment to the filters it stands for.

    Args:
        segment: Segment name: "Migratable", "Non-Migratable", a power
            state key or label, "Has issues", or a disk/memory bucket label.

    Returns:
        The filter delta, or None for an unknown segment.
    """
    if segment == SEGMENT_MIGRATABLE:
        return AppliedFilters(migration_readiness=[READINESS_READY])
    if segment == SEGMENT_NON_MIGRATABLE:
        return AppliedFilters(migration_readiness=[READINESS_NOT_READY])
    if segment == SEGMENT_HAS_ISSUES:
        return AppliedFilters(has_issues=True)

    for state, label in STATUS_LABELS.items():
        if segment in (state, label):
            return AppliedFilters(statuses=[state])

    for option in disk_range_options():
        if option.label == segment:
            return AppliedFilters(disk_range=option.range)
    for option in memory_range_options():
        if option.label == segment:
            return AppliedFilters(memory_range=option.range)

    logger.debug(f"No filters for chart segment {segment!r}")
    return None


def navigate_to_vms(location, filters: AppliedFilters) -> None:
    """
    Point the location at the VMs tab with the given filters.

    The filter keys and scope marker replace the current parameters, so the
    VMs tab picks them up through its inbound synchronization.
    """
    params = encode_filters(filters)
    params[SCOPE_PARAM] = [SCOPE_VMS]
    location.replace(params)
