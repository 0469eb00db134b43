"""Applied-filter chips and size formatting for display."""

from dataclasses import dataclass
from typing import List, Optional

from config.constants import (
    CHIP_KEY_DISK,
    CHIP_KEY_HAS_ISSUES,
    CHIP_KEY_MEMORY,
    CHIP_KEY_SEARCH,
    CHIP_PREFIX_CLUSTER,
    CHIP_PREFIX_DATACENTER,
    CHIP_PREFIX_READINESS,
    CHIP_PREFIX_STATUS,
    MB_IN_GB,
    MB_IN_TB,
    READINESS_LABELS,
    get_status_label,
)
from src.inventory.facets import (
    RangeOption,
    disk_range_options,
    find_range_label,
    memory_range_options,
)
from src.inventory.models import AppliedFilters, SizeRange


@dataclass(frozen=True)
class AppliedFilterEntry:
    """One removable chip: a single active constraint."""

    category: str
    label: str
    key: str


def _format_units(size_mb: float, unit: int) -> str:
    value = size_mb / unit
    return f"{value:.0f}" if value % 1 == 0 else f"{value:.2f}"


def format_disk_size(size_mb: Optional[int]) -> str:
    """Disk size in TB from 1 TB upward, otherwise GB."""
    size_mb = size_mb or 0
    if size_mb >= MB_IN_TB:
        return f"{_format_units(size_mb, MB_IN_TB)} TB"
    return f"{_format_units(size_mb, MB_IN_GB)} GB"


def format_memory_size(size_mb: Optional[int]) -> str:
    return f"{_format_units(size_mb or 0, MB_IN_GB)} GB"


def range_label(size_range: SizeRange, presets: List[RangeOption], unit: int, suffix: str) -> str:
    """
    Label for a size range.

    Args:
        size_range: Range in MB.
        presets: Bucket presets; a matching preset supplies its own label.
        unit: MB per display unit.
        suffix: Display unit name ("GB", "TB").

    Returns:
        The preset label, or a computed "a-b", ">= a" label.
    """
    label = find_range_label(presets, size_range)
    if label:
        return label
    minimum = size_range.min // unit
    if size_range.max is not None:
        return f"{minimum}-{size_range.max // unit} {suffix}"
    return f"≥ {minimum} {suffix}"


def applied_filter_entries(filters: AppliedFilters) -> List[AppliedFilterEntry]:
    """
    Build the chip list for the applied filters.

    One entry per selected facet member, plus one each for search, the
    issues flag and the disk and memory ranges when present.
    """
    entries: List[AppliedFilterEntry] = []

    if filters.search:
        entries.append(AppliedFilterEntry("Search", filters.search, CHIP_KEY_SEARCH))

    if filters.memory_range is not None:
        label = range_label(filters.memory_range, memory_range_options(), MB_IN_GB, "GB")
        entries.append(AppliedFilterEntry("Memory", label, CHIP_KEY_MEMORY))

    if filters.disk_range is not None:
        label = range_label(filters.disk_range, disk_range_options(), MB_IN_TB, "TB")
        entries.append(AppliedFilterEntry("Disk size", label, CHIP_KEY_DISK))

    for status in filters.statuses:
        entries.append(
            AppliedFilterEntry("Status", get_status_label(status), f"{CHIP_PREFIX_STATUS}{status}")
        )

    for cluster in filters.clusters:
        entries.append(AppliedFilterEntry("Cluster", cluster, f"{CHIP_PREFIX_CLUSTER}{cluster}"))

    for datacenter in filters.datacenters:
        entries.append(
            AppliedFilterEntry("Data center", datacenter, f"{CHIP_PREFIX_DATACENTER}{datacenter}")
        )

    for readiness in filters.migration_readiness:
        entries.append(
            AppliedFilterEntry(
                "Migration Readiness",
                READINESS_LABELS.get(readiness, readiness),
                f"{CHIP_PREFIX_READINESS}{readiness}",
            )
        )

    if filters.has_issues:
        entries.append(AppliedFilterEntry("Issues", "Has issues", CHIP_KEY_HAS_ISSUES))

    return entries
