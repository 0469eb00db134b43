"""Facet option lists and aggregate counts derived from the inventory."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from config.config_loader import get_size_range_config
from config.constants import READINESS_VALUES, STATUS_LABELS
from src.inventory.models import SizeRange, VMRecord


@dataclass(frozen=True)
class RangeOption:
    """A labelled size bucket offered by the filter panel."""

    label: str
    range: SizeRange


@dataclass
class FacetOptions:
    """Selectable values for each facet of the filter panel."""

    statuses: List[str] = field(default_factory=list)
    clusters: List[str] = field(default_factory=list)
    datacenters: List[str] = field(default_factory=list)
    migration_readiness: List[str] = field(default_factory=list)
    disk_ranges: List[RangeOption] = field(default_factory=list)
    memory_ranges: List[RangeOption] = field(default_factory=list)


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    return sorted({value for value in values if value})


def available_clusters(records: Iterable[VMRecord]) -> List[str]:
    """Distinct, non-empty cluster names, sorted."""
    return _distinct(r.cluster for r in records)


def available_datacenters(records: Iterable[VMRecord]) -> List[str]:
    """Distinct, non-empty data center names, sorted."""
    return _distinct(r.datacenter for r in records)


def _range_options(presets: List[Dict]) -> List[RangeOption]:
    return [
        RangeOption(label=p["label"], range=SizeRange.from_dict(p) or SizeRange())
        for p in presets
    ]


def disk_range_options() -> List[RangeOption]:
    return _range_options(get_size_range_config().disk)


def memory_range_options() -> List[RangeOption]:
    return _range_options(get_size_range_config().memory)


def extract_facets(records: List[VMRecord]) -> FacetOptions:
    """Build all facet option lists for the current record collection."""
    return FacetOptions(
        statuses=list(STATUS_LABELS.keys()),
        clusters=available_clusters(records),
        datacenters=available_datacenters(records),
        migration_readiness=list(READINESS_VALUES),
        disk_ranges=disk_range_options(),
        memory_ranges=memory_range_options(),
    )


def find_range_label(options: List[RangeOption], size_range: SizeRange) -> Optional[str]:
    """Label of the preset equal to size_range, if any."""
    for option in options:
        if option.range == size_range:
            return option.label
    return None


@dataclass
class MigrationSummary:
    """Counts feeding the migration status chart."""

    migratable: int = 0
    non_migratable: int = 0
    with_issues: int = 0

    @property
    def total(self) -> int:
        return self.migratable + self.non_migratable


def summarize_migration(records: Iterable[VMRecord]) -> MigrationSummary:
    summary = MigrationSummary()
    for record in records:
        if record.migratable:
            summary.migratable += 1
        else:
            summary.non_migratable += 1
        if record.has_issues:
            summary.with_issues += 1
    return summary
