"""Record predicate: does a VM satisfy the applied filters?

Pure functions only. Missing record values count as their neutral value, so
an absent field can fail a positive constraint but never raises.
"""

from typing import Iterable, List

from src.inventory.models import AppliedFilters, VMRecord


def _in_facet(value, selected: List[str]) -> bool:
    """Empty selection imposes no constraint."""
    if not selected:
        return True
    return (value or "") in selected


def matches(record: VMRecord, filters: AppliedFilters) -> bool:
    """Return True when the record satisfies every active constraint."""
    if filters.search:
        name = (record.name or "").lower()
        if filters.search.lower() not in name:
            return False

    if not _in_facet(record.state, filters.statuses):
        return False
    if not _in_facet(record.cluster, filters.clusters):
        return False
    if not _in_facet(record.datacenter, filters.datacenters):
        return False
    if not _in_facet(record.readiness, filters.migration_readiness):
        return False

    if filters.has_issues and (record.issue_count or 0) <= 0:
        return False

    if filters.disk_range is not None and not filters.disk_range.contains(record.disk_size or 0):
        return False
    if filters.memory_range is not None and not filters.memory_range.contains(record.memory or 0):
        return False

    return True


def filter_records(records: Iterable[VMRecord], filters: AppliedFilters) -> List[VMRecord]:
    """Return the matching records in their input order."""
    if filters.is_empty:
        return list(records)
    return [record for record in records if matches(record, filters)]
