"""Client-side ordering of inventory rows."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from src.inventory.models import VMRecord


class SortColumn(str, Enum):
    """Sortable table columns, keyed by their table identifiers."""

    NAME = "name"
    STATE = "vCenterState"
    MIGRATABLE = "migratable"
    ID = "id"
    DATACENTER = "datacenter"
    CLUSTER = "cluster"
    DISK_SIZE = "diskSize"
    MEMORY = "memory"
    ISSUES = "issues"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Active sort column and direction."""

    column: SortColumn
    direction: SortDirection = SortDirection.ASC


# Column labels in table order
COLUMN_LABELS: Dict[SortColumn, str] = {
    SortColumn.NAME: "Name",
    SortColumn.STATE: "Status",
    SortColumn.MIGRATABLE: "Migration Readiness",
    SortColumn.ID: "ID",
    SortColumn.DATACENTER: "Data center",
    SortColumn.CLUSTER: "Cluster",
    SortColumn.DISK_SIZE: "Disk size",
    SortColumn.MEMORY: "Memory size",
    SortColumn.ISSUES: "Issues",
}

_SORT_KEYS: Dict[SortColumn, Callable[[VMRecord], object]] = {
    SortColumn.NAME: lambda r: r.name or "",
    SortColumn.STATE: lambda r: r.state or "",
    SortColumn.ID: lambda r: r.id or "",
    SortColumn.DATACENTER: lambda r: r.datacenter or "",
    SortColumn.CLUSTER: lambda r: r.cluster or "",
    SortColumn.DISK_SIZE: lambda r: r.disk_size or 0,
    SortColumn.MEMORY: lambda r: r.memory or 0,
    SortColumn.ISSUES: lambda r: r.issue_count or 0,
    # Ascending puts ready VMs first
    SortColumn.MIGRATABLE: lambda r: 0 if r.migratable else 1,
}


def sort_records(records: Iterable[VMRecord], spec: Optional[SortSpec]) -> List[VMRecord]:
    """
    Order records by the active column.

    Args:
        records: Rows to order.
        spec: Active sort, or None to keep collection order.

    Returns:
        New list; rows with equal keys keep their input order in both
        directions. On the Migration Readiness column, ascending lists
        ready VMs before not-ready ones and descending reverses that.
    """
    if spec is None:
        return list(records)

    key = _SORT_KEYS[SortColumn(spec.column)]
    # sorted() is stable, and reverse=True keeps that stability
    return sorted(records, key=key, reverse=SortDirection(spec.direction) is SortDirection.DESC)


def toggle_sort(current: Optional[SortSpec], column: SortColumn) -> SortSpec:
    """Header click: a new column sorts ascending, the same column flips."""
    column = SortColumn(column)
    if current is None or SortColumn(current.column) is not column:
        return SortSpec(column=column, direction=SortDirection.ASC)
    if SortDirection(current.direction) is SortDirection.ASC:
        return SortSpec(column=column, direction=SortDirection.DESC)
    return SortSpec(column=column, direction=SortDirection.ASC)
