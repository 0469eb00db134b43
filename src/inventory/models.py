"""Data model for the VM inventory browser.

VMRecord is the read-only inventory row supplied by the data layer.
AppliedFilters is the filter state that drives the visible table, and
DraftFilters is its editable copy while the filter panel is open.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from config.constants import (
    READINESS_NOT_READY,
    READINESS_READY,
    get_status_label,
)


@dataclass(frozen=True)
class VMRecord:
    """A virtual machine as reported by the inventory collector.

    Sizes are in MB. Optional fields default to their neutral value so a
    partially populated record never breaks filtering or sorting.
    """

    id: str
    name: str = ""
    state: str = ""
    datacenter: Optional[str] = None
    cluster: Optional[str] = None
    disk_size: int = 0
    memory: int = 0
    issue_count: int = 0
    migratable: bool = False

    @property
    def readiness(self) -> str:
        """Migration readiness tag derived from the migratable flag."""
        return READINESS_READY if self.migratable else READINESS_NOT_READY

    @property
    def has_issues(self) -> bool:
        return self.issue_count > 0


@dataclass(frozen=True)
class SizeRange:
    """Inclusive size range in MB; max=None means unbounded."""

    min: int = 0
    max: Optional[int] = None

    def contains(self, value: int) -> bool:
        if value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["SizeRange"]:
        if not data:
            return None
        maximum = data.get("max")
        return cls(
            min=int(data.get("min") or 0),
            max=int(maximum) if maximum is not None else None,
        )


def unique_values(values) -> List[str]:
    """Drop empties and duplicates, keeping first-seen order."""
    seen = []
    for value in values or []:
        if value and value not in seen:
            seen.append(value)
    return seen


@dataclass
class AppliedFilters:
    """Filters currently constraining the inventory table.

    Each unset field (empty string, empty list, None, False) imposes no
    constraint. Fields combine with AND; members of one list combine with OR.
    """

    search: str = ""
    statuses: List[str] = field(default_factory=list)
    clusters: List[str] = field(default_factory=list)
    datacenters: List[str] = field(default_factory=list)
    migration_readiness: List[str] = field(default_factory=list)
    has_issues: bool = False
    disk_range: Optional[SizeRange] = None
    memory_range: Optional[SizeRange] = None

    _LIST_FIELDS = ("statuses", "clusters", "datacenters", "migration_readiness")

    def __eq__(self, other: object) -> bool:
        # Member order inside a facet is not significant
        if not isinstance(other, AppliedFilters):
            return NotImplemented
        if type(self) is not type(other):
            return False
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if f.name in self._LIST_FIELDS:
                if set(mine) != set(theirs):
                    return False
            elif mine != theirs:
                return False
        return True

    @property
    def is_empty(self) -> bool:
        """Check if no filter is active (showing all records)."""
        return (
            not self.search
            and not self.statuses
            and not self.clusters
            and not self.datacenters
            and not self.migration_readiness
            and not self.has_issues
            and self.disk_range is None
            and self.memory_range is None
        )

    @property
    def active_filter_count(self) -> int:
        """Count of active filter categories."""
        count = 0
        if self.search:
            count += 1
        for name in self._LIST_FIELDS:
            if getattr(self, name):
                count += 1
        if self.has_issues:
            count += 1
        if self.disk_range is not None:
            count += 1
        if self.memory_range is not None:
            count += 1
        return count

    def applied_copy(self) -> "AppliedFilters":
        """Copy onto the plain AppliedFilters shape."""
        return AppliedFilters(
            search=self.search,
            statuses=list(self.statuses),
            clusters=list(self.clusters),
            datacenters=list(self.datacenters),
            migration_readiness=list(self.migration_readiness),
            has_issues=self.has_issues,
            disk_range=self.disk_range,
            memory_range=self.memory_range,
        )

    def copy(self) -> "AppliedFilters":
        """Create a copy of this filter state."""
        return self.applied_copy()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "search": self.search,
            "statuses": list(self.statuses),
            "clusters": list(self.clusters),
            "datacenters": list(self.datacenters),
            "migration_readiness": list(self.migration_readiness),
            "has_issues": self.has_issues,
            "disk_range": self.disk_range.to_dict() if self.disk_range else None,
            "memory_range": self.memory_range.to_dict() if self.memory_range else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppliedFilters":
        """Create from dictionary."""
        return cls(
            search=data.get("search") or "",
            statuses=unique_values(data.get("statuses")),
            clusters=unique_values(data.get("clusters")),
            datacenters=unique_values(data.get("datacenters")),
            migration_readiness=unique_values(data.get("migration_readiness")),
            has_issues=bool(data.get("has_issues")),
            disk_range=SizeRange.from_dict(data.get("disk_range")),
            memory_range=SizeRange.from_dict(data.get("memory_range")),
        )

    def get_summary(self) -> str:
        """Get a human-readable summary of active filters."""
        parts = []

        if self.search:
            parts.append(f'Name contains "{self.search}"')
        if self.statuses:
            parts.append(f"Status: {', '.join(get_status_label(s) for s in self.statuses)}")
        if self.clusters:
            if len(self.clusters) <= 3:
                parts.append(f"Clusters: {', '.join(self.clusters)}")
            else:
                parts.append(f"Clusters: {len(self.clusters)} selected")
        if self.datacenters:
            if len(self.datacenters) <= 3:
                parts.append(f"Data centers: {', '.join(self.datacenters)}")
            else:
                parts.append(f"Data centers: {len(self.datacenters)} selected")
        if self.migration_readiness:
            parts.append(f"Readiness: {', '.join(self.migration_readiness)}")
        if self.has_issues:
            parts.append("Has issues")
        if self.disk_range:
            parts.append("Disk size range")
        if self.memory_range:
            parts.append("Memory range")

        return " | ".join(parts) if parts else "All VMs (no filters)"


@dataclass(eq=False)
class DraftFilters(AppliedFilters):
    """Uncommitted filters edited in the filter panel.

    ``has_issues`` and ``no_issues`` are mutually exclusive. ``no_issues`` is a
    panel-only flag: it has no applied counterpart and is dropped on commit.
    """

    no_issues: bool = False

    @classmethod
    def from_applied(cls, applied: AppliedFilters) -> "DraftFilters":
        base = applied.applied_copy()
        return cls(
            search=base.search,
            statuses=base.statuses,
            clusters=base.clusters,
            datacenters=base.datacenters,
            migration_readiness=base.migration_readiness,
            has_issues=base.has_issues,
            disk_range=base.disk_range,
            memory_range=base.memory_range,
            no_issues=False,
        )

    def to_applied(self) -> AppliedFilters:
        """Project onto the applied shape, dropping panel-only flags."""
        return self.applied_copy()
