"""Constants for the VM Inventory Browser.

Static labels, units and query-string keys. Configurable values (page sizes,
size buckets, chart colors) live in ui_config.yaml and are read through
config_loader.
"""

from typing import Dict, List

from config.config_loader import MB_IN_GB, MB_IN_TB


# =============================================================================
# Power states
# =============================================================================

STATUS_LABELS: Dict[str, str] = {
    "poweredOn": "Powered on",
    "poweredOff": "Powered off",
    "suspended": "Suspended",
}


def get_status_label(state: str) -> str:
    """Get display label for a vCenter power state."""
    return STATUS_LABELS.get(state, state)


# Severity markers shown ahead of the status label in the VM table
STATUS_ICON_OK = "🟢"
STATUS_ICON_WARNING = "🟡"
STATUS_ICON_DANGER = "🔴"

# Records without a power state are shown as powered off
DEFAULT_POWER_STATE = "poweredOff"


def get_status_icon(state: str, issue_count: int = 0) -> str:
    """
    Get the severity marker for a power state.

    Powered off is danger, suspended is a warning, powered on is a warning
    when the VM has issues and ok otherwise. Unknown states get no marker.
    """
    state = state or DEFAULT_POWER_STATE
    if state == "poweredOff":
        return STATUS_ICON_DANGER
    if state == "suspended":
        return STATUS_ICON_WARNING
    if state == "poweredOn":
        return STATUS_ICON_WARNING if issue_count > 0 else STATUS_ICON_OK
    return ""


def format_status(state: str, issue_count: int = 0) -> str:
    """Get the table cell text for a power state: marker plus label."""
    state = state or DEFAULT_POWER_STATE
    icon = get_status_icon(state, issue_count)
    label = get_status_label(state)
    return f"{icon} {label}" if icon else label


# =============================================================================
# Migration readiness
# =============================================================================

READINESS_READY = "ready"
READINESS_NOT_READY = "not-ready"

READINESS_LABELS: Dict[str, str] = {
    READINESS_READY: "Ready",
    READINESS_NOT_READY: "Not ready",
}

READINESS_VALUES: List[str] = [READINESS_READY, READINESS_NOT_READY]


# =============================================================================
# Query string
# =============================================================================

# Scope marker: the VMs tab owns the filter keys below
SCOPE_PARAM = "tab"
SCOPE_VMS = "vms"
SCOPE_OVERVIEW = "overview"

PARAM_SEARCH = "search"
PARAM_STATUS = "status"
PARAM_CLUSTER = "cluster"
PARAM_DATACENTER = "datacenter"
PARAM_READINESS = "migrationReadiness"
PARAM_HAS_ISSUES = "hasIssues"
PARAM_DISK_MIN = "diskMin"
PARAM_DISK_MAX = "diskMax"
PARAM_MEM_MIN = "memMin"
PARAM_MEM_MAX = "memMax"

FILTER_PARAMS: List[str] = [
    PARAM_SEARCH,
    PARAM_STATUS,
    PARAM_CLUSTER,
    PARAM_DATACENTER,
    PARAM_READINESS,
    PARAM_HAS_ISSUES,
    PARAM_DISK_MIN,
    PARAM_DISK_MAX,
    PARAM_MEM_MIN,
    PARAM_MEM_MAX,
]


# =============================================================================
# Applied filter chips
# =============================================================================

CHIP_KEY_MEMORY = "memorySize"
CHIP_KEY_DISK = "diskSize"
CHIP_KEY_HAS_ISSUES = "hasIssues"
CHIP_KEY_SEARCH = "search"

CHIP_PREFIX_STATUS = "status-"
CHIP_PREFIX_CLUSTER = "cluster-"
CHIP_PREFIX_DATACENTER = "datacenter-"
CHIP_PREFIX_READINESS = "migration-readiness-"


# =============================================================================
# Aggregate chart segments
# =============================================================================

SEGMENT_MIGRATABLE = "Migratable"
SEGMENT_NON_MIGRATABLE = "Non-Migratable"

__all__ = [
    "MB_IN_GB",
    "MB_IN_TB",
    "STATUS_LABELS",
    "get_status_label",
    "STATUS_ICON_OK",
    "STATUS_ICON_WARNING",
    "STATUS_ICON_DANGER",
    "DEFAULT_POWER_STATE",
    "get_status_icon",
    "format_status",
    "READINESS_READY",
    "READINESS_NOT_READY",
    "READINESS_LABELS",
    "READINESS_VALUES",
    "SCOPE_PARAM",
    "SCOPE_VMS",
    "SCOPE_OVERVIEW",
    "PARAM_SEARCH",
    "PARAM_STATUS",
    "PARAM_CLUSTER",
    "PARAM_DATACENTER",
    "PARAM_READINESS",
    "PARAM_HAS_ISSUES",
    "PARAM_DISK_MIN",
    "PARAM_DISK_MAX",
    "PARAM_MEM_MIN",
    "PARAM_MEM_MAX",
    "FILTER_PARAMS",
    "CHIP_KEY_MEMORY",
    "CHIP_KEY_DISK",
    "CHIP_KEY_HAS_ISSUES",
    "CHIP_KEY_SEARCH",
    "CHIP_PREFIX_STATUS",
    "CHIP_PREFIX_CLUSTER",
    "CHIP_PREFIX_DATACENTER",
    "CHIP_PREFIX_READINESS",
    "SEGMENT_MIGRATABLE",
    "SEGMENT_NON_MIGRATABLE",
]
