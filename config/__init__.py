"""Configuration module for the VM Inventory Browser.

All filter defaults are empty: no facet constrains the inventory until the
user (or an incoming link) applies one.
"""

from .settings import config, InventoryConfig, AgentConfig, AppConfig, Config
from .constants import (
    # Units
    MB_IN_GB,
    MB_IN_TB,
    # Labels
    STATUS_LABELS,
    READINESS_LABELS,
    READINESS_VALUES,
    READINESS_READY,
    READINESS_NOT_READY,
    get_status_label,
    # Query string
    SCOPE_PARAM,
    SCOPE_VMS,
    SCOPE_OVERVIEW,
    FILTER_PARAMS,
    # Chart segments
    SEGMENT_MIGRATABLE,
    SEGMENT_NON_MIGRATABLE,
)
from .config_loader import (
    ConfigurationError,
    get_table_config,
    get_size_range_config,
    get_chart_config,
    reload_all_config,
)

__all__ = [
    # Settings
    "config",
    "InventoryConfig",
    "AgentConfig",
    "AppConfig",
    "Config",
    # Units
    "MB_IN_GB",
    "MB_IN_TB",
    # Labels
    "STATUS_LABELS",
    "READINESS_LABELS",
    "READINESS_VALUES",
    "READINESS_READY",
    "READINESS_NOT_READY",
    "get_status_label",
    # Query string
    "SCOPE_PARAM",
    "SCOPE_VMS",
    "SCOPE_OVERVIEW",
    "FILTER_PARAMS",
    # Chart segments
    "SEGMENT_MIGRATABLE",
    "SEGMENT_NON_MIGRATABLE",
    # YAML config
    "ConfigurationError",
    "get_table_config",
    "get_size_range_config",
    "get_chart_config",
    "reload_all_config",
]
