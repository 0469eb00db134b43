"""YAML Configuration Loader for the VM Inventory Browser.

Loads and caches configuration from YAML files with fallback to defaults.
Provides type-safe access to configuration values.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from functools import lru_cache
import yaml

# Get config directory
CONFIG_DIR = Path(__file__).parent

MB_IN_GB = 1024
MB_IN_TB = 1024 * 1024


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


def _load_yaml_file(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of YAML file in config directory

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filename}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filename}: {e}")


# Bucket presets offered by the filter panel, sizes in MB
_DEFAULT_DISK_RANGES = [
    {"label": "0-10 TB", "min": 0, "max": 10 * MB_IN_TB},
    {"label": "11-20 TB", "min": 10 * MB_IN_TB + 1, "max": 20 * MB_IN_TB},
    {"label": "21-50 TB", "min": 20 * MB_IN_TB + 1, "max": 50 * MB_IN_TB},
    {"label": "50+ TB", "min": 50 * MB_IN_TB + 1, "max": None},
]

_DEFAULT_MEMORY_RANGES = [
    {"label": "0-4 GB", "min": 0, "max": 4 * MB_IN_GB},
    {"label": "5-16 GB", "min": 4 * MB_IN_GB + 1, "max": 16 * MB_IN_GB},
    {"label": "17-32 GB", "min": 16 * MB_IN_GB + 1, "max": 32 * MB_IN_GB},
    {"label": "33-64 GB", "min": 32 * MB_IN_GB + 1, "max": 64 * MB_IN_GB},
    {"label": "65-128 GB", "min": 64 * MB_IN_GB + 1, "max": 128 * MB_IN_GB},
    {"label": "129-256 GB", "min": 128 * MB_IN_GB + 1, "max": 256 * MB_IN_GB},
    {"label": "256+ GB", "min": 256 * MB_IN_GB + 1, "max": None},
]


@lru_cache(maxsize=1)
def load_ui_config() -> Dict[str, Any]:
    """Load ui_config.yaml configuration."""
    try:
        return _load_yaml_file("ui_config.yaml")
    except ConfigurationError:
        return {
            "tables": {
                "pagination": {
                    "default_page_size": 20,
                    "page_size_options": [10, 20, 50, 100],
                }
            },
            "size_ranges": {
                "disk": _DEFAULT_DISK_RANGES,
                "memory": _DEFAULT_MEMORY_RANGES,
            },
            "charts": {
                "colors": {"Migratable": "#28a745", "Non-Migratable": "#dc3545"},
            },
        }


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    load_ui_config.cache_clear()


@dataclass
class TableConfig:
    """Table display configuration accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        ui_config = load_ui_config()
        self._data = ui_config.get("tables", {})

    @property
    def default_page_size(self) -> int:
        """Get default pagination page size."""
        return self._data.get("pagination", {}).get("default_page_size", 20)

    @property
    def page_size_options(self) -> List[int]:
        """Get available page size options."""
        return self._data.get("pagination", {}).get("page_size_options", [10, 20, 50, 100])

    @property
    def null_display(self) -> str:
        """Get display text for missing values."""
        return self._data.get("display", {}).get("null_display", "-")


@dataclass
class SizeRangeConfig:
    """Disk and memory bucket presets (sizes in MB)."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        ui_config = load_ui_config()
        self._data = ui_config.get("size_ranges", {})

    @property
    def disk(self) -> List[Dict[str, Any]]:
        """Get disk size presets."""
        return self._data.get("disk", _DEFAULT_DISK_RANGES)

    @property
    def memory(self) -> List[Dict[str, Any]]:
        """Get memory size presets."""
        return self._data.get("memory", _DEFAULT_MEMORY_RANGES)


@dataclass
class ChartConfig:
    """Chart configuration accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        ui_config = load_ui_config()
        self._data = ui_config.get("charts", {})

    def get_segment_color(self, segment: str) -> str:
        """Get color for a chart segment."""
        colors = self._data.get("colors", {})
        return colors.get(segment, "#7f7f7f")

    @property
    def height(self) -> int:
        """Get chart height."""
        return self._data.get("dimensions", {}).get("height", 300)


# Convenience singleton instances
_table_config: Optional[TableConfig] = None
_size_range_config: Optional[SizeRangeConfig] = None
_chart_config: Optional[ChartConfig] = None


def get_table_config() -> TableConfig:
    """Get table configuration."""
    global _table_config
    if _table_config is None:
        _table_config = TableConfig()
    return _table_config


def get_size_range_config() -> SizeRangeConfig:
    """Get size range configuration."""
    global _size_range_config
    if _size_range_config is None:
        _size_range_config = SizeRangeConfig()
    return _size_range_config


def get_chart_config() -> ChartConfig:
    """Get chart configuration."""
    global _chart_config
    if _chart_config is None:
        _chart_config = ChartConfig()
    return _chart_config


def reload_all_config() -> None:
    """Reload all configuration from YAML files."""
    global _table_config, _size_range_config, _chart_config

    clear_config_cache()

    _table_config = None
    _size_range_config = None
    _chart_config = None
