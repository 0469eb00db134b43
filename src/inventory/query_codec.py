"""Query-string encoding of applied filters.

Parameters (repeatable ones marked *):

    search, status*, cluster*, datacenter*, migrationReadiness*,
    hasIssues (presence means true), diskMin, diskMax, memMin, memMax

Sizes are integers in MB. Decoding is lenient: unknown keys, bad integers
and unknown readiness values are dropped rather than rejected.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qs, urlencode

from config.constants import (
    PARAM_CLUSTER,
    PARAM_DATACENTER,
    PARAM_DISK_MAX,
    PARAM_DISK_MIN,
    PARAM_HAS_ISSUES,
    PARAM_MEM_MAX,
    PARAM_MEM_MIN,
    PARAM_READINESS,
    PARAM_SEARCH,
    PARAM_STATUS,
    READINESS_VALUES,
    SCOPE_PARAM,
    SCOPE_VMS,
)
from config.logging_config import get_logger
from src.inventory.models import AppliedFilters, SizeRange, unique_values

logger = get_logger("query_codec")

QueryParams = Dict[str, List[str]]

_FALSE_VALUES = {"false", "0", "no"}


def _values(params: Mapping[str, Any], key: str) -> List[str]:
    """All values of a key; accepts both str and list values."""
    if key not in params:
        return []
    raw = params[key]
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(v) for v in raw]
    return [str(raw)]


def _first(params: Mapping[str, Any], key: str) -> Optional[str]:
    values = _values(params, key)
    return values[0] if values else None


def _parse_int(params: Mapping[str, Any], key: str) -> Optional[int]:
    value = _first(params, key)
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except (ValueError, TypeError):
        logger.debug(f"Ignoring non-integer {key}={value!r}")
        return None
    if parsed < 0:
        logger.debug(f"Ignoring negative {key}={value!r}")
        return None
    return parsed


def _decode_range(params: Mapping[str, Any], min_key: str, max_key: str) -> Optional[SizeRange]:
    minimum = _parse_int(params, min_key)
    maximum = _parse_int(params, max_key)
    if minimum is None and maximum is None:
        return None
    return SizeRange(min=minimum or 0, max=maximum)


def _encode_range(params: QueryParams, size_range: Optional[SizeRange], min_key: str, max_key: str) -> None:
    if size_range is None:
        return
    params[min_key] = [str(size_range.min)]
    if size_range.max is not None:
        params[max_key] = [str(size_range.max)]


def encode_filters(filters: AppliedFilters) -> QueryParams:
    """
    Encode applied filters as multi-valued query parameters.

    Args:
        filters: Filters to encode.

    Returns:
        Dict of parameter name to list of values; inactive facets are absent.
        The scope marker is not included.
    """
    params: QueryParams = {}

    if filters.search:
        params[PARAM_SEARCH] = [filters.search]
    if filters.statuses:
        params[PARAM_STATUS] = list(filters.statuses)
    if filters.clusters:
        params[PARAM_CLUSTER] = list(filters.clusters)
    if filters.datacenters:
        params[PARAM_DATACENTER] = list(filters.datacenters)
    if filters.migration_readiness:
        params[PARAM_READINESS] = list(filters.migration_readiness)
    if filters.has_issues:
        params[PARAM_HAS_ISSUES] = ["true"]
    _encode_range(params, filters.disk_range, PARAM_DISK_MIN, PARAM_DISK_MAX)
    _encode_range(params, filters.memory_range, PARAM_MEM_MIN, PARAM_MEM_MAX)

    return params


def decode_filters(params: Mapping[str, Any]) -> AppliedFilters:
    """
    Decode query parameters into applied filters.

    Args:
        params: Parameter mapping; values may be strings or lists of strings.

    Returns:
        AppliedFilters; absent or malformed keys decode to neutral values.
    """
    readiness = [v for v in _values(params, PARAM_READINESS) if v in READINESS_VALUES]

    has_issues = False
    if PARAM_HAS_ISSUES in params:
        flag = _first(params, PARAM_HAS_ISSUES)
        has_issues = (flag or "").lower() not in _FALSE_VALUES

    return AppliedFilters(
        search=_first(params, PARAM_SEARCH) or "",
        statuses=unique_values(_values(params, PARAM_STATUS)),
        clusters=unique_values(_values(params, PARAM_CLUSTER)),
        datacenters=unique_values(_values(params, PARAM_DATACENTER)),
        migration_readiness=unique_values(readiness),
        has_issues=has_issues,
        disk_range=_decode_range(params, PARAM_DISK_MIN, PARAM_DISK_MAX),
        memory_range=_decode_range(params, PARAM_MEM_MIN, PARAM_MEM_MAX),
    )


def to_query_string(params: Mapping[str, Union[str, List[str]]]) -> str:
    """Render parameters as a URL query string (without the leading '?')."""
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        for item in value if isinstance(value, (list, tuple)) else [value]:
            pairs.append((key, item))
    return urlencode(pairs)


def parse_query_string(query: str) -> QueryParams:
    """Parse a query string (leading '?' optional) into multi-valued params."""
    return parse_qs(query.lstrip("?"), keep_blank_values=True)


def encode_query(filters: AppliedFilters, scoped: bool = True) -> str:
    """Encode filters as a query string, with the VMs scope marker by default."""
    params = encode_filters(filters)
    if scoped:
        params[SCOPE_PARAM] = [SCOPE_VMS]
    return to_query_string(params)


def decode_query(query: str) -> AppliedFilters:
    return decode_filters(parse_query_string(query))


def scope_of(params: Mapping[str, Any]) -> Optional[str]:
    """The tab named by the scope marker, or None."""
    return _first(params, SCOPE_PARAM)
