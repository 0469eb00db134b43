"""Record loading: agent API, JSON files and DataFrames.

The browser engine only consumes already resolved records. Fetch errors are
raised here as InventoryFetchError and must be handled by the caller before
any record reaches the filter pipeline.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import httpx
import pandas as pd
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from config import config
from config.config_loader import get_table_config
from config.constants import format_status
from config.logging_config import get_logger
from src.inventory.chips import format_disk_size, format_memory_size
from src.inventory.models import VMRecord

logger = get_logger("loader")

# Accepted spellings per record field: agent API (camelCase) first
_FIELD_ALIASES: Dict[str, tuple] = {
    "id": ("id", "vm_id"),
    "name": ("name",),
    "state": ("vCenterState", "state", "power_state"),
    "datacenter": ("datacenter",),
    "cluster": ("cluster",),
    "disk_size": ("diskSize", "disk_size"),
    "memory": ("memory", "memoryMB", "memory_mb"),
    "issue_count": ("issueCount", "issue_count"),
    "migratable": ("migratable",),
}

TABLE_COLUMNS = [
    "Name",
    "Status",
    "Migration Readiness",
    "ID",
    "Data center",
    "Cluster",
    "Disk size",
    "Memory size",
    "Issues",
]


class InventoryFetchError(Exception):
    """Raised when the inventory cannot be fetched or parsed."""

    pass


def _lookup(raw: Dict[str, Any], field_name: str) -> Any:
    for alias in _FIELD_ALIASES[field_name]:
        if alias in raw and raw[alias] is not None:
            return raw[alias]
    return None


def _as_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _as_bool(value: Any) -> bool:
    if isinstance(value, float) and pd.isna(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    text = str(value)
    return text or None


def record_from_dict(raw: Dict[str, Any]) -> Optional[VMRecord]:
    """
    Build a record from a raw mapping.

    Args:
        raw: Record fields in agent API or snake_case spelling.

    Returns:
        VMRecord with neutral values for missing fields, or None when the
        record has no identity.
    """
    record_id = _as_str(_lookup(raw, "id"))
    if not record_id:
        return None
    return VMRecord(
        id=record_id,
        name=_as_str(_lookup(raw, "name")) or "",
        state=_as_str(_lookup(raw, "state")) or "",
        datacenter=_as_str(_lookup(raw, "datacenter")),
        cluster=_as_str(_lookup(raw, "cluster")),
        disk_size=_as_int(_lookup(raw, "disk_size")),
        memory=_as_int(_lookup(raw, "memory")),
        issue_count=_as_int(_lookup(raw, "issue_count")),
        migratable=_as_bool(_lookup(raw, "migratable")),
    )


def records_from_dicts(rows: Iterable[Dict[str, Any]]) -> List[VMRecord]:
    """Convert raw rows, skipping rows without an id."""
    records = []
    skipped = 0
    for raw in rows:
        record = record_from_dict(raw) if isinstance(raw, dict) else None
        if record is None:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.warning(f"Skipped {skipped} inventory rows without an id")
    return records


def _extract_rows(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if isinstance(payload.get("vms"), list):
            return payload["vms"]
        inventory = payload.get("inventory")
        if isinstance(inventory, dict) and isinstance(inventory.get("vms"), list):
            return inventory["vms"]
    raise InventoryFetchError("Inventory payload has no VM list")


def load_records_file(path: Union[str, Path]) -> List[VMRecord]:
    """
    Load records from a JSON file.

    Args:
        path: File holding a list of VMs or an object with a "vms" list.

    Returns:
        Parsed records.

    Raises:
        InventoryFetchError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        raise InventoryFetchError(f"Error reading {path}: {e}")

    records = records_from_dicts(_extract_rows(payload))
    logger.info(f"Loaded {len(records):,} VMs from {path.name}")
    return records


def records_from_dataframe(df: pd.DataFrame) -> List[VMRecord]:
    """Convert a DataFrame (one VM per row) into records."""
    if df.empty:
        return []
    return records_from_dicts(df.to_dict(orient="records"))


def records_to_dataframe(records: Iterable[VMRecord]) -> pd.DataFrame:
    """
    Render records as a display table.

    Returns:
        DataFrame with TABLE_COLUMNS, labelled power states and
        human-readable sizes. Missing data center or cluster values show the
        configured null display text.
    """
    null = get_table_config().null_display
    rows = [
        {
            "Name": r.name,
            "Status": format_status(r.state, r.issue_count),
            "Migration Readiness": "Ready" if r.migratable else "Not ready",
            "ID": r.id,
            "Data center": r.datacenter or null,
            "Cluster": r.cluster or null,
            "Disk size": format_disk_size(r.disk_size),
            "Memory size": format_memory_size(r.memory),
            "Issues": r.issue_count,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


class AgentInventoryClient:
    """Client for the migration agent's inventory endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        max_retries: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Agent API base URL (defaults to AGENT_API_URL).
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use MockTransport).
            max_retries: Attempts per request on connection failures
                (defaults to AGENT_MAX_RETRIES).
        """
        self.base_url = base_url or config.agent.base_url
        if not self.base_url:
            raise InventoryFetchError("No agent API URL configured")
        self.timeout = timeout if timeout is not None else config.agent.request_timeout
        self.max_retries = max(
            1, max_retries if max_retries is not None else config.agent.max_retries
        )
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
        )
        self.retrying = Retrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "AgentInventoryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str) -> httpx.Response:
        logger.debug(f"GET {self.base_url}{path}")
        return self.retrying(self.client.get, path)

    def fetch_records(self) -> List[VMRecord]:
        """
        Fetch the VM inventory.

        Returns:
            Parsed records.

        Raises:
            InventoryFetchError: On timeout, network failure, HTTP error or
                an unexpected payload.
        """
        try:
            response = self._get(config.agent.inventory_path)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise InventoryFetchError(f"Inventory request timed out: {e}")
        except httpx.HTTPStatusError as e:
            raise InventoryFetchError(
                f"Inventory request failed with status {e.response.status_code}"
            )
        except httpx.HTTPError as e:
            raise InventoryFetchError(f"Inventory request failed: {e}")
        except ValueError as e:
            raise InventoryFetchError(f"Inventory response is not JSON: {e}")

        records = records_from_dicts(_extract_rows(payload))
        logger.info(f"Fetched {len(records):,} VMs from agent")
        return records
