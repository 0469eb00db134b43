"""Pytest configuration and fixtures for VM Inventory Browser tests."""

import pytest

MB_IN_GB = 1024
MB_IN_TB = 1024 * 1024


@pytest.fixture
def sample_records():
    """Small inventory covering every facet."""
    from src.inventory.models import VMRecord

    return [
        VMRecord(
            id="vm-1", name="web-01", state="poweredOn", datacenter="dc-east",
            cluster="cluster-a", disk_size=2 * MB_IN_TB, memory=8 * MB_IN_GB,
            issue_count=0, migratable=True,
        ),
        VMRecord(
            id="vm-2", name="db-01", state="poweredOff", datacenter="dc-west",
            cluster="cluster-b", disk_size=15 * MB_IN_TB, memory=64 * MB_IN_GB,
            issue_count=2, migratable=False,
        ),
        VMRecord(
            id="vm-3", name="web-02", state="poweredOn", datacenter="dc-east",
            cluster="cluster-b", disk_size=30 * MB_IN_TB, memory=4 * MB_IN_GB,
            issue_count=1, migratable=True,
        ),
        VMRecord(
            id="vm-4", name="cache-01", state="suspended", datacenter="dc-west",
            cluster="cluster-a", disk_size=60 * MB_IN_TB, memory=300 * MB_IN_GB,
            issue_count=0, migratable=False,
        ),
        VMRecord(
            id="vm-5", name="Batch-Web", state="poweredOn", datacenter=None,
            cluster=None, disk_size=0, memory=0, issue_count=0, migratable=True,
        ),
    ]


@pytest.fixture
def make_records():
    """Factory for n uniform records with ids vm-001, vm-002, ..."""
    from src.inventory.models import VMRecord

    def _make(n, **overrides):
        return [
            VMRecord(
                id=f"vm-{i:03d}",
                name=overrides.get("name", f"vm-{i:03d}"),
                state=overrides.get("state", "poweredOn"),
                datacenter=overrides.get("datacenter", "dc-east"),
                cluster=overrides.get("cluster", "cluster-a"),
                disk_size=overrides.get("disk_size", MB_IN_TB),
                memory=overrides.get("memory", 8 * MB_IN_GB),
                issue_count=overrides.get("issue_count", 0),
                migratable=overrides.get("migratable", True),
            )
            for i in range(1, n + 1)
        ]

    return _make


@pytest.fixture
def store():
    """Fresh filter store with the default page size."""
    from src.inventory.filter_store import FilterStore

    return FilterStore(page_size=20)


@pytest.fixture
def vms_location():
    """Location with the VMs tab active and no filters."""
    from src.inventory.location_sync import MemoryLocation

    return MemoryLocation("tab=vms")


@pytest.fixture
def synced(store, vms_location):
    """Store wired to a VMs-tab location; yields (store, location, sync)."""
    from src.inventory.location_sync import LocationSynchronizer

    sync = LocationSynchronizer(store, vms_location)
    vms_location.subscribe(sync.on_location_change)
    yield store, vms_location, sync
    sync.close()


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload YAML config between tests."""
    from config.config_loader import reload_all_config

    reload_all_config()
    yield
    reload_all_config()
