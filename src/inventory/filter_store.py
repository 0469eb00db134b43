"""Filter state store: applied filters, the draft copy and page position.

The store is the only owner of filter state. Every user-originated mutation
raises the ``user_originated`` flag before listeners run; the location
synchronizer clears it once the query string has been written. While the flag
is up, location changes are treated as the store's own echo.
"""

from typing import Callable, List, Optional

from config.constants import (
    CHIP_KEY_DISK,
    CHIP_KEY_HAS_ISSUES,
    CHIP_KEY_MEMORY,
    CHIP_KEY_SEARCH,
    CHIP_PREFIX_CLUSTER,
    CHIP_PREFIX_DATACENTER,
    CHIP_PREFIX_READINESS,
    CHIP_PREFIX_STATUS,
)
from config.logging_config import get_logger
from src.inventory.models import AppliedFilters, DraftFilters, SizeRange
from src.inventory.pagination import PageState

logger = get_logger("filter_store")

Listener = Callable[["FilterStore"], None]

ISSUES_FLAG_HAS = "has_issues"
ISSUES_FLAG_NONE = "no_issues"


def _toggle(values: List[str], value: str) -> List[str]:
    if value in values:
        return [v for v in values if v != value]
    return values + [value]


class FilterStore:
    """
    Owner of AppliedFilters, DraftFilters and PageState for one table view.

    Usage:
        store = FilterStore(initial=decoded_filters, page_size=20)
        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.commit()
    """

    def __init__(
        self,
        initial: Optional[AppliedFilters] = None,
        page_size: int = 20,
    ):
        """
        Initialize the store.

        Args:
            initial: Filters decoded from an incoming location, if any.
            page_size: Rows per page.
        """
        self._applied = initial.copy() if initial is not None else AppliedFilters()
        self._draft: Optional[DraftFilters] = None
        self._page = PageState(page=1, page_size=page_size)
        self._user_originated = False
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def applied(self) -> AppliedFilters:
        """A copy of the applied filters; mutate through store operations."""
        return self._applied.copy()

    @property
    def draft(self) -> Optional[DraftFilters]:
        return self._draft

    @property
    def is_draft_open(self) -> bool:
        return self._draft is not None

    @property
    def page_state(self) -> PageState:
        return PageState(page=self._page.page, page_size=self._page.page_size)

    @property
    def user_originated(self) -> bool:
        """True between a user mutation and its outbound location write."""
        return self._user_originated

    def clear_user_originated(self) -> None:
        self._user_originated = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Draft lifecycle
    # ------------------------------------------------------------------

    def open_draft(self) -> DraftFilters:
        """Start editing a copy of the applied filters."""
        self._draft = DraftFilters.from_applied(self._applied)
        return self._draft

    def _require_draft(self) -> DraftFilters:
        if self._draft is None:
            self.open_draft()
        return self._draft

    def toggle_draft_status(self, status: str) -> None:
        draft = self._require_draft()
        draft.statuses = _toggle(draft.statuses, status)

    def toggle_draft_cluster(self, cluster: str) -> None:
        draft = self._require_draft()
        draft.clusters = _toggle(draft.clusters, cluster)

    def toggle_draft_datacenter(self, datacenter: str) -> None:
        draft = self._require_draft()
        draft.datacenters = _toggle(draft.datacenters, datacenter)

    def toggle_draft_migration_readiness(self, readiness: str) -> None:
        draft = self._require_draft()
        draft.migration_readiness = _toggle(draft.migration_readiness, readiness)

    def toggle_draft_disk_range(self, size_range: SizeRange) -> None:
        """Select a disk bucket, or clear it when it is already selected."""
        draft = self._require_draft()
        draft.disk_range = None if draft.disk_range == size_range else size_range

    def toggle_draft_memory_range(self, size_range: SizeRange) -> None:
        """Select a memory bucket, or clear it when it is already selected."""
        draft = self._require_draft()
        draft.memory_range = None if draft.memory_range == size_range else size_range

    def toggle_draft_issues(self, flag: str) -> None:
        """
        Toggle one of the mutually exclusive issue flags.

        Args:
            flag: "has_issues" or "no_issues". Turning one on turns the
                other off; toggling an already set flag clears it.
        """
        draft = self._require_draft()
        if flag == ISSUES_FLAG_HAS:
            draft.has_issues = not draft.has_issues
            if draft.has_issues:
                draft.no_issues = False
        elif flag == ISSUES_FLAG_NONE:
            draft.no_issues = not draft.no_issues
            if draft.no_issues:
                draft.has_issues = False
        else:
            logger.debug(f"Ignoring unknown issues flag: {flag!r}")

    def commit(self) -> AppliedFilters:
        """Apply the draft, discard it and return to page 1."""
        if self._draft is None:
            return self.applied
        projected = self._draft.to_applied()
        self._draft = None
        self._apply_user_change(projected)
        logger.debug(f"Committed filters: {projected.get_summary()}")
        return self.applied

    def cancel(self) -> None:
        """Discard the draft; applied filters are left untouched."""
        self._draft = None

    # ------------------------------------------------------------------
    # Applied filter mutations
    # ------------------------------------------------------------------

    def remove_applied_entry(self, key: str) -> bool:
        """
        Remove the single constraint identified by a chip key.

        Args:
            key: Chip key such as "status-poweredOn" or "diskSize".

        Returns:
            True if a constraint was removed. Unknown or stale keys are
            ignored and return False.
        """
        filters = self._applied.copy()

        if key == CHIP_KEY_MEMORY:
            changed = filters.memory_range is not None
            filters.memory_range = None
        elif key == CHIP_KEY_DISK:
            changed = filters.disk_range is not None
            filters.disk_range = None
        elif key == CHIP_KEY_HAS_ISSUES:
            changed = filters.has_issues
            filters.has_issues = False
        elif key == CHIP_KEY_SEARCH:
            changed = bool(filters.search)
            filters.search = ""
        elif key.startswith(CHIP_PREFIX_STATUS):
            value = key[len(CHIP_PREFIX_STATUS):]
            changed = value in filters.statuses
            filters.statuses = [s for s in filters.statuses if s != value]
        elif key.startswith(CHIP_PREFIX_CLUSTER):
            value = key[len(CHIP_PREFIX_CLUSTER):]
            changed = value in filters.clusters
            filters.clusters = [c for c in filters.clusters if c != value]
        elif key.startswith(CHIP_PREFIX_DATACENTER):
            value = key[len(CHIP_PREFIX_DATACENTER):]
            changed = value in filters.datacenters
            filters.datacenters = [d for d in filters.datacenters if d != value]
        elif key.startswith(CHIP_PREFIX_READINESS):
            value = key[len(CHIP_PREFIX_READINESS):]
            changed = value in filters.migration_readiness
            filters.migration_readiness = [
                r for r in filters.migration_readiness if r != value
            ]
        else:
            changed = False

        if not changed:
            logger.debug(f"Ignoring stale filter key: {key!r}")
            return False

        self._apply_user_change(filters)
        return True

    def clear_all(self) -> None:
        """Reset every filter, including the search text."""
        self._apply_user_change(AppliedFilters())

    def set_search(self, text: str) -> None:
        """Update the name search; it applies immediately, not via the draft."""
        text = text or ""
        if text == self._applied.search:
            return
        filters = self._applied.copy()
        filters.search = text
        if self._draft is not None:
            self._draft.search = text
        self._apply_user_change(filters)

    def replace_applied(self, filters: AppliedFilters) -> None:
        """Overwrite applied filters from the location (not a user edit).

        An open draft was copied from the old filters, so it is discarded.
        """
        self._applied = filters.copy()
        self._draft = None
        self._page = PageState(page=1, page_size=self._page.page_size)
        self._notify()

    # ------------------------------------------------------------------
    # Page position
    # ------------------------------------------------------------------

    def set_page(self, page: int) -> None:
        self._page = PageState(page=max(1, int(page)), page_size=self._page.page_size)

    def set_page_size(self, page_size: int) -> None:
        """Change rows per page; returns to page 1."""
        self._page = PageState(page=1, page_size=int(page_size))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_user_change(self, filters: AppliedFilters) -> None:
        # Flag first so any location echo during the write is suppressed
        self._user_originated = True
        self._applied = filters
        self._page = PageState(page=1, page_size=self._page.page_size)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
