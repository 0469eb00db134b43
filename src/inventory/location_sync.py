"""Two-way synchronization between the filter store and the location.

The location (a URL query string) is an injected dependency so each view gets
its own synchronizer and tests can use MemoryLocation.

Outbound: a user-originated change in the store is written to the location,
replacing only the filter keys and setting the ``tab=vms`` scope marker.

Inbound: a location change is decoded into the store, but only when the scope
marker says the VMs tab is active and only when the change is not the echo of
an outbound write. The store's ``user_originated`` flag is the echo guard: it
is raised before the user mutation and cleared once the write has finished.
"""

from typing import Callable, Dict, List, Mapping, Optional, Protocol

from config.constants import FILTER_PARAMS, SCOPE_PARAM, SCOPE_VMS
from config.logging_config import get_logger
from src.inventory.filter_store import FilterStore
from src.inventory.models import AppliedFilters
from src.inventory.query_codec import (
    QueryParams,
    decode_filters,
    encode_filters,
    parse_query_string,
    scope_of,
    to_query_string,
)

logger = get_logger("location_sync")


class Location(Protocol):
    """Read/replace access to the current location's query parameters."""

    def read(self) -> QueryParams:
        ...

    def replace(self, params: QueryParams) -> None:
        """Replace all parameters without adding a history entry."""
        ...


LocationListener = Callable[[QueryParams], None]


class MemoryLocation:
    """In-process location with change notifications."""

    def __init__(self, query: str = ""):
        self._params: QueryParams = parse_query_string(query) if query else {}
        self._listeners: List[LocationListener] = []
        self.history: List[str] = []
        self.replace_count = 0

    def read(self) -> QueryParams:
        return {key: list(values) for key, values in self._params.items()}

    def replace(self, params: QueryParams) -> None:
        self._params = {key: list(values) for key, values in params.items()}
        self.replace_count += 1
        self._emit()

    def navigate(self, query: str) -> None:
        """Simulate external navigation (link click, back button)."""
        self.history.append(self.query_string)
        self._params = parse_query_string(query)
        self._emit()

    @property
    def query_string(self) -> str:
        return to_query_string(self._params)

    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        snapshot = self.read()
        for listener in list(self._listeners):
            listener(snapshot)


def _normalize(params: Mapping[str, List[str]]) -> Dict[str, List[str]]:
    return {key: list(values) for key, values in params.items() if values}


class LocationSynchronizer:
    """
    Bridge between a FilterStore and a Location.

    Usage:
        sync = LocationSynchronizer(store, location)
        location.subscribe(sync.on_location_change)  # push-style hosts
        sync.poll()                                  # rerun-style hosts
    """

    def __init__(self, store: FilterStore, location: Location):
        self.store = store
        self.location = location
        self._last_seen = _normalize(location.read())
        self._unsubscribe = store.subscribe(self._on_store_change)

    def close(self) -> None:
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Outbound
    # ------------------------------------------------------------------

    def _on_store_change(self, store: FilterStore) -> None:
        if store.user_originated:
            self.push()

    def _in_scope_for_write(self, current: QueryParams, filters: AppliedFilters) -> bool:
        tab = scope_of(current)
        if tab is not None:
            return tab == SCOPE_VMS
        # No tab selected yet: only claim the location when something is filtered
        return not filters.is_empty

    def push(self) -> bool:
        """
        Write user-originated filter changes to the location.

        Returns:
            True if the location was written.
        """
        if not self.store.user_originated:
            return False

        try:
            current = self.location.read()
            filters = self.store.applied
            if not self._in_scope_for_write(current, filters):
                logger.debug("Skipping outbound write: VMs tab not active")
                return False

            params = {k: v for k, v in current.items() if k not in FILTER_PARAMS}
            params.update(encode_filters(filters))
            params[SCOPE_PARAM] = [SCOPE_VMS]

            self.location.replace(params)
            self._last_seen = _normalize(params)
            logger.debug(f"Wrote location: {to_query_string(params)}")
            return True
        finally:
            self.store.clear_user_originated()

    # ------------------------------------------------------------------
    # Inbound
    # ------------------------------------------------------------------

    def on_location_change(self, params: Optional[QueryParams] = None) -> bool:
        """
        Apply an external location change to the store.

        Args:
            params: New parameters; read from the location when omitted.

        Returns:
            True if the applied filters were replaced.
        """
        if params is None:
            params = self.location.read()

        if self.store.user_originated:
            # Echo of our own outbound write
            return False

        self._last_seen = _normalize(params)

        if scope_of(params) != SCOPE_VMS:
            logger.debug("Ignoring location change: VMs tab not active")
            return False

        filters = decode_filters(params)
        if filters == self.store.applied:
            return False

        self.store.replace_applied(filters)
        logger.debug(f"Applied filters from location: {filters.get_summary()}")
        return True

    def poll(self) -> bool:
        """
        Detect a location change since the last read or write.

        For hosts that cannot push change notifications, such as a Streamlit
        rerun. Returns True if the store was updated.
        """
        current = _normalize(self.location.read())
        if current == self._last_seen:
            return False
        return self.on_location_change(current)

    def initial_filters(self) -> Optional[AppliedFilters]:
        """Filters encoded in the location at mount, if the VMs tab is active."""
        params = self.location.read()
        if scope_of(params) != SCOPE_VMS:
            return None
        return decode_filters(params)
