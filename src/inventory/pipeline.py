"""records -> filter -> sort -> page.

Everything here is recomputed from its inputs on each call; nothing is
cached between calls, so the view can never drift from the store.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from src.inventory.chips import AppliedFilterEntry, applied_filter_entries
from src.inventory.facets import FacetOptions, extract_facets
from src.inventory.models import AppliedFilters, VMRecord
from src.inventory.pagination import PageState, paginate
from src.inventory.predicate import filter_records
from src.inventory.sorting import SortSpec, sort_records


@dataclass
class InventoryView:
    """Everything the VMs tab renders for one state snapshot."""

    loading: bool = False
    rows: List[VMRecord] = field(default_factory=list)
    total_count: int = 0
    page_state: PageState = field(default_factory=PageState)
    facets: FacetOptions = field(default_factory=FacetOptions)
    entries: List[AppliedFilterEntry] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return self.page_state.total_pages(self.total_count)


def visible_records(
    records: Sequence[VMRecord],
    filters: AppliedFilters,
    sort: Optional[SortSpec],
    page_state: PageState,
) -> List[VMRecord]:
    """The rows of the current page."""
    return paginate(sort_records(filter_records(records, filters), sort), page_state)


def build_view(
    records: Sequence[VMRecord],
    filters: AppliedFilters,
    sort: Optional[SortSpec],
    page_state: PageState,
    loading: bool = False,
) -> InventoryView:
    """
    Compute the visible page and its companions.

    Args:
        records: Full inventory.
        filters: Applied filters.
        sort: Active sort or None.
        page_state: Page number and size.
        loading: When True the records are stale; the pipeline is skipped.

    Returns:
        InventoryView for rendering.
    """
    if loading:
        return InventoryView(loading=True, page_state=page_state)

    ordered = sort_records(filter_records(records, filters), sort)
    return InventoryView(
        loading=False,
        rows=paginate(ordered, page_state),
        total_count=len(ordered),
        page_state=page_state,
        facets=extract_facets(list(records)),
        entries=applied_filter_entries(filters),
    )
