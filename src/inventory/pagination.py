"""Client-side pagination over an already filtered and sorted sequence."""

from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class PageState:
    """Current page position for the inventory table."""

    page: int = 1
    page_size: int = 20

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")

    @property
    def offset(self) -> int:
        """Calculate offset for current page."""
        return (self.page - 1) * self.page_size

    def total_pages(self, total_count: int) -> int:
        """Calculate total number of pages."""
        if total_count <= 0:
            return 1
        return (total_count + self.page_size - 1) // self.page_size

    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    def has_next(self, total_count: int) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages(total_count)

    def start_row(self, total_count: int) -> int:
        """Get 1-based start row number for display."""
        if total_count == 0:
            return 0
        return self.offset + 1

    def end_row(self, total_count: int) -> int:
        """Get 1-based end row number for display."""
        return min(self.offset + self.page_size, total_count)

    def get_display_range(self, total_count: int) -> str:
        """Get formatted display range string."""
        if total_count == 0 or self.offset >= total_count:
            return "No results"
        return (
            f"Showing {self.start_row(total_count):,} - "
            f"{self.end_row(total_count):,} of {total_count:,}"
        )


def paginate(records: Sequence[T], state: PageState) -> List[T]:
    """
    Slice one page out of the sequence.

    Args:
        records: Filtered and sorted rows.
        state: Page number and size.

    Returns:
        Rows [offset, offset + page_size), clipped to the sequence. A page
        past the end yields an empty list.
    """
    start = state.offset
    return list(records[start:start + state.page_size])
