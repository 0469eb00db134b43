"""Tests for pagination."""

import pytest


class TestPageState:
    """Tests for PageState."""

    def test_defaults(self):
        """Page 1 of 20 rows by default."""
        from src.inventory.pagination import PageState

        state = PageState()
        assert state.page == 1
        assert state.page_size == 20
        assert state.offset == 0

    @pytest.mark.parametrize("page,page_size", [(0, 20), (-1, 20), (1, 0), (1, -5)])
    def test_invalid_values_rejected(self, page, page_size):
        """Page and page size must be positive."""
        from src.inventory.pagination import PageState

        with pytest.raises(ValueError):
            PageState(page=page, page_size=page_size)

    @pytest.mark.parametrize(
        "total,expected",
        [(0, 1), (1, 1), (20, 1), (21, 2), (25, 2), (40, 2), (41, 3)],
    )
    def test_total_pages(self, total, expected):
        """Total pages rounds up and is at least 1."""
        from src.inventory.pagination import PageState

        assert PageState(page_size=20).total_pages(total) == expected

    def test_navigation_flags(self):
        """has_previous/has_next reflect the position."""
        from src.inventory.pagination import PageState

        first = PageState(page=1, page_size=20)
        last = PageState(page=2, page_size=20)

        assert not first.has_previous()
        assert first.has_next(25)
        assert last.has_previous()
        assert not last.has_next(25)

    def test_display_range(self):
        """Row range text for the info label."""
        from src.inventory.pagination import PageState

        assert PageState(page=2, page_size=20).get_display_range(25) == "Showing 21 - 25 of 25"
        assert PageState().get_display_range(0) == "No results"


class TestPaginate:
    """Tests for paginate."""

    def test_twenty_five_records_two_pages(self, make_records):
        """25 records at 20 per page: 20 then 5."""
        from src.inventory.pagination import PageState, paginate

        records = make_records(25)

        page1 = paginate(records, PageState(page=1, page_size=20))
        page2 = paginate(records, PageState(page=2, page_size=20))

        assert len(page1) == 20
        assert len(page2) == 5
        assert page2[0].id == "vm-021"

    @pytest.mark.parametrize("total,page_size", [(25, 20), (40, 20), (7, 3), (1, 10)])
    def test_pages_cover_every_record_once(self, make_records, total, page_size):
        """Concatenated pages equal the input exactly."""
        from src.inventory.pagination import PageState, paginate

        records = make_records(total)
        state = PageState(page_size=page_size)
        pages = []
        for page in range(1, state.total_pages(total) + 1):
            pages.extend(paginate(records, PageState(page=page, page_size=page_size)))

        assert pages == records

    def test_page_past_end_is_empty(self, make_records):
        """A page beyond the last yields no rows."""
        from src.inventory.pagination import PageState, paginate

        assert paginate(make_records(5), PageState(page=3, page_size=5)) == []

    def test_empty_input(self):
        """Empty input yields an empty first page."""
        from src.inventory.pagination import PageState, paginate

        assert paginate([], PageState()) == []
