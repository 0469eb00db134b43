"""Tests for the filter, sort and paginate pipeline."""


class TestBuildView:
    """Tests for build_view."""

    def test_full_pipeline(self, sample_records):
        """Rows are filtered, sorted and paged in that order."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view
        from src.inventory.sorting import SortColumn, SortDirection, SortSpec

        view = build_view(
            sample_records,
            AppliedFilters(migration_readiness=["ready"]),
            SortSpec(SortColumn.NAME, SortDirection.DESC),
            PageState(page=1, page_size=2),
        )

        assert not view.loading
        assert view.total_count == 3
        assert view.total_pages == 2
        assert [r.name for r in view.rows] == ["web-02", "web-01"]

    def test_second_page(self, sample_records):
        """The last page holds the remainder."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view
        from src.inventory.sorting import SortColumn, SortDirection, SortSpec

        view = build_view(
            sample_records,
            AppliedFilters(migration_readiness=["ready"]),
            SortSpec(SortColumn.NAME, SortDirection.DESC),
            PageState(page=2, page_size=2),
        )

        assert [r.name for r in view.rows] == ["Batch-Web"]

    def test_entries_and_facets(self, sample_records):
        """The view carries chips and facet options."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view

        view = build_view(sample_records, AppliedFilters(has_issues=True), None, PageState())

        assert [e.key for e in view.entries] == ["hasIssues"]
        assert view.facets.datacenters == ["dc-east", "dc-west"]

    def test_loading_skips_pipeline(self, sample_records):
        """While loading, no rows are computed."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view

        view = build_view(sample_records, AppliedFilters(), None, PageState(), loading=True)

        assert view.loading
        assert view.rows == []
        assert view.total_count == 0

    def test_no_results(self, sample_records):
        """Zero matches give one empty page."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view

        view = build_view(sample_records, AppliedFilters(search="nothing"), None, PageState())

        assert view.rows == []
        assert view.total_count == 0
        assert view.total_pages == 1

    def test_twenty_five_records(self, make_records):
        """25 records at 20 per page span two pages."""
        from src.inventory.models import AppliedFilters
        from src.inventory.pagination import PageState
        from src.inventory.pipeline import build_view, visible_records

        records = make_records(25)

        view = build_view(records, AppliedFilters(), None, PageState(page=1, page_size=20))
        assert len(view.rows) == 20
        assert view.total_pages == 2

        page2 = visible_records(records, AppliedFilters(), None, PageState(page=2, page_size=20))
        assert len(page2) == 5


class TestStoreDrivenView:
    """The view follows store changes."""

    def test_commit_then_view(self, store, make_records):
        """A committed filter and page reset show up in the next view."""
        from src.inventory.models import VMRecord
        from src.inventory.pipeline import build_view

        records = make_records(30) + [VMRecord(id="off-1", state="poweredOff")]
        store.set_page(2)
        store.open_draft()
        store.toggle_draft_status("poweredOff")
        store.commit()

        view = build_view(records, store.applied, None, store.page_state)

        assert view.page_state.page == 1
        assert [r.id for r in view.rows] == ["off-1"]
