"""Tests for the filter store: draft lifecycle, chips removal and paging."""

import pytest


class TestDraftLifecycle:
    """Tests for open/toggle/commit/cancel."""

    def test_open_draft_copies_applied(self):
        """The draft starts as a copy of the applied filters."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        store = FilterStore(initial=AppliedFilters(clusters=["cluster-a"]))
        draft = store.open_draft()

        assert draft.clusters == ["cluster-a"]
        assert draft.no_issues is False
        assert store.is_draft_open

    def test_draft_edits_do_not_touch_applied(self, store):
        """Toggling draft values leaves applied filters unchanged."""
        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.toggle_draft_cluster("cluster-a")

        assert store.applied.is_empty
        assert store.draft.statuses == ["poweredOn"]

    def test_toggle_twice_removes_value(self, store):
        """A second toggle of the same value removes it."""
        store.open_draft()
        store.toggle_draft_datacenter("dc-east")
        store.toggle_draft_datacenter("dc-east")

        assert store.draft.datacenters == []

    def test_commit_applies_draft_atomically(self, store):
        """Commit replaces applied filters with the projected draft."""
        from src.inventory.models import AppliedFilters, SizeRange

        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.toggle_draft_migration_readiness("ready")
        store.toggle_draft_disk_range(SizeRange(min=0, max=100))

        applied = store.commit()

        expected = AppliedFilters(
            statuses=["poweredOn"],
            migration_readiness=["ready"],
            disk_range=SizeRange(min=0, max=100),
        )
        assert applied == expected
        assert store.applied == expected
        assert not store.is_draft_open

    def test_commit_returns_applied_shape(self, store):
        """The committed value is a plain AppliedFilters."""
        from src.inventory.filter_store import ISSUES_FLAG_NONE
        from src.inventory.models import AppliedFilters

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_NONE)
        applied = store.commit()

        assert type(applied) is AppliedFilters
        assert not hasattr(applied, "no_issues")
        assert applied.is_empty

    def test_cancel_discards_draft(self, store):
        """Cancel leaves applied filters exactly as before."""
        from src.inventory.models import AppliedFilters

        store.replace_applied(AppliedFilters(clusters=["cluster-b"]))
        store.open_draft()
        store.toggle_draft_cluster("cluster-a")
        store.toggle_draft_cluster("cluster-b")
        store.cancel()

        assert store.applied == AppliedFilters(clusters=["cluster-b"])
        assert store.draft is None

    def test_reopen_after_cancel_starts_fresh(self, store):
        """A new draft does not remember cancelled edits."""
        store.open_draft()
        store.toggle_draft_status("suspended")
        store.cancel()

        draft = store.open_draft()
        assert draft.statuses == []

    def test_range_toggle_selects_and_clears(self, store):
        """Selecting the same bucket again clears the range."""
        from src.inventory.models import SizeRange

        small = SizeRange(min=0, max=4096)
        large = SizeRange(min=4097, max=16384)
        store.open_draft()

        store.toggle_draft_memory_range(small)
        assert store.draft.memory_range == small

        store.toggle_draft_memory_range(large)
        assert store.draft.memory_range == large

        store.toggle_draft_memory_range(large)
        assert store.draft.memory_range is None

    def test_toggle_without_open_draft_opens_one(self, store):
        """Toggling implicitly opens a draft."""
        store.toggle_draft_status("poweredOn")
        assert store.is_draft_open
        assert store.draft.statuses == ["poweredOn"]

    def test_commit_without_draft_is_noop(self, store):
        """Commit with no open draft changes nothing."""
        store.commit()
        assert store.applied.is_empty
        assert not store.user_originated

    def test_replace_applied_discards_draft(self, store):
        """An inbound replacement closes the draft copied from the old filters."""
        from src.inventory.models import AppliedFilters

        store.open_draft()
        store.toggle_draft_cluster("c1")

        store.replace_applied(AppliedFilters(statuses=["poweredOn"]))

        assert not store.is_draft_open
        assert store.commit().statuses == ["poweredOn"]
        assert store.applied.clusters == []


class TestIssuesFlags:
    """Tests for the mutually exclusive issues toggles."""

    def test_has_issues_then_no_issues(self, store):
        """Turning on no_issues turns off has_issues."""
        from src.inventory.filter_store import ISSUES_FLAG_HAS, ISSUES_FLAG_NONE

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_HAS)
        assert store.draft.has_issues and not store.draft.no_issues

        store.toggle_draft_issues(ISSUES_FLAG_NONE)
        assert store.draft.no_issues and not store.draft.has_issues

    def test_no_issues_then_has_issues(self, store):
        """Turning on has_issues turns off no_issues."""
        from src.inventory.filter_store import ISSUES_FLAG_HAS, ISSUES_FLAG_NONE

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_NONE)
        store.toggle_draft_issues(ISSUES_FLAG_HAS)

        assert store.draft.has_issues
        assert not store.draft.no_issues

    def test_toggle_off(self, store):
        """Toggling a set flag clears it."""
        from src.inventory.filter_store import ISSUES_FLAG_HAS

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_HAS)
        store.toggle_draft_issues(ISSUES_FLAG_HAS)

        assert not store.draft.has_issues

    def test_no_issues_does_not_constrain(self, store, sample_records):
        """no_issues is panel-only; committing it shows every record."""
        from src.inventory.filter_store import ISSUES_FLAG_NONE
        from src.inventory.predicate import filter_records

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_NONE)
        store.commit()

        assert filter_records(sample_records, store.applied) == sample_records

    def test_commit_has_issues(self, store):
        """has_issues carries over to the applied filters."""
        from src.inventory.filter_store import ISSUES_FLAG_HAS

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_HAS)
        store.commit()

        assert store.applied.has_issues


class TestRemoveAppliedEntry:
    """Tests for chip removal."""

    def test_remove_status_chip(self):
        """Removing a status chip drops only that value."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        store = FilterStore(initial=AppliedFilters(statuses=["poweredOn", "suspended"]))
        assert store.remove_applied_entry("status-poweredOn") is True
        assert store.applied.statuses == ["suspended"]

    @pytest.mark.parametrize(
        "key,attr,cleared",
        [
            ("diskSize", "disk_range", None),
            ("memorySize", "memory_range", None),
            ("hasIssues", "has_issues", False),
            ("search", "search", ""),
        ],
    )
    def test_remove_scalar_chips(self, key, attr, cleared):
        """Scalar chips clear their field."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters, SizeRange

        store = FilterStore(
            initial=AppliedFilters(
                search="web",
                has_issues=True,
                disk_range=SizeRange(min=1, max=2),
                memory_range=SizeRange(min=3),
            )
        )

        assert store.remove_applied_entry(key) is True
        assert getattr(store.applied, attr) == cleared
        assert store.applied.active_filter_count == 3

    def test_remove_prefixed_chips(self):
        """Cluster, data center and readiness chips remove one member each."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        store = FilterStore(
            initial=AppliedFilters(
                clusters=["cluster-a", "cluster-b"],
                datacenters=["dc-east"],
                migration_readiness=["ready", "not-ready"],
            )
        )

        store.remove_applied_entry("cluster-cluster-a")
        store.remove_applied_entry("datacenter-dc-east")
        store.remove_applied_entry("migration-readiness-not-ready")

        assert store.applied == AppliedFilters(
            clusters=["cluster-b"], migration_readiness=["ready"]
        )

    def test_cluster_value_with_dashes(self):
        """Only the prefix is stripped from the key."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        store = FilterStore(initial=AppliedFilters(clusters=["prod-east-01"]))
        assert store.remove_applied_entry("cluster-prod-east-01") is True
        assert store.applied.clusters == []

    @pytest.mark.parametrize("key", ["status-unknown", "cluster-missing", "bogus", "diskSize"])
    def test_stale_or_unknown_key_is_noop(self, key):
        """Unknown keys return False and change nothing."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        initial = AppliedFilters(statuses=["poweredOn"])
        store = FilterStore(initial=initial)
        notified = []
        store.subscribe(notified.append)

        assert store.remove_applied_entry(key) is False
        assert store.applied == initial
        assert notified == []
        assert not store.user_originated

    def test_scenario_remove_has_issues_keeps_status(self, store, sample_records):
        """Removing the issues chip restores only the status constraint."""
        from src.inventory.filter_store import ISSUES_FLAG_HAS
        from src.inventory.predicate import filter_records

        store.open_draft()
        store.toggle_draft_issues(ISSUES_FLAG_HAS)
        store.commit()
        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.commit()

        both = filter_records(sample_records, store.applied)
        assert [r.id for r in both] == ["vm-3"]

        store.remove_applied_entry("hasIssues")

        status_only = filter_records(sample_records, store.applied)
        assert [r.id for r in status_only] == ["vm-1", "vm-3", "vm-5"]

    def test_clear_all(self):
        """clear_all resets every filter including search."""
        from src.inventory.filter_store import FilterStore
        from src.inventory.models import AppliedFilters

        store = FilterStore(initial=AppliedFilters(search="x", statuses=["poweredOn"]))
        store.clear_all()

        assert store.applied.is_empty


class TestSearch:
    """Tests for the immediate search field."""

    def test_set_search_applies_immediately(self, store):
        """Search does not wait for commit."""
        store.set_search("web")
        assert store.applied.search == "web"
        assert store.user_originated

    def test_set_search_mirrors_into_open_draft(self, store):
        """An open draft sees the new search so commit keeps it."""
        store.open_draft()
        store.toggle_draft_cluster("cluster-a")
        store.set_search("db")
        store.commit()

        assert store.applied.search == "db"
        assert store.applied.clusters == ["cluster-a"]

    def test_unchanged_search_is_noop(self, store):
        """Setting the same text does not notify."""
        notified = []
        store.subscribe(notified.append)

        store.set_search("")

        assert notified == []


class TestUserOriginatedFlag:
    """Tests for the echo guard flag."""

    def test_flag_set_before_listeners_run(self, store):
        """Listeners observe the flag already raised."""
        seen = []
        store.subscribe(lambda s: seen.append(s.user_originated))

        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.commit()

        assert seen == [True]

    def test_replace_applied_does_not_raise_flag(self, store):
        """Location-driven replacement is not a user edit."""
        from src.inventory.models import AppliedFilters

        store.replace_applied(AppliedFilters(statuses=["poweredOn"]))
        assert not store.user_originated

    def test_clear_user_originated(self, store):
        """The synchronizer lowers the flag after writing."""
        store.clear_all()
        store.clear_user_originated()
        assert not store.user_originated

    def test_unsubscribe(self, store):
        """Unsubscribed listeners are not called."""
        notified = []
        unsubscribe = store.subscribe(notified.append)
        unsubscribe()

        store.clear_all()

        assert notified == []


class TestPaging:
    """Tests for page position in the store."""

    def test_filter_change_resets_page(self, store):
        """Commit, removal, clear and search all return to page 1."""
        store.set_page(3)
        store.open_draft()
        store.toggle_draft_status("poweredOn")
        store.commit()
        assert store.page_state.page == 1

        store.set_page(2)
        store.remove_applied_entry("status-poweredOn")
        assert store.page_state.page == 1

        store.set_page(2)
        store.set_search("web")
        assert store.page_state.page == 1

        store.set_page(2)
        store.clear_all()
        assert store.page_state.page == 1

    def test_replace_applied_resets_page(self, store):
        """Inbound replacement returns to page 1."""
        from src.inventory.models import AppliedFilters

        store.set_page(4)
        store.replace_applied(AppliedFilters(has_issues=True))
        assert store.page_state.page == 1

    def test_set_page_size_resets_page(self, store):
        """Changing rows per page returns to page 1."""
        store.set_page(5)
        store.set_page_size(50)

        assert store.page_state.page == 1
        assert store.page_state.page_size == 50

    def test_set_page_clamps_below_one(self, store):
        """Page numbers below 1 become 1."""
        store.set_page(0)
        assert store.page_state.page == 1

    def test_page_state_is_a_copy(self, store):
        """Mutating the returned PageState does not change the store."""
        state = store.page_state
        state.page = 9
        assert store.page_state.page == 1
