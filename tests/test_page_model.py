# Test suite for per-page state

import pytest

from linux_helper.content import get_page
from linux_helper.engine.page import PageExtra, PageModel, PageSpec
from linux_helper.exceptions import UnknownPageError
from linux_helper.models.disclosure import DisclosurePolicy


@pytest.fixture
def errors_page():
    return PageModel(get_page("errors"))


@pytest.fixture
def checklist_page():
    return PageModel(get_page("troubleshooting"))


class TestSingleOpenPage:
    """Errors reference: search plus a single expanded entry"""

    def test_first_entry_open_initially(self, errors_page):
        assert errors_page.is_expanded(0)
        assert errors_page.expanded_record.title == "command not found"
        assert errors_page.summary is None
        assert len(errors_page.results) == 10

    def test_query_collapses_even_when_still_visible(self, errors_page):
        """ExpandedOn(1) plus a query that still shows record 1 ends collapsed"""
        errors_page.toggle(1)
        errors_page.set_query("perm")
        assert any(r.id == 1 for r in errors_page.results)
        assert not errors_page.is_open(1)
        assert errors_page.expanded_record is None

    def test_toggle_switches_entries(self, errors_page):
        errors_page.toggle(5)
        errors_page.toggle(7)
        assert errors_page.is_expanded(7)
        assert not errors_page.is_expanded(5)
        assert not errors_page.is_expanded(0)

    def test_hidden_entry_is_not_expanded(self, errors_page):
        """Open but filtered out renders as not expanded"""
        errors_page.set_query("disk")
        errors_page.toggle(1)
        assert errors_page.is_open(1)
        assert not errors_page.is_expanded(1)

    def test_summary_and_empty_state(self, errors_page):
        errors_page.set_query("disk")
        assert errors_page.summary == "Found 1 error"
        errors_page.set_query("zzz")
        assert errors_page.is_empty
        assert errors_page.summary == "Found 0 errors"
        assert errors_page.spec.empty_message == "No errors found matching your search."

    def test_clearing_query_restores_everything(self, errors_page):
        errors_page.set_query("perm")
        errors_page.set_query("")
        assert errors_page.results == errors_page.store.as_tuple()
        assert errors_page.summary is None


class TestChecklistPage:
    """Troubleshooting checklist: independent checked state"""

    def test_starts_unchecked(self, checklist_page):
        assert checklist_page.progress == (0, 10)
        assert not any(checklist_page.is_expanded(r.id) for r in checklist_page.results)

    def test_toggle_by_key_and_by_id(self, checklist_page):
        checklist_page.toggle("item-2")
        assert checklist_page.is_open(2)
        assert checklist_page.is_open("item-2")
        checklist_page.toggle(2)
        assert not checklist_page.is_open("item-2")

    def test_toggle_is_independent(self, checklist_page):
        checklist_page.toggle("item-0")
        checklist_page.toggle("item-2")
        assert checklist_page.is_expanded(0)
        assert checklist_page.is_expanded(2)
        assert not checklist_page.is_expanded(5)
        assert checklist_page.progress == (2, 10)

    def test_query_keeps_checked_items(self, checklist_page):
        checklist_page.toggle("item-3")
        checklist_page.set_query("network")
        checklist_page.set_query("")
        assert checklist_page.is_open("item-3")
        assert checklist_page.expanded_record is None


class TestPageRegistry:
    def test_unknown_page(self):
        with pytest.raises(UnknownPageError):
            get_page("nope")

    def test_home_has_no_records(self):
        home = get_page("home")
        assert not home.has_records
        with pytest.raises(ValueError):
            PageModel(home)

    def test_policies(self):
        assert get_page("errors").policy is DisclosurePolicy.SINGLE_OPEN
        assert get_page("troubleshooting").policy is DisclosurePolicy.INDEPENDENT_TOGGLE

    def test_page_extras(self):
        errors = get_page("errors")
        checklist = get_page("troubleshooting")
        assert [e.heading for e in errors.extras] == ["General Troubleshooting Tips"]
        assert [e.heading for e in checklist.extras] == [
            "Quick Reference: Common Issue Patterns",
            "Safety Tips",
        ]
        assert get_page("installation").extras == ()

    def test_custom_page_without_open_first(self, small_store):
        model = PageModel(PageSpec(slug="x", title="X", blurb="", store=small_store))
        assert model.expanded_record is None


class TestPageExtra:
    """Tip blocks shown below the records"""

    def test_paragraph_rows_become_single_lines(self):
        extra = PageExtra("Tips", (("Check Logs", "Use journalctl."),))
        assert extra.items() == (("Check Logs", ("Use journalctl.",)),)

    def test_numbered_steps(self):
        extra = PageExtra("Reference", (("Disk", ("df -h", "du -sh ~/*")),), numbered=True)
        assert extra.items() == (("Disk", ("1. df -h", "2. du -sh ~/*")),)
