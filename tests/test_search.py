# Test suite for the filter engine

import pytest

from linux_helper.content.errors import ERRORS
from linux_helper.engine.search import filter_records, result_summary

from .conftest import make_error


def titles(records):
    return [record.title for record in records]


class TestFilterRecords:
    """Case-insensitive substring filtering over searchable fields"""

    def test_empty_query_returns_everything_in_order(self, small_store):
        """Empty query is the identity"""
        assert filter_records(small_store, "") == tuple(small_store)

    def test_whitespace_query_is_not_treated_as_empty(self, small_store):
        """Only the exact empty string short-circuits"""
        assert titles(filter_records(small_store, " ")) == [
            "command not found",
            "Permission denied",
            "disk quota exceeded",
        ]
        assert filter_records(small_store, "  ") == ()

    def test_end_to_end_scenario(self, small_store):
        """denied / disk / zzz against a three-record store"""
        assert titles(filter_records(small_store, "denied")) == ["Permission denied"]
        assert titles(filter_records(small_store, "disk")) == ["disk quota exceeded"]
        assert filter_records(small_store, "zzz") == ()

    def test_case_insensitive(self):
        """perm and PERM return the same records, including Permission denied"""
        lower = filter_records(ERRORS, "perm")
        upper = filter_records(ERRORS, "PERM")
        assert "Permission denied" in titles(lower)
        assert lower == upper

    def test_idempotent(self):
        """Filtering a filtered result with the same query changes nothing"""
        for query in ("", "perm", "e", "no such", "zzz"):
            once = filter_records(ERRORS, query)
            assert filter_records(once, query) == once

    def test_preserves_store_order(self):
        """Results keep store order, no ranking"""
        result = filter_records(ERRORS, "o")
        ids = [record.id for record in result]
        assert ids == sorted(ids)

    def test_single_character_query(self, small_store):
        """No minimum length"""
        assert titles(filter_records(small_store, "q")) == ["disk quota exceeded"]

    def test_matches_meaning_and_causes(self):
        """Secondary fields are searched too"""
        store = [
            make_error(0, "alpha", meaning="first thing"),
            make_error(1, "beta", causes=("Firewall blocking connection",)),
            make_error(2, "gamma"),
        ]
        assert titles(filter_records(store, "FIRST")) == ["alpha"]
        assert titles(filter_records(store, "firewall")) == ["beta"]

    def test_substring_not_word_match(self, small_store):
        """Matching is containment inside words"""
        assert titles(filter_records(small_store, "mission")) == ["Permission denied"]

    def test_detail_is_never_searched(self):
        """Example and solution text do not make a record match"""
        assert filter_records(ERRORS, "gitt") == ()

    def test_does_not_mutate_input(self, small_store):
        before = tuple(small_store)
        filter_records(small_store, "disk")
        assert tuple(small_store) == before


class TestResultSummary:
    """Result counter shown under the search box"""

    @pytest.mark.parametrize(
        "count, expected",
        [(0, "Found 0 errors"), (1, "Found 1 error"), (4, "Found 4 errors")],
    )
    def test_pluralisation(self, count, expected):
        assert result_summary(count, "x", "error") == expected

    def test_hidden_for_empty_query(self):
        assert result_summary(10, "", "error") is None
