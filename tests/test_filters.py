"""Tests for governor filtering and free-text search."""

from massacremap.analysis.filters import (
    filter_by_governor,
    list_governors,
    search,
    with_coordinates,
)
from massacremap.core.config import ALL_GOVERNORS


class TestFilterByGovernor:
    def test_all_returns_collection_unchanged(self, records):
        result = filter_by_governor(records, ALL_GOVERNORS)
        assert result == records
        assert all(a is b for a, b in zip(result, records))

    def test_exact_match(self, records):
        result = filter_by_governor(records, "Governor One")
        assert [r.name for r in result] == ["Chacina Alfa", "Operacao Gama"]

    def test_case_sensitive(self, records):
        assert filter_by_governor(records, "governor one") == ()

    def test_unknown_governor_is_empty(self, records):
        assert filter_by_governor(records, "Nobody") == ()

    def test_source_not_mutated(self, records):
        before = tuple(records)
        filter_by_governor(records, "Governor Two")
        assert records == before

    def test_accepts_list(self, records):
        assert len(filter_by_governor(list(records), "Governor Two")) == 1


class TestSearch:
    def test_empty_query_matches_all(self, records):
        assert search(records, "") == records

    def test_matches_location_case_insensitive(self, records):
        assert [r.name for r in search(records, "BETA")] == ["Chacina Beta"]

    def test_matches_governor(self, records):
        result = search(records, "governor one")
        assert [r.row for r in result] == [0, 2]

    def test_matches_name(self, records):
        assert [r.row for r in search(records, "operacao")] == [2]

    def test_substring_not_token(self, records):
        assert [r.row for r in search(records, "lfa")] == [0]

    def test_does_not_search_notes(self, records):
        assert search(records, "dawn") == ()

    def test_idempotent_and_order_preserving(self, records):
        once = search(records, "chacina")
        twice = search(once, "chacina")
        assert once == twice
        assert [r.row for r in once] == [0, 1, 3]


def test_list_governors(records):
    assert list_governors(records) == ["Governor One", "Governor Three", "Governor Two"]


def test_list_governors_skips_empty(records):
    from dataclasses import replace
    extra = replace(records[0], row=9, governor="")
    assert "" not in list_governors((*records, extra))


def test_with_coordinates(records):
    assert [r.row for r in with_coordinates(records)] == [0, 1]
