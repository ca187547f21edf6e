from __future__ import annotations

import pytest

from tableview.domain.models import QueryState
from tableview.stages.search import SearchStage, matches

JOHN = {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin", "status": "Active"}


@pytest.mark.parametrize("query", ["john", "JOHN", "admin", "active", "example.com", "doe"])
def test_matches_any_field_case_insensitively(query):
    assert matches(JOHN, query)


def test_does_not_match_absent_text():
    assert not matches(JOHN, "xyz")


def test_empty_query_always_matches():
    assert matches(JOHN, "")
    assert matches({}, "")


def test_numbers_are_coerced_before_matching():
    assert matches({"id": 42, "name": "x"}, "42")
    assert matches({"price": 2.0}, "2")
    assert not matches({"price": 2.0}, "2.0")
    assert matches({"ratio": 0.75}, ".75")


def test_none_values_do_not_match_text():
    assert not matches({"name": None}, "none")


def test_stage_keeps_order_and_filters(users):
    state = QueryState(page_size=5, search_text="john")
    result = SearchStage().apply(users, state)
    assert [r["id"] for r in result] == [1, 3]


def test_stage_returns_copy_for_empty_query(users):
    state = QueryState(page_size=5)
    result = SearchStage().apply(users, state)
    assert result == users
    assert result is not users
