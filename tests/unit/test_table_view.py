from __future__ import annotations

import pytest

from tableview.domain.models import QueryState, SortDirection
from tableview.errors import InvalidPageSizeError
from tableview.infrastructure.record_store import RecordStore
from tableview.view import TableView


def _ids(records):
    return [r["id"] for r in records]


def test_initial_output_surface(view):
    assert _ids(view.page_records) == [1, 2]
    assert view.total_record_count == 7
    assert view.total_pages == 4
    assert view.current_page_index == 0
    assert view.sort_field is None
    assert view.sort_direction is SortDirection.ASCENDING
    assert view.schema == ("id", "name", "email", "role", "status")


def test_controls_recompute_immediately(view):
    view.set_filter("role", "Admin")
    assert _ids(view.page_records) == [1, 3]
    assert view.total_record_count == 4

    view.set_search_text("inactive")
    assert _ids(view.page_records) == [7]
    assert view.total_pages == 1


def test_controls_chain(view):
    view.set_page_size(5).set_sort_field("name").set_sort_field("name")
    assert view.sort_direction is SortDirection.DESCENDING
    assert [r["name"] for r in view.page_records][:2] == ["John Doe", "Jane Smith"]


def test_navigation(view):
    view.next_page().next_page()
    assert view.current_page_index == 2
    assert _ids(view.page_records) == [5, 6]
    view.go_to_page(10)
    assert view.current_page_index == 2
    view.previous_page()
    assert view.current_page_index == 1


def test_shrinking_filter_keeps_page_in_bounds(view):
    view.set_page_size(5).next_page()
    assert _ids(view.page_records) == [6, 7]
    view.set_filter("status", "Inactive")
    assert view.current_page_index == 0
    assert _ids(view.page_records) == [2, 4, 7]
    assert view.result.summary() == "Showing 1 to 3 of 3 entries"


def test_filter_options_come_from_whole_store(view):
    view.set_filter("role", "User").set_filter("status", "Inactive")
    assert view.total_record_count == 2
    assert view.distinct_values("status") == ("Active", "Inactive")
    assert view.filter_options()["role"] == ["Admin", "User"]


def test_reset_restores_defaults(view):
    view.set_search_text("john").set_sort_field("id").next_page()
    view.reset()
    assert view.state == QueryState(page_size=2)
    assert view.total_record_count == 7


def test_invalid_page_size_leaves_state_unchanged(view):
    view.next_page()
    with pytest.raises(InvalidPageSizeError):
        view.set_page_size(7)
    assert view.current_page_index == 1
    assert view.state.page_size == 2


def test_restored_state_is_settled(store, test_settings):
    view = TableView(store, test_settings, state=QueryState(page_size=5, page_index=8))
    assert view.state.page_index == 1
    assert _ids(view.page_records) == [6, 7]


def test_empty_store(test_settings):
    view = TableView(RecordStore([]), test_settings)
    assert view.page_records == ()
    assert view.total_pages == 0
    assert view.result.summary() == "Showing 0 to 0 of 0 entries"
    view.next_page()
    assert view.current_page_index == 0


def test_restored_state_with_disallowed_page_size(store, test_settings):
    with pytest.raises(InvalidPageSizeError):
        TableView(store, test_settings, state=QueryState(page_size=3))
