from __future__ import annotations

from rich.console import Console

from tableview.domain.models import QueryState, SortDirection
from tableview.pipeline import derive
from tableview.reporter import column_header, page_caption, print_filter_options, print_page


def _console() -> Console:
    return Console(record=True, width=140, color_system=None)


def test_sort_indicator_on_active_column(store):
    view = derive(store, QueryState(page_size=2, sort_field="name", sort_direction=SortDirection.DESCENDING))
    assert column_header("name", view) == "name ↓"
    assert column_header("role", view) == "role"


def test_caption_reports_counts_and_page(store):
    view = derive(store, QueryState(page_size=2, page_index=1))
    assert page_caption(view) == "Showing 3 to 4 of 7 entries │ Page 2 of 4"


def test_print_page_renders_rows_and_summary(store):
    console = _console()
    print_page(derive(store, QueryState(page_size=2, sort_field="id")), console=console)
    text = console.export_text()
    assert "id ↑" in text
    assert "John Doe" in text
    assert "Jane Smith" in text
    assert "Alice Johnson" not in text
    assert "Showing 1 to 2 of 7 entries" in text


def test_print_page_for_empty_result(store):
    console = _console()
    print_page(derive(store, QueryState(page_size=2, search_text="xyz")), console=console)
    text = console.export_text()
    assert "No matching records." in text
    assert "Showing 0 to 0 of 0 entries" in text


def test_print_filter_options(store):
    console = _console()
    print_filter_options(store.filter_options(), console=console)
    text = console.export_text()
    assert "role" in text
    assert "Admin, User" in text
    assert "Active, Inactive" in text
