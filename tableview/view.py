"""
Session facade over a QueryPipeline.

`TableView` holds the query state of one logical view and recomputes the
result after every control call, which is what a rendering layer binds to.
It is not meant to be shared between concurrent consumers.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from tableview.config import Settings
from tableview.domain.models import QueryState, ResultView, SortDirection
from tableview.domain.values import Record, Scalar
from tableview.infrastructure.record_store import RecordStore
from tableview.pipeline import QueryPipeline


class TableView:
    def __init__(
        self,
        store: RecordStore,
        settings: Optional[Settings] = None,
        state: Optional[QueryState] = None,
    ) -> None:
        self.pipeline = QueryPipeline(store, settings)
        if state is not None:
            self.pipeline.check_page_size(state.page_size)
            self._state = self.pipeline.settle(state)
        else:
            self._state = self.pipeline.initial_state()
        self._result = self.pipeline.render(self._state)

    def _apply(self, state: QueryState) -> "TableView":
        self._state = state
        self._result = self.pipeline.render(state)
        return self

    # Control surface

    def set_search_text(self, text: str) -> "TableView":
        return self._apply(self.pipeline.set_search_text(self._state, text))

    def set_filter(self, field: str, value: Optional[Scalar]) -> "TableView":
        return self._apply(self.pipeline.set_filter(self._state, field, value))

    def clear_filters(self) -> "TableView":
        return self._apply(self.pipeline.clear_filters(self._state))

    def set_sort_field(self, field: str) -> "TableView":
        return self._apply(self.pipeline.set_sort_field(self._state, field))

    def set_page_size(self, size: int) -> "TableView":
        return self._apply(self.pipeline.set_page_size(self._state, size))

    def go_to_page(self, index: int) -> "TableView":
        return self._apply(self.pipeline.go_to_page(self._state, index))

    def next_page(self) -> "TableView":
        return self._apply(self.pipeline.next_page(self._state))

    def previous_page(self) -> "TableView":
        return self._apply(self.pipeline.previous_page(self._state))

    def reset(self) -> "TableView":
        return self._apply(self.pipeline.initial_state())

    # Output surface

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def result(self) -> ResultView:
        return self._result

    @property
    def page_records(self) -> Tuple[Record, ...]:
        return self._result.page_records

    @property
    def total_record_count(self) -> int:
        return self._result.total_record_count

    @property
    def total_pages(self) -> int:
        return self._result.total_pages

    @property
    def current_page_index(self) -> int:
        return self._result.page_index

    @property
    def sort_field(self) -> Optional[str]:
        return self._state.sort_field

    @property
    def sort_direction(self) -> SortDirection:
        return self._state.sort_direction

    @property
    def schema(self) -> Tuple[str, ...]:
        return self.pipeline.store.schema

    def distinct_values(self, field: str) -> Tuple[str, ...]:
        return self.pipeline.distinct_values(field)

    def filter_options(self) -> Dict[str, List[str]]:
        return self.pipeline.filter_options()


__all__ = ["TableView"]
