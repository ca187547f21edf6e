"""
Query pipeline: search -> filter -> sort -> paginate.

`derive` is a pure function of (record store, query state) and is re-run in
full after every control change; nothing is cached or updated incrementally.
The control operations on `QueryPipeline` take a `QueryState` and return a new
one whose page index is valid for that state's own result set.

Usage:
    from tableview.infrastructure import sample_store
    from tableview.pipeline import QueryPipeline

    pipeline = QueryPipeline(sample_store())
    state = pipeline.initial_state()
    state = pipeline.set_filter(state, "role", "Admin")
    state = pipeline.set_sort_field(state, "name")
    view = pipeline.render(state)
    print(view.summary(), [r["name"] for r in view.page_records])
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from tableview.config import Settings, get_settings
from tableview.domain.models import QueryState, ResultView
from tableview.domain.values import Record, Scalar, to_text
from tableview.errors import InvalidPageSizeError
from tableview.infrastructure.record_store import RecordStore
from tableview.stages import paging
from tableview.stages.abstract import PipelineStage
from tableview.stages.filters import FilterStage
from tableview.stages.search import SearchStage
from tableview.stages.sorting import SortStage, toggle_sort
from tableview.utils.logging import get_logger

log = get_logger(__name__)

# Stages that narrow the record set, in the order they run.
NARROWING_STAGES: Tuple[str, ...] = ("search", "filter")
ORDERING_STAGE = "sort"


def _stage_factories() -> Dict[str, Callable[[], PipelineStage]]:
    """Registry of available stages."""
    return {
        "search": lambda: SearchStage(),
        "filter": lambda: FilterStage(),
        "sort": lambda: SortStage(),
    }


def available_stages() -> List[str]:
    """Stage names in execution order."""
    return [*NARROWING_STAGES, ORDERING_STAGE]


def _resolve_stage(name: str) -> PipelineStage:
    factories = _stage_factories()
    if name not in factories:
        raise ValueError(f"Unknown stage '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _narrow(records: Sequence[Record], state: QueryState) -> List[Record]:
    result = list(records)
    for name in NARROWING_STAGES:
        result = _resolve_stage(name).apply(result, state)
    return result


def derive(store: RecordStore, state: QueryState) -> ResultView:
    """
    Run the full pipeline for `state` and return the rendered page with its counters.

    Failures are contained here: an exception while searching or filtering
    yields an empty result set, an exception while sorting falls back to the
    filtered order. Either way the error is logged and reported on the view,
    and the counts always describe the rows actually returned.
    """
    records = store.records  # one snapshot for every stage of this pass
    error: Optional[str] = None

    try:
        filtered = _narrow(records, state)
    except Exception as exc:  # noqa: BLE001 - a failing stage must not blank the view
        log.exception("[DERIVE FAILED] narrowing stages", extra={"search": state.search_text})
        filtered = []
        error = f"filtering failed: {exc}"

    try:
        ordered = _resolve_stage(ORDERING_STAGE).apply(filtered, state)
    except Exception as exc:  # noqa: BLE001 - degrade to unsorted rows
        log.exception("[DERIVE FAILED] sort", extra={"sort_field": state.sort_field})
        ordered = list(filtered)
        error = error or f"sorting failed: {exc}"

    pages = paging.total_pages(len(ordered), state.page_size)
    index = paging.clamp_page(state.page_index, pages)
    if index != state.page_index:
        log.debug(
            "[PAGE CLAMPED] %s -> %s",
            state.page_index,
            index,
            extra={"requested_page": state.page_index, "page": index, "total_pages": pages},
        )
    rows = paging.page(ordered, index, state.page_size)
    first, last = paging.page_bounds(index, state.page_size, len(ordered))

    log.debug(
        "View derived",
        extra={
            "records": len(records),
            "matched": len(ordered),
            "page": index,
            "total_pages": pages,
        },
    )

    return ResultView(
        filtered_records=tuple(filtered),
        ordered_records=tuple(ordered),
        page_records=tuple(rows),
        total_pages=pages,
        page_index=index,
        page_size=state.page_size,
        sort_field=state.sort_field,
        sort_direction=state.sort_direction,
        first_entry=first,
        last_entry=last,
        error=error,
        schema=store.schema,
    )


class QueryPipeline:
    """
    Control surface over one record store.

    Parameters
    ----------
    store : RecordStore
        The immutable data being viewed.
    settings : Settings, optional
        Supplies the allowed page sizes, the default page size and the
        page-reset policy. Defaults to `get_settings()`.
    """

    def __init__(self, store: RecordStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or get_settings()

    @property
    def page_size_options(self) -> Tuple[int, ...]:
        return tuple(self.settings.page_size_options)

    def initial_state(self) -> QueryState:
        return QueryState(page_size=self.settings.default_page_size)

    def render(self, state: QueryState) -> ResultView:
        return derive(self.store, state)

    def settle(self, state: QueryState) -> QueryState:
        """Return `state` with its page index clamped into the current result set."""
        view = self.render(state)
        if view.page_index == state.page_index:
            return state
        return state.model_copy(update={"page_index": view.page_index})

    def distinct_values(self, field: str) -> Tuple[str, ...]:
        return self.store.distinct_values(field)

    def filter_options(self) -> Dict[str, List[str]]:
        return self.store.filter_options()

    # Query changes

    def _query_changed(self, state: QueryState, **update) -> QueryState:
        if self.settings.reset_page_on_query_change:
            update["page_index"] = 0
        return self.settle(state.model_copy(update=update))

    def set_search_text(self, state: QueryState, text: str) -> QueryState:
        return self._query_changed(state, search_text=text or "")

    def set_filter(self, state: QueryState, field: str, value: Optional[Scalar]) -> QueryState:
        """
        Require `field` to equal `value`. An empty or None value removes the constraint.
        """
        self.store.require_field(field)
        filters = dict(state.filters)
        if value is None or value == "":
            filters.pop(field, None)
        else:
            filters[field] = to_text(value)
        return self._query_changed(state, filters=filters)

    def clear_filters(self, state: QueryState) -> QueryState:
        return self._query_changed(state, filters={})

    def set_sort_field(self, state: QueryState, field: str) -> QueryState:
        self.store.require_field(field)
        sort_field, direction = toggle_sort(state.sort_field, state.sort_direction, field)
        return self.settle(
            state.model_copy(update={"sort_field": sort_field, "sort_direction": direction})
        )

    def check_page_size(self, size: int) -> int:
        if size not in self.settings.page_size_options:
            raise InvalidPageSizeError(size, self.settings.page_size_options)
        return size

    def set_page_size(self, state: QueryState, size: int) -> QueryState:
        self.check_page_size(size)
        return state.model_copy(update={"page_size": size, "page_index": 0})

    # Navigation

    def go_to_page(self, state: QueryState, index: int) -> QueryState:
        """
        Move to page `index`. Targets outside the current page range are ignored.
        """
        state = self.settle(state)
        pages = self.render(state).total_pages
        if not paging.is_valid_page(index, pages):
            log.debug(
                "[NAVIGATION REJECTED] page %s",
                index,
                extra={"requested_page": index, "total_pages": pages},
            )
            return state
        return state.model_copy(update={"page_index": index})

    def next_page(self, state: QueryState) -> QueryState:
        state = self.settle(state)
        return self.go_to_page(state, state.page_index + 1)

    def previous_page(self, state: QueryState) -> QueryState:
        state = self.settle(state)
        return self.go_to_page(state, state.page_index - 1)


__all__ = [
    "QueryPipeline",
    "available_stages",
    "derive",
]
