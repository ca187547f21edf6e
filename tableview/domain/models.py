"""
Domain models for the table view engine.

`QueryState` is the only mutable piece of a view session and is modelled as a
frozen pydantic value object: control operations return a new instance rather
than editing one in place, and any state can be dumped to JSON and loaded back.
`ResultView` is the derived output of one pipeline pass and is never stored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

from tableview.domain.values import Record


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING

    @property
    def arrow(self) -> str:
        return "↑" if self is SortDirection.ASCENDING else "↓"


class QueryState(BaseModel):
    """
    Query controls of a single table view.
    """

    search_text: str = Field("", description="Free-text query matched against every field.")
    filters: Dict[str, str] = Field(
        default_factory=dict,
        description="Field -> required value. Empty values impose no constraint.",
    )
    sort_field: Optional[str] = Field(None, description="Active sort field, if any.")
    sort_direction: SortDirection = Field(SortDirection.ASCENDING)
    page_index: int = Field(0, ge=0, description="Zero-based page index.")
    page_size: int = Field(..., gt=0, description="Records per page.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    def active_filters(self) -> Dict[str, str]:
        """Filters with a non-empty constraint value."""
        return {name: value for name, value in self.filters.items() if value}


@dataclass(frozen=True)
class ResultView:
    """
    Derived view of the records for one query state.

    `page_index` is the index actually rendered, clamped into the bounds of
    `ordered_records`. `first_entry`/`last_entry` are the 1-based bounds of the
    "Showing X to Y of Z" line and are both 0 for an empty result set.
    """

    filtered_records: Tuple[Record, ...]
    ordered_records: Tuple[Record, ...]
    page_records: Tuple[Record, ...]
    total_pages: int
    page_index: int
    page_size: int
    sort_field: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASCENDING
    first_entry: int = 0
    last_entry: int = 0
    error: Optional[str] = None
    schema: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_record_count(self) -> int:
        return len(self.ordered_records)

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages - 1

    def summary(self) -> str:
        return (
            f"Showing {self.first_entry} to {self.last_entry} "
            f"of {self.total_record_count} entries"
        )

    def to_dict(self) -> dict:
        """JSON-friendly payload for the rendered page and its counters."""
        return {
            "records": [dict(r) for r in self.page_records],
            "total_record_count": self.total_record_count,
            "total_pages": self.total_pages,
            "page_index": self.page_index,
            "page_size": self.page_size,
            "sort_field": self.sort_field,
            "sort_direction": self.sort_direction.value,
            "first_entry": self.first_entry,
            "last_entry": self.last_entry,
            "error": self.error,
        }


__all__ = ["QueryState", "ResultView", "SortDirection"]
