"""
Free-text search stage.

A record matches when ANY of its values contains the query text,
case-insensitively. Numbers and other non-string values are converted to text
first rather than skipped, so "3" finds the record with id 3.
"""

from __future__ import annotations

from typing import List, Sequence

from tableview.domain.models import QueryState
from tableview.domain.values import Record, to_text
from tableview.stages.abstract import AbstractStage


def matches(record: Record, query_text: str) -> bool:
    if not query_text:
        return True
    needle = query_text.lower()
    return any(needle in to_text(value).lower() for value in record.values())


class SearchStage(AbstractStage):
    name: str = "search"
    description: str = "Keep records where any field contains the search text (case-insensitive)."

    def apply(self, records: Sequence[Record], state: QueryState) -> List[Record]:
        if not state.search_text:
            return list(records)
        return [record for record in records if matches(record, state.search_text)]


__all__ = ["SearchStage", "matches"]
