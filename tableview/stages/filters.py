"""
Per-column equality filter stage.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from tableview.domain.models import QueryState
from tableview.domain.values import Record, Scalar, field_value, to_text
from tableview.stages.abstract import AbstractStage


def matches(record: Record, filters: Mapping[str, Optional[Scalar]]) -> bool:
    """
    True when the record satisfies every active constraint (logical AND).

    Constraints that are None or empty impose no restriction. Both sides are
    compared in text form, so a filter value of "5" matches the number 5. A
    record missing a constrained field never matches.
    """
    for name, required in filters.items():
        if required is None or required == "":
            continue
        if to_text(field_value(record, name)) != to_text(required):
            return False
    return True


class FilterStage(AbstractStage):
    name: str = "filter"
    description: str = "Keep records whose fields equal every non-empty filter value."

    def apply(self, records: Sequence[Record], state: QueryState) -> List[Record]:
        active = state.active_filters()
        if not active:
            return list(records)
        return [record for record in records if matches(record, active)]


__all__ = ["FilterStage", "matches"]
