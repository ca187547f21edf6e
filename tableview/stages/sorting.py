"""
Single-column sort stage.

Comparison policy
-----------------
- Missing values (None) sort lowest.
- When every present value of the column is numeric the column sorts
  numerically.
- Otherwise every value is compared by its text form in ordinal (code point)
  order. A column mixing numbers and strings therefore still has a total
  order instead of raising TypeError.
- Descending flips the sign of the comparison. The underlying sort is stable,
  so records with equal keys keep their incoming relative order in both
  directions.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from tableview.domain.models import QueryState, SortDirection
from tableview.domain.values import Record, Scalar, field_value, is_numeric, to_text
from tableview.stages.abstract import AbstractStage

SortKey = Tuple


def column_is_numeric(values: Iterable[Scalar]) -> bool:
    return all(is_numeric(value) for value in values if value is not None)


def sort_key(value: Scalar, numeric: bool) -> SortKey:
    if value is None:
        return (0,)
    if numeric:
        return (1, value)
    return (1, to_text(value))


def compare(a: Record, b: Record, field: str, direction: SortDirection = SortDirection.ASCENDING) -> int:
    """
    Compare two records on `field`, returning -1, 0 or 1.
    """
    left = field_value(a, field)
    right = field_value(b, field)
    numeric = column_is_numeric((left, right))
    ka, kb = sort_key(left, numeric), sort_key(right, numeric)
    base = (ka > kb) - (ka < kb)
    return -base if direction is SortDirection.DESCENDING else base


def sort_records(
    records: Sequence[Record],
    field: Optional[str],
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[Record]:
    """
    Return `records` ordered by `field`. With no field the input order is kept.
    """
    if not field:
        return list(records)
    numeric = column_is_numeric(field_value(record, field) for record in records)
    # sorted() keeps equal keys in input order even with reverse=True
    return sorted(
        records,
        key=lambda record: sort_key(field_value(record, field), numeric),
        reverse=direction is SortDirection.DESCENDING,
    )


def toggle_sort(
    current_field: Optional[str],
    current_direction: SortDirection,
    field: str,
) -> Tuple[str, SortDirection]:
    """
    Selecting the active field flips the direction; any other field starts ascending.
    """
    if field == current_field:
        return field, current_direction.flipped()
    return field, SortDirection.ASCENDING


class SortStage(AbstractStage):
    name: str = "sort"
    description: str = "Order records by the active sort field and direction (stable)."

    def apply(self, records: Sequence[Record], state: QueryState) -> List[Record]:
        return sort_records(records, state.sort_field, state.sort_direction)


__all__ = ["SortStage", "column_is_numeric", "compare", "sort_key", "sort_records", "toggle_sort"]
