"""
Immutable record store backing a table view.

The store is filled once from a data source and never changes afterwards. Each
record is frozen behind a read-only mapping and the collection itself is a
tuple, so a pipeline pass that reads `store.records` once sees one consistent
snapshot for all of its stages.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from tableview.domain.values import Record, Scalar, field_value, to_text
from tableview.errors import UnknownFieldError
from tableview.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Ordered, read-only collection of uniformly-keyed records.

    Parameters
    ----------
    records : iterable of mappings
        Source rows. The schema is the key order of the first row.
    filterable_fields : sequence of str, optional
        Fields offered as equality filters. Defaults to every schema field.
    """

    def __init__(
        self,
        records: Iterable[Mapping[str, Scalar]],
        filterable_fields: Optional[Sequence[str]] = None,
    ) -> None:
        self._records: Tuple[Record, ...] = tuple(
            MappingProxyType(dict(record)) for record in records
        )
        self._schema: Tuple[str, ...] = tuple(self._records[0].keys()) if self._records else ()

        if filterable_fields is None:
            self._filterable: Tuple[str, ...] = self._schema
        else:
            for name in filterable_fields:
                self.require_field(name)
            self._filterable = tuple(filterable_fields)

        self._distinct: Dict[str, Tuple[str, ...]] = {}
        log.debug(
            "Record store loaded",
            extra={"records": len(self._records), "schema": list(self._schema)},
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Scalar]],
        filterable_fields: Optional[Sequence[str]] = None,
    ) -> "RecordStore":
        return cls(records, filterable_fields=filterable_fields)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def schema(self) -> Tuple[str, ...]:
        return self._schema

    @property
    def filterable_fields(self) -> Tuple[str, ...]:
        return self._filterable

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def has_field(self, name: str) -> bool:
        return name in self._schema

    def require_field(self, name: str) -> str:
        if name not in self._schema:
            raise UnknownFieldError(name, self._schema)
        return name

    def distinct_values(self, name: str) -> Tuple[str, ...]:
        """
        Distinct text values of `name` across the whole store, in first-seen order.

        Always computed from the full store, never from a filtered subset, so
        filter options stay available while filters narrow the results.
        Records missing the field contribute nothing.
        """
        self.require_field(name)
        if name not in self._distinct:
            seen: Dict[str, None] = {}
            for record in self._records:
                value = field_value(record, name)
                if value is None:
                    continue
                seen.setdefault(to_text(value), None)
            self._distinct[name] = tuple(seen)
        return self._distinct[name]

    def filter_options(self) -> Dict[str, List[str]]:
        """Distinct values for every filterable field."""
        return {name: list(self.distinct_values(name)) for name in self._filterable}


__all__ = ["RecordStore"]
