"""
Exception types raised at the control surface of the table view engine.

Navigation outside the page bounds is not an error and never raises; these
types cover requests that cannot be honoured at all.
"""

from __future__ import annotations

from typing import Iterable, Sequence


class TableViewError(Exception):
    """Base class for table view errors."""


class UnknownFieldError(TableViewError, KeyError):
    def __init__(self, field: str, schema: Sequence[str]) -> None:
        self.field = field
        self.schema = tuple(schema)
        super().__init__(f"Unknown field '{field}'. Available: {', '.join(self.schema)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidPageSizeError(TableViewError, ValueError):
    def __init__(self, size: int, allowed: Iterable[int]) -> None:
        self.size = size
        self.allowed = tuple(allowed)
        super().__init__(
            f"Page size {size} is not allowed. Choose one of: "
            + ", ".join(str(s) for s in self.allowed)
        )


class RecordLoadError(TableViewError):
    """The data source could not be read into a record store."""


__all__ = [
    "InvalidPageSizeError",
    "RecordLoadError",
    "TableViewError",
    "UnknownFieldError",
]
