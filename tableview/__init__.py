"""
tableview - in-memory tabular data view engine.

Given a fixed collection of uniformly-shaped records, this package provides:

- Free-text search across every field
- Per-column equality filters
- Single-column, stable sorting with ascending/descending toggle
- Fixed-size pagination that stays in bounds as the result set changes

Everything is recomputed from an explicit, serialisable query state on every
control change, so the engine runs and tests without any UI framework.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from tableview.config import Settings, get_settings
from tableview.domain.models import QueryState, ResultView, SortDirection
from tableview.errors import (
    InvalidPageSizeError,
    RecordLoadError,
    TableViewError,
    UnknownFieldError,
)
from tableview.infrastructure import RecordStore, load_records, sample_store
from tableview.pipeline import QueryPipeline, available_stages, derive
from tableview.utils.logging import configure_logging, get_logger
from tableview.view import TableView

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "QueryState",
    "ResultView",
    "SortDirection",
    # Data
    "RecordStore",
    "load_records",
    "sample_store",
    # Pipeline
    "QueryPipeline",
    "TableView",
    "available_stages",
    "derive",
    # Errors
    "InvalidPageSizeError",
    "RecordLoadError",
    "TableViewError",
    "UnknownFieldError",
    # Logging
    "configure_logging",
    "get_logger",
]
