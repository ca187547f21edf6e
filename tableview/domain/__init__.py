"""
Domain package for the table view engine.

Exports the query state, result view and scalar helpers used by the stages and
the pipeline. Keep this package focused on data definitions.
"""

from tableview.domain.models import QueryState, ResultView, SortDirection
from tableview.domain.values import Record, Scalar, field_value, is_numeric, to_text

__all__ = [
    "QueryState",
    "Record",
    "ResultView",
    "Scalar",
    "SortDirection",
    "field_value",
    "is_numeric",
    "to_text",
]
