"""
Stages package for the query pipeline.

Re-exports the stage interfaces and the concrete search, filter and sort stages
so downstream code can import from `tableview.stages` directly. Pagination is a
set of plain functions in `tableview.stages.paging`.
"""

from tableview.stages.abstract import AbstractStage, PipelineStage
from tableview.stages.filters import FilterStage
from tableview.stages.search import SearchStage
from tableview.stages.sorting import SortStage

__all__ = [
    # Abstracts
    "AbstractStage",
    "PipelineStage",
    # Concrete stages
    "FilterStage",
    "SearchStage",
    "SortStage",
]
