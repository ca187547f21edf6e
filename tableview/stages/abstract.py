"""
Stage interfaces for the query pipeline.

The search, filter and sort stages each take the records produced by the
previous stage plus the current query state and return a new list. Stages are
pure: they never mutate their input and keep no state between calls.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, Sequence, runtime_checkable

from tableview.domain.models import QueryState
from tableview.domain.values import Record


@runtime_checkable
class PipelineStage(Protocol):
    """
    Common interface of the record-narrowing and ordering stages.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of what the stage does.
    """

    name: str
    description: str

    def apply(self, records: Sequence[Record], state: QueryState) -> List[Record]:
        """
        Return the records this stage keeps, in the order it leaves them.

        Parameters
        ----------
        records : sequence of Record
            Output of the previous stage (or the whole store).
        state : QueryState
            Query controls in effect for this pass.
        """
        ...


class AbstractStage(abc.ABC):
    """
    Optional ABC helper for class-based stages.
    """

    name: str
    description: str

    @abc.abstractmethod
    def apply(self, records: Sequence[Record], state: QueryState) -> List[Record]:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = ["AbstractStage", "PipelineStage"]
