"""
Fixed-size pagination helpers.

An empty result set has zero pages but still renders a single empty page 0, so
the valid page indices are always `[0, last_page_index(total_pages)]`.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from tableview.domain.values import Record


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def last_page_index(pages: int) -> int:
    return max(pages - 1, 0)


def is_valid_page(index: int, pages: int) -> bool:
    return 0 <= index <= last_page_index(pages)


def clamp_page(index: int, pages: int) -> int:
    return min(max(index, 0), last_page_index(pages))


def page(records: Sequence[Record], page_index: int, page_size: int) -> List[Record]:
    """Slice one page out of `records`, clipped to the collection bounds."""
    start = max(page_index, 0) * page_size
    return list(records[start:start + page_size])


def page_bounds(page_index: int, page_size: int, count: int) -> Tuple[int, int]:
    """
    1-based (first, last) entry numbers shown on a page; (0, 0) when empty.
    """
    first = min(page_index * page_size + 1, count)
    last = min((page_index + 1) * page_size, count)
    return first, last


__all__ = [
    "clamp_page",
    "is_valid_page",
    "last_page_index",
    "page",
    "page_bounds",
    "total_pages",
]
