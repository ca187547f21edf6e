"""
Scalar value helpers shared by the search, filter and sort stages.

Records hold plain scalars (str, int, float, bool or None). Every stage that
compares values goes through these helpers so the coercion rules stay the same
across search, filtering, sorting and rendering.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Union

Scalar = Optional[Union[str, int, float, bool]]
Record = Mapping[str, Scalar]


def field_value(record: Record, field: str) -> Scalar:
    """Return the value of `field`, or None when the record lacks it."""
    return record.get(field)


def is_numeric(value: Any) -> bool:
    """True for ints and floats (bool counts as an int), excluding NaN."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return not math.isnan(value)
    return False


def to_text(value: Any) -> str:
    """
    Render a scalar as text for matching and display.

    None becomes the empty string and integral floats drop their trailing
    ".0", so 2.0 and 2 read the same.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["Record", "Scalar", "field_value", "is_numeric", "to_text"]
