"""
Bundled sample data set used by the CLI when no data file is configured.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from tableview.domain.values import Scalar
from tableview.infrastructure.record_store import RecordStore

SAMPLE_USERS: List[Dict[str, Scalar]] = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin", "status": "Active"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "User", "status": "Inactive"},
    {"id": 3, "name": "Alice Johnson", "email": "alice@example.com", "role": "Admin", "status": "Active"},
    {"id": 4, "name": "Charlie Brown", "email": "charlie@example.com", "role": "User", "status": "Inactive"},
    {"id": 5, "name": "David Wilson", "email": "david@example.com", "role": "Admin", "status": "Active"},
    {"id": 6, "name": "Eve Davis", "email": "eve@example.com", "role": "User", "status": "Active"},
    {"id": 7, "name": "Frank Miller", "email": "frank@example.com", "role": "Admin", "status": "Inactive"},
]

SAMPLE_FILTERABLE_FIELDS = ("role", "status")


def sample_store(filterable_fields: Optional[Sequence[str]] = SAMPLE_FILTERABLE_FIELDS) -> RecordStore:
    return RecordStore.from_records(SAMPLE_USERS, filterable_fields=filterable_fields)


__all__ = ["SAMPLE_FILTERABLE_FIELDS", "SAMPLE_USERS", "sample_store"]
