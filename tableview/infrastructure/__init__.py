"""
Infrastructure package for the table view engine.

Covers the data-source boundary: the immutable record store and the loaders
that fill it. Keep this layer free of query logic.
"""

from tableview.infrastructure.loaders import load_csv, load_json, load_records
from tableview.infrastructure.record_store import RecordStore
from tableview.infrastructure.sample_data import SAMPLE_USERS, sample_store

__all__ = [
    "RecordStore",
    "SAMPLE_USERS",
    "load_csv",
    "load_json",
    "load_records",
    "sample_store",
]
