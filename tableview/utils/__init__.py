"""
Utilities package for the table view engine.

Exports shared helpers for logging and profiling. Keep this package lightweight
and free of table logic.
"""

from tableview.utils.logging import configure_logging, get_logger
from tableview.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
