"""
Pytest configuration for the table view engine.

Provides fixtures for:
- Settings with explicit paging values (independent of the environment)
- The 7-user sample store, a pipeline and a session view over it
- Restoring root logging after tests that reconfigure it
"""

from __future__ import annotations

import logging
from typing import Generator, List

import pytest

from tableview.config import Settings, get_settings
from tableview.infrastructure.record_store import RecordStore
from tableview.infrastructure.sample_data import SAMPLE_USERS, sample_store
from tableview.pipeline import QueryPipeline
from tableview.view import TableView


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fresh_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        page_size_options=[2, 5, 10, 25],
        default_page_size=2,
        reset_page_on_query_change=True,
        log_level="DEBUG",
    )


@pytest.fixture
def clamp_only_settings() -> Settings:
    """Settings that keep the page on search/filter changes, leaving only clamping."""
    return Settings(
        page_size_options=[2, 5, 10, 25],
        default_page_size=2,
        reset_page_on_query_change=False,
    )


@pytest.fixture
def users() -> List[dict]:
    return [dict(row) for row in SAMPLE_USERS]


@pytest.fixture
def store() -> RecordStore:
    return sample_store()


@pytest.fixture
def pipeline(store: RecordStore, test_settings: Settings) -> QueryPipeline:
    return QueryPipeline(store, test_settings)


@pytest.fixture
def view(store: RecordStore, test_settings: Settings) -> TableView:
    return TableView(store, test_settings)
