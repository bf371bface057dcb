"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from typing import Any

import pytest

from gamereviews.store import AuthorRecord, DataStore, GameRecord, ReviewRecord


@pytest.fixture
def store() -> DataStore:
    """A small isolated store with one dangling review."""
    return DataStore(
        games=[
            GameRecord(id="1", title="Zelda", platform=["Switch"]),
            GameRecord(id="2", title="Elden Ring", platform=["PS5", "PC"]),
            GameRecord(id="3", title="Hades", platform=["PC", "Switch"]),
        ],
        authors=[
            AuthorRecord(id="1", name="mario", verified=True),
            AuthorRecord(id="2", name="yoshi", verified=False),
        ],
        reviews=[
            ReviewRecord(id="1", rating=9, content="great", game_id="1", author_id="1"),
            ReviewRecord(id="2", rating=7, content="hard", game_id="2", author_id="2"),
            ReviewRecord(id="3", rating=10, content="again", game_id="1", author_id="2"),
            ReviewRecord(id="4", rating=3, content="who?", game_id="99", author_id="42"),
        ],
    )


@pytest.fixture
def seeded_store() -> DataStore:
    """A store built from the built-in sample data."""
    return DataStore.from_seed()


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep GAMEREVIEWS_* variables from the host out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("GAMEREVIEWS_"):
            monkeypatch.delenv(key)
    yield


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
