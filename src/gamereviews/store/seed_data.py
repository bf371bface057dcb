"""
Seed data for the in-memory store.

Provides the built-in sample dataset and a loader for JSON seed files of the
same shape::

    {"games": [...], "reviews": [...], "authors": [...]}
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ..logging import get_logger
from .models import AuthorRecord, GameRecord, ReviewRecord

logger = get_logger(__name__)


class SeedData(BaseModel):
    games: list[GameRecord] = []
    reviews: list[ReviewRecord] = []
    authors: list[AuthorRecord] = []


def default_seed() -> SeedData:
    """Return a fresh copy of the built-in sample data."""
    return SeedData(
        games=[
            GameRecord(id="1", title="Zelda, Tears of the Kingdom", platform=["Switch"]),
            GameRecord(id="2", title="Final Fantasy 7 Remake", platform=["PS5", "Xbox"]),
            GameRecord(id="3", title="Elden Ring", platform=["PS5", "Xbox", "PC"]),
            GameRecord(id="4", title="Mario Kart", platform=["Switch"]),
            GameRecord(id="5", title="Pokemon Scarlet", platform=["PS5", "Xbox", "PC"]),
        ],
        authors=[
            AuthorRecord(id="1", name="mario", verified=True),
            AuthorRecord(id="2", name="yoshi", verified=False),
            AuthorRecord(id="3", name="peach", verified=True),
        ],
        reviews=[
            ReviewRecord(id="1", rating=9, content="lorem ipsum", author_id="1", game_id="2"),
            ReviewRecord(id="2", rating=10, content="lorem ipsum", author_id="2", game_id="1"),
            ReviewRecord(id="3", rating=7, content="lorem ipsum", author_id="3", game_id="3"),
            ReviewRecord(id="4", rating=5, content="lorem ipsum", author_id="2", game_id="4"),
            ReviewRecord(id="5", rating=8, content="lorem ipsum", author_id="2", game_id="5"),
            ReviewRecord(id="6", rating=7, content="lorem ipsum", author_id="1", game_id="2"),
            ReviewRecord(id="7", rating=10, content="lorem ipsum", author_id="3", game_id="1"),
        ],
    )


def load_seed_file(path: str | Path) -> SeedData:
    """
    Load seed data from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the document does not match the seed shape
    """
    seed_path = Path(path)
    seed = SeedData.model_validate_json(seed_path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded seed file",
        path=str(seed_path),
        games=len(seed.games),
        reviews=len(seed.reviews),
        authors=len(seed.authors),
    )
    return seed
