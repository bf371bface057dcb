"""
In-memory data store holding the games, reviews and authors collections
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..logging import get_logger
from .identifiers import IdGenerator, build_id_generator
from .models import AuthorRecord, GameRecord, ReviewRecord

if TYPE_CHECKING:
    from .seed_data import SeedData

logger = get_logger(__name__)


class DuplicateIdentifierError(ValueError):
    """Raised when a collection holds the same identifier more than once."""

    def __init__(self, collection: str, ids: Sequence[str]):
        self.collection = collection
        self.ids = list(ids)
        super().__init__(f"Duplicate identifiers in {collection}: {', '.join(self.ids)}")


def _check_unique(collection: str, records: Iterable[GameRecord | ReviewRecord | AuthorRecord]):
    counts = Counter(record.id for record in records)
    duplicates = [record_id for record_id, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateIdentifierError(collection, duplicates)


class DataStore:
    """
    Owner of the three record collections.

    ``games``, ``reviews`` and ``authors`` are live lists: callers read and
    mutate them directly, and every change is visible to later calls.
    """

    def __init__(
        self,
        games: Iterable[GameRecord] = (),
        reviews: Iterable[ReviewRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        id_generator: IdGenerator | None = None,
    ):
        self.games: list[GameRecord] = list(games)
        self.reviews: list[ReviewRecord] = list(reviews)
        self.authors: list[AuthorRecord] = list(authors)

        _check_unique("games", self.games)
        _check_unique("reviews", self.reviews)
        _check_unique("authors", self.authors)

        if id_generator is None:
            id_generator = build_id_generator("sequential", (game.id for game in self.games))
        self.id_generator = id_generator

    @classmethod
    def from_seed(cls, seed: SeedData | None = None, id_strategy: str = "sequential") -> DataStore:
        """Build a store from a seed document, defaulting to the built-in sample data."""
        from .seed_data import default_seed

        if seed is None:
            seed = default_seed()

        store = cls(
            games=seed.games,
            reviews=seed.reviews,
            authors=seed.authors,
            id_generator=build_id_generator(id_strategy, (game.id for game in seed.games)),
        )
        logger.info(
            "Data store seeded",
            games=len(store.games),
            reviews=len(store.reviews),
            authors=len(store.authors),
            id_strategy=id_strategy,
        )
        return store

    def __repr__(self) -> str:
        return (
            f"DataStore(games={len(self.games)}, reviews={len(self.reviews)}, "
            f"authors={len(self.authors)})"
        )
