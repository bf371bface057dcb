from __future__ import annotations

from strawberry.dataloader import DataLoader

from ..store.accessors import find_many_by_id
from ..store.data_store import DataStore
from ..store.models import AuthorRecord, GameRecord


class Loaders:
    """Per-request batch loaders over a data store."""

    def __init__(self, store: DataStore):
        self.store = store
        self.game_loader: DataLoader[str, GameRecord | None] = DataLoader(load_fn=self.load_games)
        self.author_loader: DataLoader[str, AuthorRecord | None] = DataLoader(
            load_fn=self.load_authors
        )

    async def load_games(self, keys: list[str]) -> list[GameRecord | None]:
        """Batch load games by ID."""
        return find_many_by_id(self.store.games, keys)

    async def load_authors(self, keys: list[str]) -> list[AuthorRecord | None]:
        """Batch load authors by ID."""
        return find_many_by_id(self.store.authors, keys)
