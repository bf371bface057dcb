"""Tests for the data store and seed loading."""

import json

import pytest
from pydantic import ValidationError

from gamereviews.store import (
    DataStore,
    DuplicateIdentifierError,
    GameCreate,
    GameRecord,
    create_game,
)
from gamereviews.store.identifiers import UUIDIdGenerator
from gamereviews.store.seed_data import SeedData, default_seed, load_seed_file


@pytest.mark.unit
class TestDataStore:
    def test_collections_are_live_lists(self, store):
        store.games.append(GameRecord(id="10", title="Tetris", platform=["GB"]))

        assert store.games[-1].title == "Tetris"

    def test_duplicate_ids_rejected(self):
        games = [
            GameRecord(id="1", title="A", platform=[]),
            GameRecord(id="1", title="B", platform=[]),
        ]

        with pytest.raises(DuplicateIdentifierError) as exc_info:
            DataStore(games=games)

        assert exc_info.value.collection == "games"
        assert exc_info.value.ids == ["1"]

    def test_same_id_in_different_collections_is_allowed(self, store):
        assert store.games[0].id == store.authors[0].id == store.reviews[0].id

    def test_stores_are_isolated(self):
        first = DataStore.from_seed()
        second = DataStore.from_seed()

        create_game(first, GameCreate(title="Celeste", platform=["Switch"]))

        assert len(first.games) == len(second.games) + 1

    def test_records_are_immutable(self, store):
        with pytest.raises(ValidationError):
            store.games[0].title = "changed"


@pytest.mark.unit
class TestSeed:
    def test_default_seed(self, seeded_store):
        assert len(seeded_store.games) == 5
        assert len(seeded_store.authors) == 3
        assert len(seeded_store.reviews) == 7

    def test_default_seed_is_a_fresh_copy(self):
        first = default_seed()
        first.games.clear()

        assert len(default_seed().games) == 5

    def test_sequential_ids_continue_after_seed(self, seeded_store):
        game = create_game(seeded_store, GameCreate(title="Celeste", platform=["Switch"]))

        assert game.id == "6"

    def test_uuid_strategy(self):
        store = DataStore.from_seed(id_strategy="uuid")

        assert isinstance(store.id_generator, UUIDIdGenerator)

    def test_load_seed_file(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(
            json.dumps(
                {
                    "games": [{"id": 1, "title": "Zelda", "platform": ["Switch"]}],
                    "authors": [{"id": "a", "name": "link", "verified": True}],
                    "reviews": [
                        {"id": "r", "rating": 8, "content": "ok", "game_id": 1, "author_id": "a"}
                    ],
                }
            )
        )

        seed = load_seed_file(path)

        assert isinstance(seed, SeedData)
        assert seed.games[0].id == "1"
        assert seed.reviews[0].game_id == "1"

    def test_load_seed_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_seed_file(tmp_path / "missing.json")

    def test_load_seed_file_invalid(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text('{"games": [{"id": "1"}]}')

        with pytest.raises(ValidationError):
            load_seed_file(path)
