"""Tests for game mutation operations."""

import pytest

from gamereviews.store import (
    DataStore,
    GameCreate,
    GameRecord,
    GameUpdate,
    create_game,
    delete_game,
    find_by_id,
    update_game,
)


@pytest.mark.unit
class TestCreateGame:
    def test_appends_game_with_fresh_id(self, store):
        existing_ids = {g.id for g in store.games}

        game = create_game(store, GameCreate(title="Celeste", platform=["Switch"]))

        assert game.id not in existing_ids
        assert store.games[-1] is game
        assert find_by_id(store.games, game.id) is game
        assert game.title == "Celeste"
        assert game.platform == ["Switch"]

    def test_single_seed_scenario(self):
        store = DataStore(games=[GameRecord(id=1, title="Zelda", platform=[])])

        game = create_game(store, GameCreate(title="Celeste", platform=["Switch"]))

        assert game.id != "1"
        assert game.title == "Celeste"
        assert len(store.games) == 2

    def test_ids_stay_unique_across_creates(self, store):
        created = [
            create_game(store, GameCreate(title=f"Game {n}", platform=["PC"])) for n in range(5)
        ]

        ids = [g.id for g in store.games]
        assert len(ids) == len(set(ids))
        assert [g.id for g in created] == ["4", "5", "6", "7", "8"]

    def test_id_reused_after_delete_is_not_reissued(self, store):
        delete_game(store, "3")

        game = create_game(store, GameCreate(title="Celeste", platform=["Switch"]))

        assert game.id == "4"


@pytest.mark.unit
class TestDeleteGame:
    def test_removes_game_and_returns_remaining(self, store):
        remaining = delete_game(store, "2")

        assert [g.id for g in remaining] == ["1", "3"]
        assert find_by_id(store.games, "2") is None
        assert len(store.games) == 2

    def test_result_is_the_live_collection(self, store):
        games = store.games

        remaining = delete_game(store, "1")

        assert remaining is games
        assert store.games is games

    def test_unknown_id_is_noop(self, store):
        before = list(store.games)

        remaining = delete_game(store, "404")

        assert remaining == before
        assert store.games == before

    def test_reviews_are_left_dangling(self, store):
        delete_game(store, "1")

        assert any(r.game_id == "1" for r in store.reviews)


@pytest.mark.unit
class TestUpdateGame:
    def test_title_only(self, store):
        game = update_game(store, "2", GameUpdate(title="Elden Ring GOTY"))

        assert game.title == "Elden Ring GOTY"
        assert game.platform == ["PS5", "PC"]
        assert store.games[1] is game

    def test_platform_only(self, store):
        game = update_game(store, "1", GameUpdate(platform=["Switch", "Switch 2"]))

        assert game.title == "Zelda"
        assert game.platform == ["Switch", "Switch 2"]

    def test_null_fields_are_preserved(self, store):
        game = update_game(store, "3", GameUpdate(title=None, platform=["PC"]))

        assert game.title == "Hades"
        assert game.platform == ["PC"]

    def test_empty_update_leaves_game_unchanged(self, store):
        before = store.games[0]

        game = update_game(store, "1", GameUpdate())

        assert game == before

    def test_other_games_pass_through(self, store):
        others = [store.games[0], store.games[2]]

        update_game(store, "2", GameUpdate(title="X"))

        assert store.games[0] is others[0]
        assert store.games[2] is others[1]

    def test_unknown_id_returns_none(self, store):
        before = list(store.games)

        assert update_game(store, "404", GameUpdate(title="X")) is None
        assert store.games == before
