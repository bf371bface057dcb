"""
Mutation operations on the games collection
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger
from .accessors import find_by_id
from .models import GameRecord

if TYPE_CHECKING:
    from .data_store import DataStore
    from .models import GameCreate, GameUpdate

logger = get_logger(__name__)


def create_game(store: DataStore, data: GameCreate) -> GameRecord:
    """
    Create a game with a fresh identifier and append it to the collection.

    Returns:
        The stored game, including its assigned identifier
    """
    game_id = store.id_generator({game.id for game in store.games})
    game = GameRecord(id=game_id, title=data.title, platform=list(data.platform))
    store.games.append(game)

    logger.info("Game created", game_id=game.id, title=game.title)
    return game


def delete_game(store: DataStore, id: str | int) -> list[GameRecord]:
    """
    Remove every game with the given identifier.

    Unknown identifiers are a no-op.

    Returns:
        The remaining games collection
    """
    key = str(id)
    before = len(store.games)
    store.games[:] = [game for game in store.games if game.id != key]

    removed = before - len(store.games)
    if removed:
        logger.info("Game deleted", game_id=key)
    else:
        logger.info("Game not found for delete", game_id=key)
    return store.games


def update_game(store: DataStore, id: str | int, updates: GameUpdate) -> GameRecord | None:
    """
    Merge ``updates`` into the game with the given identifier.

    Fields not provided in ``updates`` keep their current values.

    Returns:
        The updated game, or None if no game has this identifier
    """
    key = str(id)
    changes = updates.changes()
    store.games[:] = [
        game.model_copy(update=changes) if game.id == key else game for game in store.games
    ]

    game = find_by_id(store.games, key)
    if game is None:
        logger.info("Game not found for update", game_id=key)
    else:
        logger.info("Game updated", game_id=key, fields=sorted(changes))
    return game
