from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import accessors, mutations
from ...store.models import GameCreate, GameUpdate
from ..context import get_loaders_from_info, get_store_from_info
from ..converters import to_game, to_review

if TYPE_CHECKING:
    from ..mutations.root import AddGameInput, UpdateGameInput
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
async def resolve_games(info: strawberry.Info) -> list[Game]:
    store = get_store_from_info(info)
    return [to_game(game) for game in store.games]


async def resolve_game_by_id(info: strawberry.Info, id: str) -> Game | None:
    """Resolve a game by its ID, or None if it does not exist."""
    store = get_store_from_info(info)
    game = accessors.find_by_id(store.games, id)
    if game is None:
        logger.debug("Game not found", game_id=id)
        return None
    return to_game(game)


# Field resolvers
async def resolve_game_reviews(game: Game, info: strawberry.Info) -> list[Review]:
    store = get_store_from_info(info)
    return [to_review(review) for review in accessors.reviews_for_game(store, game.id)]


# Mutation resolvers
async def add_game(info: strawberry.Info, input: AddGameInput) -> Game:
    """Create a game from the GraphQL input."""
    store = get_store_from_info(info)
    data = GameCreate(title=input.title, platform=list(input.platform))
    game = mutations.create_game(store, data)
    get_loaders_from_info(info).game_loader.clear_all()
    return to_game(game)


async def delete_game(info: strawberry.Info, id: str) -> list[Game]:
    """Delete a game and return the games that remain."""
    store = get_store_from_info(info)
    remaining = mutations.delete_game(store, id)
    get_loaders_from_info(info).game_loader.clear_all()
    return [to_game(game) for game in remaining]


async def update_game(
    info: strawberry.Info, id: str, input: UpdateGameInput | None
) -> Game | None:
    """Apply a partial update to a game."""
    store = get_store_from_info(info)
    if input is None:
        updates = GameUpdate()
    else:
        updates = GameUpdate(title=input.title, platform=input.platform)

    game = mutations.update_game(store, id, updates)
    # Later fields in the same operation must not see the cached pre-update game
    get_loaders_from_info(info).game_loader.clear_all()
    return to_game(game) if game is not None else None
