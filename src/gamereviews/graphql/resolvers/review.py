from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import accessors
from ..context import get_loaders_from_info, get_store_from_info
from ..converters import to_author, to_game, to_review

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.game import Game
    from ..types.review import Review


async def resolve_reviews(info: strawberry.Info) -> list[Review]:
    store = get_store_from_info(info)
    return [to_review(review) for review in store.reviews]


async def resolve_review_by_id(info: strawberry.Info, id: str) -> Review | None:
    store = get_store_from_info(info)
    review = accessors.find_by_id(store.reviews, id)
    return to_review(review) if review is not None else None


async def resolve_review_game(review: Review, info: strawberry.Info) -> Game | None:
    """Resolve the reviewed game through the request's game loader."""
    game = await get_loaders_from_info(info).game_loader.load(review.game_id)
    return to_game(game) if game is not None else None


async def resolve_review_author(review: Review, info: strawberry.Info) -> Author | None:
    """Resolve the review's author through the request's author loader."""
    author = await get_loaders_from_info(info).author_loader.load(review.author_id)
    return to_author(author) if author is not None else None
