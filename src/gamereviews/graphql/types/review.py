"""
Review GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author
    from .game import Game


@strawberry.type
class Review:
    """Review type for GraphQL API."""

    id: strawberry.ID
    rating: int
    content: str
    game_id: strawberry.Private[str]
    author_id: strawberry.Private[str]

    @strawberry.field
    async def game(
        self, info: strawberry.Info
    ) -> Annotated["Game", strawberry.lazy(".game")] | None:
        """Get the reviewed game, or null if it no longer exists."""
        from ..resolvers.review import resolve_review_game

        return await resolve_review_game(self, info)

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this review, or null if unknown."""
        from ..resolvers.review import resolve_review_author

        return await resolve_review_author(self, info)
