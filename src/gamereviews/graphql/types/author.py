"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .review import Review


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str
    verified: bool

    @strawberry.field
    async def reviews(
        self, info: strawberry.Info
    ) -> list[Annotated["Review", strawberry.lazy(".review")]]:
        """Get reviews written by this author."""
        from ..resolvers.author import resolve_author_reviews

        return await resolve_author_reviews(self, info)
