"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.game import Game


# Input types for mutations
@strawberry.input
class AddGameInput:
    """Input for creating a new game."""

    title: str
    platform: list[str]


@strawberry.input
class UpdateGameInput:
    """Input for updating a game. Omitted fields keep their current value."""

    title: str | None = None
    platform: list[str] | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addGame")
    async def add_game(self, info: strawberry.Info, game: AddGameInput) -> Game:
        """Create a new game."""
        from ..resolvers.game import add_game

        return await add_game(info, game)

    @strawberry.mutation(name="deleteGame")
    async def delete_game(self, info: strawberry.Info, id: strawberry.ID) -> list[Game]:
        """Delete a game and return the remaining games."""
        from ..resolvers.game import delete_game

        return await delete_game(info, id)

    @strawberry.mutation(name="updateGame")
    async def update_game(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        updates: UpdateGameInput | None = None,
    ) -> Game | None:
        """Update an existing game."""
        from ..resolvers.game import update_game

        return await update_game(info, id, updates)
