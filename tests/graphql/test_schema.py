"""Tests for schema construction and validation."""

from strawberry.printer import print_schema

from gamereviews.graphql.schema import schema, validate_schema


def test_validate_schema():
    validate_schema()


def test_schema_exposes_entry_points():
    sdl = print_schema(schema)

    for fragment in (
        "games: [Game!]!",
        "game(id: ID!): Game",
        "review(id: ID!): Review",
        "author(id: ID!): Author",
        "addGame(game: AddGameInput!): Game!",
        "deleteGame(id: ID!): [Game!]!",
        "updateGame(id: ID!, updates: UpdateGameInput",
        "input UpdateGameInput",
    ):
        assert fragment in sdl
