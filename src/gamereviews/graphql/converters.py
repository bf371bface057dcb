"""Conversion from stored records to GraphQL types."""

from __future__ import annotations

import strawberry

from ..store.models import AuthorRecord, GameRecord, ReviewRecord
from .types.author import Author
from .types.game import Game
from .types.review import Review


def to_game(record: GameRecord) -> Game:
    return Game(id=strawberry.ID(record.id), title=record.title, platform=list(record.platform))


def to_author(record: AuthorRecord) -> Author:
    return Author(id=strawberry.ID(record.id), name=record.name, verified=record.verified)


def to_review(record: ReviewRecord) -> Review:
    return Review(
        id=strawberry.ID(record.id),
        rating=record.rating,
        content=record.content,
        game_id=record.game_id,
        author_id=record.author_id,
    )
