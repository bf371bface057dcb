"""In-memory data store with relational accessors and game mutations."""

from .accessors import (
    author_of_review,
    find_by_id,
    find_many_by_id,
    game_of_review,
    reviews_for_author,
    reviews_for_game,
)
from .data_store import DataStore, DuplicateIdentifierError
from .models import AuthorRecord, GameCreate, GameRecord, GameUpdate, ReviewRecord
from .mutations import create_game, delete_game, update_game

__all__ = [
    "AuthorRecord",
    "DataStore",
    "DuplicateIdentifierError",
    "GameCreate",
    "GameRecord",
    "GameUpdate",
    "ReviewRecord",
    "author_of_review",
    "create_game",
    "delete_game",
    "find_by_id",
    "find_many_by_id",
    "game_of_review",
    "reviews_for_author",
    "reviews_for_game",
    "update_game",
]
