"""
Relational accessors over a DataStore.

Lookups are linear scans in collection order. A missing entity is reported as
None (single lookups) or an empty list (relations), never as an error.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from .data_store import DataStore
    from .models import AuthorRecord, GameRecord, ReviewRecord


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=_Identified)


def find_by_id(collection: Iterable[RecordT], id: str | int) -> RecordT | None:
    """Return the first record whose identifier equals ``id``."""
    key = str(id)
    for record in collection:
        if record.id == key:
            return record
    return None


def find_many_by_id(collection: Iterable[RecordT], ids: Sequence[str | int]) -> list[RecordT | None]:
    """Look up several identifiers at once, keeping the order of ``ids``."""
    by_id: dict[str, RecordT] = {}
    for record in collection:
        by_id.setdefault(record.id, record)
    return [by_id.get(str(key)) for key in ids]


def reviews_for_game(store: DataStore, game_id: str | int) -> list[ReviewRecord]:
    key = str(game_id)
    return [review for review in store.reviews if review.game_id == key]


def reviews_for_author(store: DataStore, author_id: str | int) -> list[ReviewRecord]:
    key = str(author_id)
    return [review for review in store.reviews if review.author_id == key]


def author_of_review(store: DataStore, review: ReviewRecord) -> AuthorRecord | None:
    return find_by_id(store.authors, review.author_id)


def game_of_review(store: DataStore, review: ReviewRecord) -> GameRecord | None:
    return find_by_id(store.games, review.game_id)
