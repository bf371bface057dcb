from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import accessors
from ..context import get_store_from_info
from ..converters import to_author, to_review

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.review import Review


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    store = get_store_from_info(info)
    return [to_author(author) for author in store.authors]


async def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    store = get_store_from_info(info)
    author = accessors.find_by_id(store.authors, id)
    return to_author(author) if author is not None else None


async def resolve_author_reviews(author: Author, info: strawberry.Info) -> list[Review]:
    store = get_store_from_info(info)
    return [to_review(review) for review in accessors.reviews_for_author(store, author.id)]
