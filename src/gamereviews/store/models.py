"""Pydantic models for stored records and game mutation inputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    # Identifiers are opaque tokens; numeric ids are kept in string form
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str


class GameRecord(_Record):
    title: str
    platform: list[str]


class AuthorRecord(_Record):
    name: str
    verified: bool


class ReviewRecord(_Record):
    rating: int
    content: str
    game_id: str
    author_id: str


class GameCreate(BaseModel):
    """Fields required to create a game."""

    title: str
    platform: list[str]


class GameUpdate(BaseModel):
    """Partial set of game fields to overwrite."""

    title: str | None = None
    platform: list[str] | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields that carry a value, omitting unset and null ones."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
