"""
Identifier generators for newly created records
"""

from __future__ import annotations

import uuid
from collections.abc import Collection, Iterable
from typing import Protocol


class IdGenerator(Protocol):
    """Produces an identifier not contained in ``taken``."""

    def __call__(self, taken: Collection[str]) -> str: ...


class SequentialIdGenerator:
    """Monotonically increasing numeric identifiers rendered as strings."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self, taken: Collection[str]) -> str:
        while str(self._next) in taken:
            self._next += 1
        candidate = str(self._next)
        self._next += 1
        return candidate


class UUIDIdGenerator:
    """Random UUID4 identifiers."""

    def __call__(self, taken: Collection[str]) -> str:
        candidate = str(uuid.uuid4())
        while candidate in taken:
            candidate = str(uuid.uuid4())
        return candidate


def build_id_generator(strategy: str, taken: Iterable[str] = ()) -> IdGenerator:
    """
    Create an id generator by strategy name.

    The sequential generator starts after the largest numeric id in ``taken``
    so identifiers of seeded records are never reissued.

    Raises:
        ValueError: If the strategy is unknown
    """
    if strategy == "sequential":
        numeric = [int(value) for value in taken if value.isascii() and value.isdigit()]
        return SequentialIdGenerator(start=max(numeric, default=0) + 1)
    if strategy == "uuid":
        return UUIDIdGenerator()
    raise ValueError(f"Unknown id strategy: {strategy!r}. Expected 'sequential' or 'uuid'")
