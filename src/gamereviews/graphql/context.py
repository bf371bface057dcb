"""
Access to request-scoped resolver dependencies
"""

from __future__ import annotations

from typing import Any

import strawberry

from ..store.data_store import DataStore
from .loaders import Loaders


def build_context(store: DataStore, **extra: Any) -> dict[str, Any]:
    """Create the resolver context for one GraphQL operation."""
    return {"store": store, "loaders": Loaders(store), **extra}


def get_store_from_info(info: strawberry.Info) -> DataStore:
    return info.context["store"]


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
