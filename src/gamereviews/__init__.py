"""
Game Reviews API
GraphQL service over an in-memory store of games, reviews and authors
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
