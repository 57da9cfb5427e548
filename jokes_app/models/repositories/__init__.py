"""
Repositories - Data access layer for database operations.
"""

from jokes_app.models.repositories.joke_repository import (
    JokeAlreadyExistsError,
    JokeRepository,
    JokeStore,
    JokeStoreError,
)

__all__ = [
    "JokeAlreadyExistsError",
    "JokeRepository",
    "JokeStore",
    "JokeStoreError",
]
