"""
Joke Repository - Data access for joke operations.

Every method is a single explicit call that commits on its own; there
is no change tracking carried between calls. Controllers depend on the
`JokeStore` protocol so any storage engine can stand behind them.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jokes_app.models.entities import MAX_JOKE_ID, Joke

logger = logging.getLogger(__name__)


class JokeStoreError(Exception):
    """Base class for errors raised by a joke store."""


class JokeAlreadyExistsError(JokeStoreError):
    """Raised when adding a joke whose id is already taken."""

    def __init__(self, joke_id: int):
        super().__init__(f"A joke with id {joke_id} already exists")
        self.joke_id = joke_id


class JokeStore(Protocol):
    """Persistence contract the jokes controller relies on."""

    def get_all(self) -> list[Joke]:
        ...

    def find_by_id(self, joke_id: int) -> Optional[Joke]:
        ...

    def add(self, joke: Joke) -> Joke:
        ...

    def update(self, joke: Joke) -> bool:
        ...

    def remove(self, joke_id: int) -> bool:
        ...


class JokeRepository:
    """Repository for joke database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def get_all(self) -> list[Joke]:
        """Get every joke, in whatever order the database returns them."""
        return self.db.query(Joke).all()

    def find_by_id(self, joke_id: int) -> Optional[Joke]:
        """Get a joke by ID, or None if there is no such joke."""
        if not _storable(joke_id):
            return None
        return self.db.get(Joke, joke_id)

    def exists(self, joke_id: int) -> bool:
        """Check whether a joke with this ID is stored."""
        if not _storable(joke_id):
            return False
        return self.db.query(Joke.Id).filter(Joke.Id == joke_id).first() is not None

    def add(self, joke: Joke) -> Joke:
        """
        Insert a new joke.

        Args:
            joke: The joke to store; its Id must be set by the caller

        Raises:
            JokeAlreadyExistsError: if the Id is already in use
        """
        if self.exists(joke.Id):
            logger.warning(f"Refusing to add joke {joke.Id}: id already in use")
            raise JokeAlreadyExistsError(joke.Id)

        self.db.add(joke)
        try:
            self.db.commit()
        except IntegrityError:
            # Another request stored the same id after the check above
            self.db.rollback()
            logger.warning(f"Joke {joke.Id} was added concurrently")
            raise JokeAlreadyExistsError(joke.Id)

        self.db.refresh(joke)
        return joke

    def update(self, joke: Joke) -> bool:
        """
        Overwrite the stored joke that has the same Id.

        Returns:
            True if a record was updated, False if no joke has that Id
        """
        record = self.find_by_id(joke.Id)
        if record is None:
            return False

        record.JokeQuestion = joke.JokeQuestion
        record.JokeAnswer = joke.JokeAnswer
        self.db.commit()
        return True

    def remove(self, joke_id: int) -> bool:
        """
        Delete a joke. An absent ID is not an error.

        Returns:
            True if deleted, False if not found
        """
        if not _storable(joke_id):
            return False

        result = self.db.query(Joke).filter(Joke.Id == joke_id).delete()
        self.db.commit()
        return result > 0


def _storable(joke_id: Optional[int]) -> bool:
    """Ids outside the column's range can never name a stored joke."""
    return joke_id is not None and -MAX_JOKE_ID - 1 <= joke_id <= MAX_JOKE_ID
