"""
SQLAlchemy ORM Entity Models

A single table holds every joke. The primary key is supplied by the
caller rather than generated by the database, so a joke keeps the id
it was created with for its whole life.

Validity (non-empty question and answer) is checked before a joke
reaches the repository, which is why the text columns are nullable.
"""

from sqlalchemy import Column, Integer, Text

from jokes_app.database import Base

# Largest id a 64-bit INTEGER column can hold
MAX_JOKE_ID = 2**63 - 1


class Joke(Base):
    """A question/answer pair identified by a caller-assigned integer id."""
    __tablename__ = "Jokes"

    Id = Column(Integer, primary_key=True, autoincrement=False)
    JokeQuestion = Column(Text, nullable=True)
    JokeAnswer = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Joke Id={self.Id!r} JokeQuestion={self.JokeQuestion!r}>"
