"""
Models Package - The 'M' in MVC

- entities.py: SQLAlchemy ORM model for the Jokes table
- schemas.py: Pydantic schema used to validate submitted jokes
- repositories/: data access for jokes
"""

from jokes_app.models.entities import Joke
from jokes_app.models.schemas import JokeInput

__all__ = [
    "Joke",
    "JokeInput",
]
