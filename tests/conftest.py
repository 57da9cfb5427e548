import os

# Keep the app's own engine off the filesystem while tests import it
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jokes_app.controllers import JokesController
from jokes_app.database import Base, get_db
from jokes_app.main import app
from jokes_app.models import entities  # noqa: F401
from jokes_app.models.entities import Joke
from jokes_app.models.repositories import JokeRepository


@pytest.fixture
def engine():
    """In-memory SQLite database shared by every connection in one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """A fresh session seeded with three jokes."""
    session = sessionmaker(autoflush=False, bind=engine)()
    session.add_all([
        Joke(Id=1, JokeQuestion="Why did the chicken cross the road?", JokeAnswer="To get to the other side."),
        Joke(Id=2, JokeQuestion="What do you call a fish with no eyes?", JokeAnswer="A fsh."),
        Joke(Id=3, JokeQuestion="Which joke holds the SearchTerm?", JokeAnswer="This one."),
    ])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def repository(db):
    return JokeRepository(db)


@pytest.fixture
def controller(repository):
    return JokesController(repository)


@pytest.fixture
def client(db):
    """TestClient whose requests all use the seeded session."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
