"""
Database wiring: engine, session factory and declarative base.

Controllers never touch this module directly. They receive a
request-scoped Session through the `get_db` dependency and wrap it
in a repository.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from jokes_app.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLite connections are shared with FastAPI's threadpool workers
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    echo=settings.sql_echo,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session for the duration of one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create any missing tables."""
    # Import entities so they are registered on Base.metadata
    from jokes_app.models import entities  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema ready")


def ping(db) -> bool:
    """Run a trivial query to confirm the database is reachable."""
    return db.execute(text("SELECT 1")).scalar() == 1
