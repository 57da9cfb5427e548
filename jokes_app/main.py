"""
Jokes Web App - Application Entry Point

This is the main FastAPI application. It serves server-rendered HTML
pages for storing, listing, searching and editing jokes, following
the MVC (Model-View-Controller) pattern.

Architecture Overview:
=====================
- Models (jokes_app/models/): Data structures and data access
  - entities.py: SQLAlchemy ORM model for the Jokes table
  - schemas.py: Pydantic schema for validating submitted jokes
  - repositories/: JokeRepository, the joke store

- Views (jokes_app/views/): Presentation
  - results.py: action results returned by controllers
  - renderer.py: turns action results into HTML, redirects or 404s
  - templates/: Jinja2 templates

- Controllers (jokes_app/controllers/): Decision making
  - jokes.py: list, search, details, create, edit and delete

- Routers (jokes_app/routers/): URL and form binding for controllers

- Services (jokes_app/services/): Supporting logic
  - validation.py: turns form data into a Joke and a ValidationResult

Request Flow:
============
1. Request arrives at a Router endpoint
2. Submitted forms are validated into a Joke plus a ValidationResult
3. Router builds a Controller around a request-scoped Repository
4. Controller decides and returns an action result
5. The view renderer turns the result into a response
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jokes_app.config import get_settings
from jokes_app.database import get_db, init_db, ping
from jokes_app.models.repositories import JokeAlreadyExistsError
from jokes_app.routers.jokes import router as jokes_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.app_title} started")
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    description="""
    Store, list, search and edit jokes (question/answer pairs).

    ## Architecture
    This app follows the MVC pattern:
    - **Models**: SQLAlchemy entity, Pydantic schema, repository
    - **Views**: Jinja2 templates rendered on the server
    - **Controllers**: plain classes returning action results
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register routers
app.include_router(jokes_router)   # /jokes endpoints


# ============================================
# Error Handling
# ============================================

@app.exception_handler(JokeAlreadyExistsError)
async def joke_already_exists_handler(request: Request, exc: JokeAlreadyExistsError):
    """A create with an id that is already taken is a conflict."""
    return JSONResponse(status_code=409, content={"detail": str(exc)})


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/", include_in_schema=False)
def root():
    """Send visitors to the joke list."""
    return RedirectResponse("/jokes", status_code=303)


@app.get("/health", tags=["health"])
def health_check(db: Session = Depends(get_db)):
    """
    Detailed health check endpoint.

    Confirms the database answers a trivial query. Returns 503 if it
    does not.
    """
    try:
        ping(db)
    except SQLAlchemyError:
        logger.exception("Health check failed: database unreachable")
        raise HTTPException(status_code=503, detail="Database unavailable")

    return {
        "status": "healthy",
        "service": settings.app_title,
        "database": "ok",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
