"""
Jokes Router

Binds URLs and form fields to JokesController actions. Each request
gets a controller built around its own repository, and the action
result is handed to the view renderer.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from jokes_app.controllers import JokesController
from jokes_app.database import get_db
from jokes_app.models.repositories import JokeRepository
from jokes_app.services import validate_joke
from jokes_app.views import renderer

router = APIRouter(prefix="/jokes", tags=["jokes"])


def get_controller(db: Session = Depends(get_db)) -> JokesController:
    """Build a controller around a repository for this request's session."""
    return JokesController(JokeRepository(db))


def joke_form(
    Id: str = Form(""),
    JokeQuestion: str = Form(""),
    JokeAnswer: str = Form(""),
) -> dict:
    """Collect the submitted joke fields as they were typed."""
    return {"Id": Id, "JokeQuestion": JokeQuestion, "JokeAnswer": JokeAnswer}


@router.get("", name="index")
def index(request: Request, controller: JokesController = Depends(get_controller)):
    """List all jokes."""
    return renderer.render(request, controller.index())


@router.get("/search", name="show_search_form")
def show_search_form(request: Request, controller: JokesController = Depends(get_controller)):
    return renderer.render(request, controller.show_search_form())


@router.post("/search", name="show_search_results")
def show_search_results(
    request: Request,
    SearchPhrase: str = Form(""),
    controller: JokesController = Depends(get_controller),
):
    """List jokes whose question contains the search phrase."""
    return renderer.render(request, controller.show_search_results(SearchPhrase))


@router.get("/details", name="details", include_in_schema=False)
@router.get("/details/{joke_id}", name="details")
def details(
    request: Request,
    joke_id: Optional[int] = None,
    controller: JokesController = Depends(get_controller),
):
    """Show one joke."""
    return renderer.render(request, controller.details(joke_id))


@router.get("/create", name="create_form")
def create_form(request: Request, controller: JokesController = Depends(get_controller)):
    return renderer.render(request, controller.create_form())


@router.post("/create", name="create")
def create(
    request: Request,
    form: dict = Depends(joke_form),
    controller: JokesController = Depends(get_controller),
):
    """Validate and save a new joke."""
    joke, validation = validate_joke(form)
    return renderer.render(request, controller.create(joke, validation))


@router.get("/edit", name="edit_form", include_in_schema=False)
@router.get("/edit/{joke_id}", name="edit_form")
def edit_form(
    request: Request,
    joke_id: Optional[int] = None,
    controller: JokesController = Depends(get_controller),
):
    return renderer.render(request, controller.edit_form(joke_id))


@router.post("/edit/{joke_id}", name="edit")
def edit(
    request: Request,
    joke_id: int,
    form: dict = Depends(joke_form),
    controller: JokesController = Depends(get_controller),
):
    """Validate and save changes to an existing joke."""
    joke, validation = validate_joke(form)
    return renderer.render(request, controller.edit(joke_id, joke, validation))


@router.get("/delete", name="delete_form", include_in_schema=False)
@router.get("/delete/{joke_id}", name="delete_form")
def delete_form(
    request: Request,
    joke_id: Optional[int] = None,
    controller: JokesController = Depends(get_controller),
):
    return renderer.render(request, controller.delete_form(joke_id))


@router.post("/delete/{joke_id}", name="delete_confirmed")
def delete_confirmed(
    request: Request,
    joke_id: int,
    controller: JokesController = Depends(get_controller),
):
    """Delete a joke after the user confirmed it."""
    return renderer.render(request, controller.delete_confirmed(joke_id))
