"""
Jokes Controller

Handles every action on jokes:
- Listing and searching jokes
- Showing a single joke
- Creating, editing and deleting jokes

The controller never touches HTTP. Each action returns an action
result (a view to render, an action to redirect to, or not found)
and the router hands that to the view renderer.

Design Decisions:
- Lookups of a missing id give NotFoundResult, never an exception
- Validation happens before the controller is called; it only
  branches on the ValidationResult it is given
- A rejected form is re-rendered with the exact object that was
  submitted, so the user sees what they typed
"""

import logging
from typing import Optional

from jokes_app.models.entities import Joke
from jokes_app.models.repositories import JokeStore
from jokes_app.services.validation import ValidationResult
from jokes_app.views.results import (
    ActionResult,
    NotFoundResult,
    RedirectResult,
    ViewResult,
)

logger = logging.getLogger(__name__)


class JokesController:
    """Controller for joke management."""

    def __init__(self, store: JokeStore):
        self.store = store

    # ==========================================
    # Listing & Search
    # ==========================================

    def index(self) -> ActionResult:
        """Show every joke."""
        return ViewResult("index", self.store.get_all())

    def show_search_form(self) -> ActionResult:
        """Show the empty search form."""
        return ViewResult("show_search_form")

    def show_search_results(self, search_phrase: str) -> ActionResult:
        """
        Show the jokes whose question contains the search phrase.

        Matching is a case-sensitive substring test on the question
        only. Results use the same view as the full list.
        """
        search_phrase = search_phrase or ""
        jokes = [
            joke for joke in self.store.get_all()
            if search_phrase in (joke.JokeQuestion or "")
        ]
        return ViewResult("index", jokes)

    # ==========================================
    # Single Joke Views
    # ==========================================

    def details(self, joke_id: Optional[int]) -> ActionResult:
        """Show one joke."""
        return self._view_joke("details", joke_id)

    def edit_form(self, joke_id: Optional[int]) -> ActionResult:
        """Show the edit form for one joke."""
        return self._view_joke("edit", joke_id)

    def delete_form(self, joke_id: Optional[int]) -> ActionResult:
        """Ask the user to confirm deleting one joke."""
        return self._view_joke("delete", joke_id)

    def _view_joke(self, view_name: str, joke_id: Optional[int]) -> ActionResult:
        """Render a view for one joke, or not found if there is no such joke."""
        if joke_id is None:
            return NotFoundResult()

        joke = self.store.find_by_id(joke_id)
        if joke is None:
            logger.warning(f"Joke {joke_id} not found for {view_name} view")
            return NotFoundResult()

        return ViewResult(view_name, joke)

    # ==========================================
    # Create
    # ==========================================

    def create_form(self) -> ActionResult:
        """Show the empty create form."""
        return ViewResult("create")

    def create(self, joke: Joke, validation: ValidationResult) -> ActionResult:
        """
        Save a new joke.

        Args:
            joke: The submitted joke; its Id is chosen by the user
            validation: Outcome of validating the submitted form

        Returns:
            The create view again if the joke is invalid, else a
            redirect to the list
        """
        if not validation.is_valid:
            return ViewResult("create", joke, validation.errors)

        self.store.add(joke)
        logger.info(f"Created joke {joke.Id}")
        return RedirectResult("index")

    # ==========================================
    # Edit
    # ==========================================

    def edit(
        self,
        joke_id: int,
        joke: Joke,
        validation: ValidationResult,
    ) -> ActionResult:
        """
        Overwrite an existing joke with the submitted one.

        The id in the address must match the submitted joke's Id; that
        is checked before validation and a mismatch never touches the
        store.
        """
        if joke_id != joke.Id:
            logger.warning(f"Edit of joke {joke_id} rejected: body has Id {joke.Id}")
            return NotFoundResult()

        if not validation.is_valid:
            return ViewResult("edit", joke, validation.errors)

        if not self.store.update(joke):
            logger.warning(f"Joke {joke_id} vanished before it could be updated")
            return NotFoundResult()

        logger.info(f"Updated joke {joke_id}")
        return RedirectResult("index")

    # ==========================================
    # Delete
    # ==========================================

    def delete_confirmed(self, joke_id: int) -> ActionResult:
        """Delete a joke. Deleting a joke that is already gone is fine."""
        if self.store.remove(joke_id):
            logger.info(f"Deleted joke {joke_id}")
        else:
            logger.info(f"Joke {joke_id} was already deleted")
        return RedirectResult("index")
