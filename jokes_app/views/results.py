"""
Action results returned by controllers.

A controller never builds HTTP responses. It says what should happen
(show a view, go to another action, or report a missing joke) and the
renderer turns that into a response.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class ViewResult:
    """Render the named view with an optional model and form errors."""
    view_name: str
    model: Any = None
    errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class RedirectResult:
    """Send the browser to another controller action."""
    action_name: str


@dataclass
class NotFoundResult:
    """The requested joke does not exist (or no id was given)."""


ActionResult = Union[ViewResult, RedirectResult, NotFoundResult]
