"""
Views Package - The 'V' in MVC

Controllers hand back action results (results.py). The renderer
(renderer.py) turns them into responses: Jinja2 templates from
templates/ for views, 303 redirects between actions, and a 404 page
when a joke cannot be found.

All HTML is rendered on the server; there is no client-side app.
"""

from jokes_app.views.results import (
    ActionResult,
    NotFoundResult,
    RedirectResult,
    ViewResult,
)
from jokes_app.views.renderer import JokeViewRenderer, renderer

__all__ = [
    "ActionResult",
    "NotFoundResult",
    "RedirectResult",
    "ViewResult",
    "JokeViewRenderer",
    "renderer",
]
