"""
View renderer - turns action results into HTTP responses.

Templates live in views/templates. Each controller view name maps to
`jokes/<view_name>.html`.
"""

import os

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from jokes_app.views.results import (
    ActionResult,
    NotFoundResult,
    RedirectResult,
    ViewResult,
)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


class JokeViewRenderer:
    """Renders jokes controller results with Jinja2 templates."""

    def __init__(self, directory: str = TEMPLATES_DIR):
        self.templates = Jinja2Templates(directory=directory)

    def render(self, request: Request, result: ActionResult) -> Response:
        if isinstance(result, ViewResult):
            return self.view(request, result)
        if isinstance(result, RedirectResult):
            return self.redirect(request, result.action_name)
        if isinstance(result, NotFoundResult):
            return self.not_found(request)
        raise TypeError(f"Unsupported action result: {result!r}")

    def view(self, request: Request, result: ViewResult) -> Response:
        return self.templates.TemplateResponse(
            request,
            f"jokes/{result.view_name}.html",
            {
                "view_name": result.view_name,
                "model": result.model,
                "errors": result.errors,
            },
        )

    def redirect(self, request: Request, action_name: str) -> Response:
        # 303 so the browser follows a form POST with a GET
        return RedirectResponse(str(request.url_for(action_name)), status_code=303)

    def not_found(self, request: Request) -> Response:
        return self.templates.TemplateResponse(
            request, "not_found.html", {}, status_code=404
        )


renderer = JokeViewRenderer()
