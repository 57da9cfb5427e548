"""
Controllers Package - The 'C' in MVC

Controllers decide what happens for each request and coordinate between:
- Models (the joke repository)
- Services (form validation)
- Views (action results the renderer turns into responses)

The HTTP side lives in jokes_app/routers: each route builds a
controller around a request-scoped repository, calls one action and
renders the result.
"""

from jokes_app.controllers.jokes import JokesController

__all__ = ["JokesController"]
