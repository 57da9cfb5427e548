"""
Joke validation - turns submitted form data into a Joke and a verdict.

The controller never inspects form data itself. It receives the Joke
built here (even when invalid, so the form can be shown again with
what the user typed) along with a ValidationResult saying whether
that Joke may be saved.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from jokes_app.models.entities import Joke
from jokes_app.models.schemas import JokeInput


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one submitted joke."""
    is_valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, errors: dict[str, list[str]]) -> "ValidationResult":
        return cls(is_valid=False, errors=errors)


def _coerce_id(value: Any) -> Optional[int]:
    """Best-effort int conversion so an invalid form still carries its id."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _errors_by_field(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic error messages under the form field they belong to."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(name, []).append(error["msg"])
    return errors


def validate_joke(form: Mapping[str, Any]) -> tuple[Joke, ValidationResult]:
    """
    Validate a submitted joke form.

    Args:
        form: Raw field values keyed by form name (Id, JokeQuestion, JokeAnswer)

    Returns:
        The submitted Joke (unsaved) and the ValidationResult for it
    """
    joke = Joke(
        Id=_coerce_id(form.get("Id")),
        JokeQuestion=form.get("JokeQuestion") or None,
        JokeAnswer=form.get("JokeAnswer") or None,
    )

    try:
        JokeInput.model_validate(dict(form))
    except ValidationError as exc:
        return joke, ValidationResult.invalid(_errors_by_field(exc))

    return joke, ValidationResult.valid()
