"""
Pydantic Schemas

Submitted joke forms are checked against `JokeInput` before the
controller decides whether to save them. Field aliases match the HTML
form field names (and the entity's column names), so a form posted
from the create or edit view validates without any renaming.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jokes_app.models.entities import MAX_JOKE_ID


MAX_TEXT_LENGTH = 500


class JokeInput(BaseModel):
    """
    A joke as submitted through the create or edit form.

    The id is supplied by the user; there is no auto-increment.
    Question and answer must contain something other than whitespace.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id", ge=1, le=MAX_JOKE_ID, description="Unique joke id")
    joke_question: str = Field(
        ...,
        alias="JokeQuestion",
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="The set-up of the joke",
    )
    joke_answer: str = Field(
        ...,
        alias="JokeAnswer",
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="The punchline",
    )

    @field_validator("joke_question", "joke_answer")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
