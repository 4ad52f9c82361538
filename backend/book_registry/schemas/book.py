"""Book schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BookIn(BaseModel):
    """Request body for creating or replacing a book.

    Missing fields, JSON ``null`` and values that are not strings all fall
    back to empty strings. Unknown keys, including a client supplied ``id``,
    are dropped.
    """

    title: str = ""
    author: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "author", mode="before")
    @classmethod
    def non_string_to_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""


class Book(BaseModel):
    """A stored book record."""

    id: int
    title: str
    author: str

    model_config = ConfigDict(frozen=True)
