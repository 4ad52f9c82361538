"""
FastAPI dependencies for the book registry and request decoding.
"""
import re

from fastapi import Path, Request
from pydantic import ValidationError

from book_registry.core.exceptions import MalformedInputError
from book_registry.schemas.book import BookIn
from book_registry.services.registry import BookRegistry

_BOOK_ID = re.compile(r"[0-9]+")


def get_registry(request: Request) -> BookRegistry:
    """
    Dependency to get the registry owned by the running application.
    """
    return request.app.state.registry


def parse_book_id(book_id: str = Path(..., description="Numeric book id")) -> int:
    """
    Parse the id path segment as a non-negative integer.
    """
    if not _BOOK_ID.fullmatch(book_id):
        raise MalformedInputError("Invalid book ID", field="id")
    return int(book_id)


async def decode_book(request: Request) -> BookIn:
    """
    Decode the raw request body into a ``BookIn``, whatever its content type.
    """
    raw = await request.body()
    try:
        return BookIn.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedInputError("Invalid input", field="body") from e
