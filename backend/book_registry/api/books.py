"""Book CRUD endpoints."""
from operator import attrgetter
from typing import List

from fastapi import APIRouter, Depends, Response, status
from fastapi.routing import APIRoute

from book_registry.dependencies import decode_book, get_registry, parse_book_id
from book_registry.schemas.book import Book, BookIn
from book_registry.services.registry import BookRegistry

router = APIRouter(prefix="/books", tags=["books"])

# The id route captures the whole remainder so that "/books/" and
# "/books/1/2" reach parse_book_id and answer 400 instead of redirecting.
ITEM_PATH = "/{book_id:path}"


@router.get("", response_model=List[Book])
async def list_books(
    registry: BookRegistry = Depends(get_registry),
) -> List[Book]:
    """
    List all books, ordered by id.
    """
    return sorted(registry.list(), key=attrgetter("id"))


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    book: BookIn = Depends(decode_book),
    registry: BookRegistry = Depends(get_registry),
) -> Book:
    """
    Create a new book. Any id in the body is ignored.
    """
    return registry.create(book)


@router.get(ITEM_PATH, response_model=Book)
async def get_book(
    book_id: int = Depends(parse_book_id),
    registry: BookRegistry = Depends(get_registry),
) -> Book:
    """
    Retrieve a book by its id.
    """
    return registry.get(book_id)


@router.put(ITEM_PATH, response_model=Book)
async def update_book(
    book_id: int = Depends(parse_book_id),
    book: BookIn = Depends(decode_book),
    registry: BookRegistry = Depends(get_registry),
) -> Book:
    """
    Replace the title and author of an existing book.
    """
    return registry.update(book_id, book)


@router.delete(ITEM_PATH, status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int = Depends(parse_book_id),
    registry: BookRegistry = Depends(get_registry),
) -> Response:
    """
    Delete a book by its id.
    """
    registry.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def allowed_methods(path: str) -> List[str]:
    """
    Methods wired for ``path`` on this router, e.g. for an ``Allow`` header.
    """
    methods: set[str] = set()
    for route in router.routes:
        if isinstance(route, APIRoute) and route.path_regex.match(path):
            methods.update(route.methods)
    return sorted(methods)
