"""Thread-safe in-memory book registry."""
from threading import Lock
from typing import List

from book_registry.core.exceptions import NotFoundError
from book_registry.core.logging import get_logger
from book_registry.schemas.book import Book, BookIn

logger = get_logger("registry")


class BookRegistry:
    """
    Dict-based in-memory store of books keyed by id.

    A single lock guards both the map and the id counter; every operation
    holds it for its whole body. Stored ``Book`` objects are frozen, so they
    can be serialized after the lock is released.
    """

    def __init__(self, start: int = 1):
        self._storage: dict[int, Book] = {}
        self._next_id = start
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    @property
    def next_id(self) -> int:
        """The id the next ``create`` will assign."""
        with self._lock:
            return self._next_id

    def create(self, candidate: BookIn) -> Book:
        """
        Store a new book under a freshly assigned id.
        """
        with self._lock:
            book = Book(id=self._next_id, title=candidate.title, author=candidate.author)
            self._storage[book.id] = book
            self._next_id += 1
        logger.debug(f"Created book {book.id}")
        return book

    def list(self) -> List[Book]:
        """
        Return every stored book, in no particular order.
        """
        with self._lock:
            return list(self._storage.values())

    def get(self, book_id: int) -> Book:
        """
        Retrieve a book by id.
        """
        with self._lock:
            try:
                return self._storage[book_id]
            except KeyError:
                raise NotFoundError("Book", book_id) from None

    def update(self, book_id: int, replacement: BookIn) -> Book:
        """
        Replace title and author of an existing book, keeping its id.
        """
        with self._lock:
            if book_id not in self._storage:
                raise NotFoundError("Book", book_id)
            book = Book(id=book_id, title=replacement.title, author=replacement.author)
            self._storage[book_id] = book
        logger.debug(f"Updated book {book_id}")
        return book

    def delete(self, book_id: int) -> None:
        """
        Remove a book by id.
        """
        with self._lock:
            if book_id not in self._storage:
                raise NotFoundError("Book", book_id)
            del self._storage[book_id]
        logger.debug(f"Deleted book {book_id}")
