"""Pydantic schemas."""
from book_registry.schemas.book import Book, BookIn

__all__ = ["Book", "BookIn"]
