"""API routes."""
from fastapi import APIRouter

from book_registry.api import books

api_router = APIRouter()
api_router.include_router(books.router)

__all__ = ["api_router"]
