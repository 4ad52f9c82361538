"""Services."""
from book_registry.services.registry import BookRegistry

__all__ = ["BookRegistry"]
