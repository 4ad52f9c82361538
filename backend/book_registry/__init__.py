"""In-memory book registry served over HTTP."""

__version__ = "1.0.0"
