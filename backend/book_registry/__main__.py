"""
Run the book registry HTTP service.

Usage:
    python -m book_registry                  # Serve on the configured port
    python -m book_registry --port 9000      # Override the port
    python -m book_registry --reload         # Reload on code changes
"""
import argparse
import os
import sys
from typing import Optional, Sequence

import uvicorn

from book_registry.config import get_settings
from book_registry.core.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser, defaulting to the current settings."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="book-registry",
        description="In-memory book registry HTTP service",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=settings.port,
        help=f"Bind port (default: {settings.port})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.debug,
        help="Reload the server on code changes",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    # The app is imported by uvicorn (possibly in a reload subprocess) and
    # builds itself from the environment.
    os.environ["BOOK_REGISTRY_LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()

    logger.info(f"Serving on http://{args.host}:{args.port}")
    try:
        uvicorn.run(
            "book_registry.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.lower(),
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
