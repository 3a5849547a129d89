"""
Run the books API with uvicorn.

Usage:
    python -m books_api                         # 127.0.0.1:8000, data/books.json
    python -m books_api --port 8080             # Custom port
    python -m books_api --data ./books.json     # Custom seed file
"""
import argparse
import sys
from typing import Optional, Sequence

import uvicorn

from books_api.config import Settings
from books_api.main import create_app


def build_parser() -> argparse.ArgumentParser:
    """Command line options. Unset options fall back to the environment."""
    parser = argparse.ArgumentParser(
        prog="books_api",
        description="Serve the in-memory books CRUD API",
    )
    parser.add_argument(
        "--host",
        help="Bind host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="Bind port (default: 8000)",
    )
    parser.add_argument(
        "-d", "--data",
        dest="books_data_path",
        help="JSON file with the initial books (default: data/books.json)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Include stack traces in error responses",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    return Settings(**overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    app = create_app(settings)

    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    main()
