"""FastAPI application entry point.

Serve with `python -m books_api`, or `uvicorn books_api.main:create_app --factory`.
"""
import html
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from books_api import __version__
from books_api.api import api_router
from books_api.config import Settings, get_settings
from books_api.core.exceptions import AppException
from books_api.core.logging import get_logger, setup_logging
from books_api.core.middleware import register_middleware
from books_api.core.utils import IDGenerator, UUIDGenerator
from books_api.loader import seed_store
from books_api.storage import BookStore

logger = get_logger("app")

_JSON_MEDIA_TYPES = {"*/*", "application/*", "application/json"}


def accepts_json(request: Request) -> bool:
    """Whether the client takes a JSON error body. No Accept header means yes."""
    accept = request.headers.get("accept")
    if not accept:
        return True
    for part in accept.split(","):
        media_type, *params = [piece.strip() for piece in part.split(";")]
        media_type = media_type.lower()
        if not (media_type in _JSON_MEDIA_TYPES or media_type.endswith("+json")):
            continue
        quality = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            return True
    return False


def render_http_error(
    request: Request,
    status_code: int,
    message: str,
    exc: Optional[BaseException] = None,
) -> Response:
    """Render an HTTP error as JSON or plain text, depending on Accept."""
    settings: Settings = request.app.state.settings
    stack = None
    if settings.debug and exc is not None:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if accepts_json(request):
        content = {"message": message, "status": status_code}
        if stack is not None:
            content["stack"] = stack
        return JSONResponse(status_code=status_code, content=content)

    return PlainTextResponse(
        f"{status_code} {message}\n\n{stack or ''}",
        status_code=status_code,
    )


def not_found_page(request: Request) -> HTMLResponse:
    """HTML fallback for paths no route matches."""
    path = html.escape(request.url.path)
    return HTMLResponse(
        "<html><body><h1>404 - Not Found</h1>"
        f"<p>Path <code>{path}</code> not found.</p></body></html>",
        status_code=404,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error boundary. Unregistered exception types propagate."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        return render_http_error(request, exc.status_code, exc.message, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Unparseable request bodies are client errors."""
        return render_http_error(request, 400, "Bad Request: Malformed request body", exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing errors raised by the framework."""
        if exc.status_code == 404:
            return not_found_page(request)
        return render_http_error(request, exc.status_code, str(exc.detail), exc)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookStore] = None,
    id_generator: Optional[IDGenerator] = None,
) -> FastAPI:
    """Build the application around its own store instance."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        # Startup
        if settings.books_data_path:
            seed_store(app.state.store, settings.books_data_path)
        logger.info(f"Start listening on {settings.host}:{settings.port}")
        logger.info("  using HTTP server: uvicorn")
        yield
        # Shutdown
        logger.info("Finished.")

    app = FastAPI(
        title=settings.app_name,
        description="In-memory books CRUD API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else BookStore()
    app.state.id_generator = id_generator if id_generator is not None else UUIDGenerator()

    register_middleware(app, settings)
    register_exception_handlers(app)
    app.include_router(api_router)

    return app

