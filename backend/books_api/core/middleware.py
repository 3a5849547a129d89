"""HTTP middleware: CORS headers, response timing and access logging."""
import time
from urllib.parse import unquote

from fastapi import FastAPI, Request, Response

from books_api.config import Settings
from books_api.core.logging import get_logger

logger = get_logger("http")


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install middleware. Registered last runs outermost."""

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            # Preflight never reaches the router
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = settings.cors_allow_methods
        response.headers["Access-Control-Allow-Headers"] = settings.cors_allow_headers
        return response

    @app.middleware("http")
    async def response_time(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        path = unquote(request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error while serving {request.method} {path}")
            raise
        logger.info(f"{request.method} {path} - {response.headers.get('X-Response-Time')}")
        return response
