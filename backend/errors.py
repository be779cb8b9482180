"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GameProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(GameProxyError):
    def __init__(self, problems: list[str]):
        super().__init__(f"Invalid configuration: {'; '.join(problems)}")
        self.problems = problems


class UpstreamError(GameProxyError):
    """RAWG returned a non-success status, or the request never completed.

    ``upstream_status`` is None for transport failures; the underlying
    httpx exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message, status_code=502)
        self.upstream_status = upstream_status


class ParseError(GameProxyError):
    def __init__(self, path: str):
        super().__init__(f"RAWG returned invalid JSON for {path}", status_code=502)


class CatalogUnavailableError(GameProxyError):
    """Generic failure shown to clients. Never carries the upstream cause."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(GameProxyError)
    async def handle_game_proxy_error(_request: Request, exc: GameProxyError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
