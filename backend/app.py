"""FastAPI application entry point for the game catalog proxy."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config import Settings, settings
from errors import ConfigurationError, register_error_handlers
from services.cache import TTLCache
from services.games import GameCatalog
from services.rawg_client import RawgClient

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=settings.log_level,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

# httpx logs full request URLs at INFO, which would include the API key
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def build_catalog(config: Settings) -> GameCatalog:
    client = RawgClient(
        api_key=config.rawg_api_key,
        base_url=config.rawg_base_url,
        timeout=config.upstream_timeout,
    )
    return GameCatalog(TTLCache(ttl_seconds=config.cache_ttl), client)


def create_app(config: Settings = settings, catalog: GameCatalog | None = None) -> FastAPI:
    problems = config.validate()
    if problems:
        for problem in problems:
            logger.error("Configuration error: %s", problem)
        raise ConfigurationError(problems)

    app = FastAPI(title="Game Catalog Proxy", version="1.0.0")
    app.state.settings = config
    app.state.catalog = catalog or build_catalog(config)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.games import router as games_router

    app.include_router(health_router)
    app.include_router(games_router)

    # Front-end last, so API routes win over same-named files
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; front-end disabled", config.static_dir)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    logger.info("Server running on http://localhost:%d", settings.listen_port)
    uvicorn.run(app, host=settings.host, port=settings.listen_port)


if __name__ == "__main__":
    run()
