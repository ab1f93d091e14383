import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI

from app.api.router import api_router
from app.core.config import Settings, load_settings, resolve_config_path
from app.core.exceptions import StartupError
from app.core.handlers import register_exception_handlers
from app.core.logging import setup_logging
from app.storage.base import Storage
from app.storage.sqlite import SQLiteStorage

logger = logging.getLogger(__name__)


def create_app(settings: Settings, storage: Storage) -> FastAPI:
    """Wire routes, exception handlers and storage into a FastAPI app."""

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            logger.info("Shutting down the server")
            storage.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.APP_VERSION,
        }

    return app


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Student CRUD API server")
    parser.add_argument("--config", default=None, help="path to the configuration file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    try:
        settings = load_settings(resolve_config_path(args.config))
        setup_logging(settings.LOG_LEVEL)
        storage = SQLiteStorage(settings)
    except StartupError as exc:
        logger.critical("%s", exc)
        return 1

    logger.info("storage initialized env=%s version=%s", settings.ENV, settings.APP_VERSION)

    app = create_app(settings, storage)

    # uvicorn handles SIGINT/SIGTERM: it stops accepting connections, waits up
    # to timeout_graceful_shutdown for in-flight requests, then closes them.
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.HOST,
            port=settings.PORT,
            timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
            log_config=None,
        )
    )
    logger.info("Server is up and running on %s:%s", settings.HOST, settings.PORT)
    server.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
