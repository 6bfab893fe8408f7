"""FastAPI application factory.

Run with ``uvicorn glossa.application.api.rest.app:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from glossa.application.api.v1.errors import map_glossa_error
from glossa.application.api.v1.routes import (
    api_keys,
    labels,
    members,
    projects,
    terms,
    translations,
)
from glossa.application.di import create_container
from glossa.config import Config, configure_logging
from glossa.domain.shared.authorization import POLICY_SET
from glossa.domain.shared.error import GlossaError
from glossa.infrastructure.persistence.database import create_tables
from glossa.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
ROUTERS = (
    projects.router,
    terms.router,
    labels.router,
    translations.router,
    members.router,
    api_keys.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)
    if config.database.auto_create:
        await create_tables(await container.get(AsyncEngine))

    yield

    await container.close()


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GlossaError)
    async def glossa_error_handler(request: Request, exc: GlossaError) -> JSONResponse:
        http_exc = map_glossa_error(exc)
        if http_exc.status_code >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(config: Config | None = None) -> FastAPI:
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    # Refuse to start with an action nobody is allowed to perform
    POLICY_SET.validate_coverage()

    app = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    logfire.instrument_fastapi(app)
    setup_dishka(create_container(config), app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)
    _register_error_handlers(app)

    return app
