"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from me_api.config import AppConfig
from me_api.errors import StoreUnavailable
from me_api.models import create_db_engine, create_session_factory, init_db

from .health import router as health_router
from .profile import router as profile_router
from .query import router as query_router

logger = logging.getLogger("me_api.web")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: make sure the profile table exists
    init_db(app.state.engine)
    logger.info("Database ready: %s", app.state.engine.url.render_as_string(hide_password=True))

    yield

    # Shutdown
    app.state.engine.dispose()


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": f"Profile store unavailable: {exc}"})


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or AppConfig()

    app = FastAPI(title="Me API", lifespan=lifespan)
    app.state.config = config
    app.state.engine = create_db_engine(config.database.url, echo=config.database.echo)
    app.state.session_factory = create_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=config.server.cors_methods,
        allow_headers=config.server.cors_headers,
    )

    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(profile_router)
    app.include_router(query_router)

    return app
