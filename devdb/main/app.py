"""
Main Application - Main Layer

Builds the FastAPI application: wires the container, binds a request id
to every log line of a request and mounts the lookup and system routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from devdb.main.config import get_settings
from devdb.main.container import app_lifespan, init_container
from devdb.presentation.controllers import device_info_router, system_router
from devdb.shared import (
    configure_logging,
    get_logger,
    request_context,
    update_logging_from_settings,
)

REQUEST_ID_HEADER = "X-Request-ID"

# Bootstrap from LOG_* env vars so settings loading is logged too
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold the container resources open."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


async def bind_request_id(request: Request, call_next):
    """Tag every log line of the request with its id and echo it back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    with request_context(request_id=request_id):
        response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    The generated OpenAPI document (/openapi.json, /docs, /redoc) doubles
    as the schema discovery endpoint for client tooling.
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        debug=settings.server.debug,
        lifespan=lifespan,
    )

    app.middleware("http")(bind_request_id)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.include_router(device_info_router)
    app.include_router(system_router)

    return app


app = create_app()
