"""
FastAPI application for the in-memory todo service.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request

from . import __version__
from .api.routes import router as api_router
from .errors import register_error_handlers
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .repositories.todo_repository import TodoRepository
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Starting Todo API (id_strategy=%s, docs=%s)",
        app.state.todo_repository.id_strategy.value,
        settings.docs_url if settings.docs_enabled else "disabled",
    )
    yield
    logger.info("Shutting down Todo API; discarding %d todos", len(app.state.todo_repository))


def _drop_validation_responses(app: FastAPI) -> None:
    """Remove the 422 responses FastAPI documents; validation errors map to 400/404."""
    default_openapi = app.openapi

    def openapi() -> Dict[str, Any]:
        schema = default_openapi()
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        component_schemas = schema.get("components", {}).get("schemas", {})
        component_schemas.pop("HTTPValidationError", None)
        component_schemas.pop("ValidationError", None)
        return schema

    app.openapi = openapi


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
) -> FastAPI:
    """Build the application around a single owned todo store."""
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="Minimal CRUD API over an in-memory list of todos",
        version=__version__,
        docs_url=settings.docs_url if settings.docs_enabled else None,
        openapi_url=settings.openapi_url if settings.docs_enabled else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = repository if repository is not None else TodoRepository(settings.id_strategy)

    register_error_handlers(app)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(api_router)
    _drop_validation_responses(app)
    return app


app = create_app()
