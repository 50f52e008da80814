import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.core.config import Settings, get_settings
from api.core.logging import configure_logging
from api.repositories.json_storage import NoteRepository, StorageError
from api.routers import health as health_router
from api.routers import notes as notes_router
from api.services.note_service import NoteService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.note_repository.initialize()
    logger.info("Notes API ready (env=%s, file=%s)", app.state.settings.app_env, app.state.note_repository.path)
    yield
    logger.info("Notes API shutting down")


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"detail": jsonable_encoder(exc.errors())}, status_code=400)


async def _storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": "Storage unavailable"}, status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[NoteRepository] = None,
) -> FastAPI:
    """Build the application with one explicitly owned repository/service pair."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Notes API",
        description="REST API for short text notes stored in a JSON file",
        version="1.0.0",
        docs_url="/api",
        lifespan=lifespan,
    )

    repository = repository or NoteRepository(settings.notes_path)
    app.state.settings = settings
    app.state.note_repository = repository
    app.state.note_service = NoteService(repository)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StorageError, _storage_error)

    app.include_router(health_router.router)
    app.include_router(notes_router.router)
    return app


app = create_app()
