"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wagefile.api.routes import health, records
from wagefile.core.config import AppSettings
from wagefile.core.exceptions import InternalConsistencyError, ValidationError, WageFileError
from wagefile.core.logging_config import configure_logging
from wagefile.core.protocols import IFileStore
from wagefile.persistence import create_file_store
from wagefile.services.generator import WageFileGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    configure_logging(app.state.settings.log_level)
    yield


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"row_number": exc.row_number, "field": exc.field, "message": exc.message},
    )


async def _internal_error(request: Request, exc: InternalConsistencyError) -> JSONResponse:
    logger.error("Record layout invariant broken: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


async def _wagefile_error(request: Request, exc: WageFileError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(settings: AppSettings | None = None, file_store: IFileStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()
    app = FastAPI(
        title="Wage File Generator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generator = WageFileGenerator(
        file_store=file_store or create_file_store(settings),
        settings=settings,
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(InternalConsistencyError, _internal_error)
    app.add_exception_handler(WageFileError, _wagefile_error)

    app.include_router(health.router)
    app.include_router(records.router, prefix="/records")
    return app
