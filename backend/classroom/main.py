"""
Classroom FastAPI Application Entry Point.

Run with: uvicorn classroom.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classroom import __version__
from classroom.config import get_settings, sanitize_error
from classroom.core.classroom import Classroom
from classroom.core.errors import ClassroomError
from classroom.api.routes import (
    admin,
    announcements,
    assignments,
    auth,
    chat,
    syllabus,
)
from classroom.services import ClassroomService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown."""
    # Startup: a service may already be attached (tests install their own)
    if getattr(app.state, "classroom_service", None) is None:
        classroom = Classroom.from_settings(get_settings())
        app.state.classroom_service = ClassroomService(classroom)
    yield
    # Shutdown: all state is process-lifetime only


async def classroom_error_handler(request: Request, exc: ClassroomError) -> JSONResponse:
    """Report a typed classroom failure with its status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": sanitize_error(exc)},
    )


def create_app() -> FastAPI:
    """Build the application with middleware, error handlers and routers."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Classroom coordination API: accounts, chat, syllabus, announcements, assignments",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClassroomError, classroom_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(auth.router)
    app.include_router(chat.router)
    app.include_router(syllabus.router)
    app.include_router(announcements.router)
    app.include_router(assignments.router)
    app.include_router(admin.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
