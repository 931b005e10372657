"""
Main entrypoint for the Coursework API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn coursework_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.endpoints import info
from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.contact_service import ContactBook
from .services.feedback_service import FeedbackCounter


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and brings the schema
    # up to date.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Each application gets its own feedback counter and its own copy of
    the seeded contact book, so two apps never share state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.feedback = FeedbackCounter()
    app.state.contacts = ContactBook()

    app.include_router(api_router, prefix="/api")
    app.include_router(info.router, tags=["info"])
    register_error_handlers(app)

    return app


app = create_app()
