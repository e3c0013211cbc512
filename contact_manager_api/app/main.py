"""
Main entrypoint for the Contact Manager API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn contact_manager_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .actions.contact_actions import ContactActions
from .api.errors import contact_error_handler
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import Database, init_db
from .core.errors import ContactError
from .core.logging_config import setup_logging
from .core.views import ViewInvalidator
from .services.contact_service import ContactService


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Store handle to use.  Defaults to the database named by
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if needed and applies migrations.
        init_db(database)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    views = ViewInvalidator()
    service = ContactService(database)
    app.state.database = database
    app.state.views = views
    app.state.contact_service = service
    app.state.contact_actions = ContactActions(service, views)

    app.add_exception_handler(ContactError, contact_error_handler)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
