"""
Main entrypoint for the Todo Server.

This module assembles the FastAPI application, sets up logging and
wires the todo store into request handling.  ``create_app`` builds
and configures the app; a default instance is created at import time
as ``app`` so it can be served directly, e.g.::

    uvicorn todo_server.app.main:app

The store backend is chosen from ``Settings`` unless a store is passed
in explicitly, which is how the tests run the same routes against both
backends.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services import create_store
from .services.store import TodoStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialise the store before serving and close it afterwards.

    ``StorageUnavailable`` raised by ``init`` propagates, so the server
    refuses to start on a broken database.
    """
    store: TodoStore = app.state.store
    await store.init()
    logger.info("Serving todos from %s", type(store).__name__)
    try:
        yield
    finally:
        await store.close()


def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[TodoStore]
        Store to serve from.  When omitted, one is built from
        ``settings`` with ``create_store``.
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings.

    Returns
    -------
    FastAPI
        A configured application with the store reachable as
        ``app.state.store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store if store is not None else create_store(settings)
    app.include_router(router)
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
