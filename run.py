"""Entry point for the Todo Server.

Starts the FastAPI application under Uvicorn.  Host, port, log level
and store backend are read from environment variables (see
``todo_server.app.core.config``); a ``.env``-style shell export is the
expected way to configure a deployment.

Usage:
    python run.py
    TODO_STORE=sqlite DATABASE_URL=/var/lib/todos.db python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from todo_server.app.core.config import settings
from todo_server.app.main import app


async def main() -> int:
    """Serve until interrupted.  Returns a non-zero status if startup failed."""
    config = Config(app=app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()
    if not server.started:
        # The lifespan hook failed, most likely StorageUnavailable.
        logging.getLogger(__name__).error("Todo server failed to start")
        return 1
    return 0


if __name__ == "__main__":
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        exit_code = 0
    sys.exit(exit_code)
