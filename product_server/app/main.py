"""
Main entrypoint for the Product Server.

This module assembles the FastAPI application: it sets up logging,
registers the exception handlers and includes the route table.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn, e.g.::

    uvicorn product_server.app.main:app --host 127.0.0.1 --port 3000

The product store is created per app and exposed on
``app.state.store``; pass ``store`` to ``create_app`` to supply one.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import STARTUP_LOGGER, setup_logging
from .api.router import router
from .services.product_store import ProductStore


startup_logger = logging.getLogger(STARTUP_LOGGER)


def create_app(
    store: Optional[ProductStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ProductStore]
        Store backing the ``/products`` routes.  A store seeded with
        the demo products is created when omitted.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    app_settings = app_settings or settings

    # Initialise logging before anything else; this also brings
    # uvicorn's loggers onto the same handlers.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup_logger.info("Server up and running at http://%s:%s", app_settings.host, app_settings.port)
        yield

    # Documentation routes are disabled: every path that is not part of
    # the route table must answer with the 404 page.
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else ProductStore.seeded()
    app.state.settings = app_settings

    register_exception_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
