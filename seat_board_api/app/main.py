"""
Main entrypoint for the Seat Reservation Board API.

This module assembles the FastAPI application, sets up logging, wires
the seat store and includes the routers.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``.  Importing the app here makes it easy to run
with uvicorn or another ASGI server, e.g.::

    uvicorn seat_board_api.app.main:app --reload

Passing a store to ``create_app`` replaces the configured backend,
which is how the tests run the API against a temporary database or a
store double.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import SeatBoardError
from .core.logging_config import setup_logging
from .api.router import router as api_router
from .api.endpoints import health
from .stores import SeatStore, create_store


logger = logging.getLogger(__name__)


def create_app(store: Optional[SeatStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[SeatStore]
        Seat store to serve.  Defaults to the backend selected by
        ``settings.seat_store``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log during startup.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.seat_store = store or create_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    @app.exception_handler(SeatBoardError)
    async def seat_board_error_handler(request: Request, exc: SeatBoardError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    # Apply schema migrations (SQLite) before serving requests.
    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.seat_store.init()
        logger.info("Seat store %s ready", type(app.state.seat_store).__name__)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
