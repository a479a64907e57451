"""Entry point for the seat board API server.

Serves ``seat_board_api.app.main:app`` with uvicorn.  Host and port
come from the ``HOST`` and ``PORT`` settings (defaults ``0.0.0.0`` and
``3000``); store selection and credentials are read from the
environment or a ``.env`` file in the working directory.

uvicorn's default logging setup is skipped, so ``LOG_LEVEL`` and
``LOG_FILE`` apply to server and application logs alike.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from seat_board_api.app.core.config import settings
from seat_board_api.app.core.logging_config import setup_logging
from seat_board_api.app.main import app


def main() -> None:
    level = setup_logging(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None, log_level=level)
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
