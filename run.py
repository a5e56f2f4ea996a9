"""Entry point for the Track API.

Starts the FastAPI application under Uvicorn.  Configuration such as
``TRACK_STORE``, ``DATABASE_URL`` and ``LOG_LEVEL`` is read from the
environment; see ``track_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import os

from uvicorn import Config, Server

from track_api.app.main import app


def main() -> None:
    """Serve the API on ``HOST``/``PORT`` (defaults ``0.0.0.0``/``8080``)."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=host, port=port, reload=False, log_config=None)
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
