"""Entry point for serving the Music Catalog API.

Host and port come from ``API_HOST`` and ``API_PORT`` (see
``music_catalog_api.app.core.config``).  Other settings such as
``DATABASE_URL`` and ``LOG_LEVEL`` are read from the environment too.

Usage:
    python run.py
"""
from uvicorn import Config, Server

from music_catalog_api.app.core.config import settings
from music_catalog_api.app.main import app


def main() -> None:
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
