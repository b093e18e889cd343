"""Run the API with ``python -m server``."""

import os

import uvicorn

from server.server_config import DEFAULT_HOST, DEFAULT_PORT
from todotree.utils.logging_config import configure_logging, get_logger

# Runs on import as well; uvicorn's reload worker re-imports this module.
configure_logging()
logger = get_logger("server")


def run() -> None:
    host = os.getenv("HOST", DEFAULT_HOST)
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    reload = os.getenv("RELOAD", "false").lower() == "true"
    logger.info("Serving outlines", extra={"host": host, "port": port, "reload": reload})
    # Our root handler already formats uvicorn's records.
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    run()
