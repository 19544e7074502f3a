#!/usr/bin/env python3
import logging
import sys
import threading
import time

import uvicorn
from fastapi import FastAPI

from app import app
from config import HOST, LOG_DIR, LOG_LEVEL, PORT, TASKS_FILE
from logging_setup import setup_logging
from menu import InteractiveMenu
from store import StoreError, TaskStore

logger = logging.getLogger(__name__)


class ServiceStartError(RuntimeError):
    pass


class HTTPService:
    """Runs the FastAPI app with uvicorn in a background daemon thread."""

    def __init__(self, application: FastAPI, host: str = HOST, port: int = PORT) -> None:
        config = uvicorn.Config(application, host=host, port=port, log_config=None)
        self.server = uvicorn.Server(config)
        self.thread = threading.Thread(target=self.server.run, name="http", daemon=True)

    def start(self) -> None:
        """Block until uvicorn is listening. Raises ServiceStartError if it gives up first."""
        self.thread.start()
        while not self.server.started:
            if not self.thread.is_alive():
                cfg = self.server.config
                raise ServiceStartError(f"HTTP server failed to start on {cfg.host}:{cfg.port}")
            time.sleep(0.05)
        logger.info("Servidor HTTP escutando na porta %d...", self.server.config.port)

    def stop(self, timeout: float = 5.0) -> None:
        self.server.should_exit = True
        if self.thread.is_alive():
            self.thread.join(timeout=timeout)


def main() -> None:
    setup_logging(level=LOG_LEVEL, log_dir=LOG_DIR or None)

    store = TaskStore()
    try:
        store.load_from(TASKS_FILE)
    except StoreError:
        logger.critical("Could not load tasks", exc_info=True)
        sys.exit(1)

    app.state.store = store
    service = HTTPService(app)
    try:
        service.start()
    except ServiceStartError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    try:
        InteractiveMenu(store, TASKS_FILE).run()
    except StoreError:
        logger.critical("Could not save tasks", exc_info=True)
        sys.exit(1)
    finally:
        service.stop()


if __name__ == "__main__":
    main()
