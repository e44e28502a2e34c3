#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served on uvicorn's event loop; blocking SQLite
calls run in worker threads against one long-lived connection.

Usage:
    python app.py

Environment variables:
    DATABASE_PATH - SQLite database file
    BASE_URL - Base URL for short links
    HOST - Address to bind to
    PORT - Port to listen on
    SHORT_CODE_LENGTH - Length of generated codes
    MAX_COLLISION_RETRIES - Insert attempts before giving up
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortener.database.sqlite import URLShortenerSQLite
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open storage at startup and close it at shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    # A failure here aborts startup before any traffic is served
    logger.info(f"Opening SQLite database at {config.database_path}")
    db = URLShortenerSQLite(db_config=config.database_path, logger=logger)
    await db.open()

    generator = ShortCodeGenerator(default_length=config.short_code_length)
    service = URLShortenerService(
        db=db,
        short_code_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )

    app.state.db = db
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    # Storage and service are attached by the lifespan
    app = create_app(
        db_instance=None,
        service_instance=None,
        config=config,
        logger=logger,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)

    if not server.started:
        logger.error("Startup failed, exiting")
        sys.exit(1)


if __name__ == "__main__":
    main()
