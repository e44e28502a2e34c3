"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shortener.database.sqlite import URLShortenerSQLite
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_db(tmp_path, logger) -> AsyncGenerator[URLShortenerSQLite, None]:
    """Create an opened SQLite database in a temporary directory."""
    db = URLShortenerSQLite(
        db_config=str(tmp_path / "urls.db"),
        logger=logger,
    )
    await db.open()
    
    yield db
    
    await db.close()


@pytest.fixture
def short_code_generator():
    """Create short code generator with a seeded random source."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def service(test_db, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        db=test_db,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config(tmp_path):
    """Create test configuration."""
    return Config(
        database_path=str(tmp_path / "urls.db"),
        base_url="http://testserver/",
    )


@pytest.fixture
def app(test_db, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        db_instance=test_db,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456?tab=votes#answers",
    ]
