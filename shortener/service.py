"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any

from .shortcode import ShortCodeGenerator
from .database.base import URLShortenerDBBase, StorageError
from .database.models import URLMapping
from .common.validators import is_valid_url


class CodeSpaceExhaustedError(StorageError):
    """Every generated code collided with an existing one."""


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        db: URLShortenerDBBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 10,
    ):
        """Initialize URL shortener service.

        Args:
            db: Opened database instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Maximum insert attempts before giving up
        """
        if max_collision_retries < 1:
            raise ValueError("max_collision_retries must be at least 1")

        self.db = db
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def shorten(self, original_url: str) -> str:
        """Create a new mapping for original_url under a fresh random code.

        Args:
            original_url: The original long URL

        Returns:
            The short code

        Raises:
            ValueError: If the URL is invalid
            CodeSpaceExhaustedError: If every attempt collided
            StorageError: On any other storage failure (not retried)
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise ValueError(f"Invalid URL: {error}")

        for attempt in range(1, self.max_collision_retries + 1):
            code = self.generator.generate_random()

            if await self.db.insert_mapping(code, original_url):
                self.logger.info(f"Created short URL: {code} -> {original_url}")
                return code

            self.logger.warning(
                f"Short code collision on attempt {attempt}/{self.max_collision_retries}: {code}"
            )

        keyspace = ShortCodeGenerator.keyspace_size(self.generator.default_length)
        raise CodeSpaceExhaustedError(
            f"Unable to generate unique short code after {self.max_collision_retries} "
            f"attempts (keyspace of {keyspace} codes)"
        )

    async def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found
        """
        original_url = await self.db.get_original_url(short_code)

        if original_url is None:
            self.logger.debug(f"Short code not found: {short_code}")
            return None

        self.logger.debug(f"Retrieved URL: {short_code} -> {original_url}")
        return original_url

    async def get_url_info(self, short_code: str) -> Optional[URLMapping]:
        """Get the stored mapping for a short code."""
        return await self.db.get_url_mapping(short_code)

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.db.health_check()

        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
