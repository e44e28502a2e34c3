"""SQLite implementation for URL shortener."""

import os
import asyncio
import logging
import sqlite3
import threading
from typing import Optional, Callable, Any

from .base import URLShortenerDBBase, StorageError
from .models import URLMapping


class URLShortenerSQLite(URLShortenerDBBase):
    """SQLite implementation for URL shortener database operations.

    A single connection is opened at startup and shared by all requests.
    Blocking calls run in worker threads and take turns on the connection,
    so SQLite itself decides which of two inserts with the same code wins.
    """

    CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS urls (
        code TEXT PRIMARY KEY,
        original_url TEXT NOT NULL
    );
    """

    MEMORY = ":memory:"

    def __init__(
        self,
        db_config: str,
        connection_timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize SQLite store.

        Args:
            db_config: Path to the database file, or ":memory:"
            connection_timeout_seconds: How long to wait on a locked database
            logger: Optional logger instance
        """
        super().__init__(db_config)

        self.logger = logger or logging.getLogger(__name__)
        self.connection_timeout_seconds = connection_timeout_seconds

        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> None:
        """Open the database file and create the urls table if absent."""
        await asyncio.to_thread(self._open_sync)

    def _open_sync(self) -> None:
        with self._lock:
            if self._conn is not None:
                return

            try:
                if self.db_config != self.MEMORY:
                    directory = os.path.dirname(os.path.abspath(self.db_config))
                    os.makedirs(directory, exist_ok=True)

                # Autocommit: every statement is its own transaction
                conn = sqlite3.connect(
                    self.db_config,
                    timeout=self.connection_timeout_seconds,
                    check_same_thread=False,
                    isolation_level=None,
                )
            except (sqlite3.Error, OSError) as e:
                self.logger.error(f"Failed to open database {self.db_config}: {e}")
                raise StorageError(f"Failed to open database: {e}") from e

            try:
                self.logger.info("Creating urls table if not exists...")
                conn.execute(self.CREATE_TABLE_SQL)
            except sqlite3.Error as e:
                conn.close()
                self.logger.error(f"Error creating tables: {e}")
                raise StorageError(f"Failed to create table: {e}") from e

            self._conn = conn
            self.logger.info(f"Opened SQLite database at {self.db_config}")

    async def _run(self, func: Callable[[sqlite3.Connection], Any]) -> Any:
        """Run func against the shared connection in a worker thread."""
        def call():
            with self._lock:
                if self._conn is None:
                    raise StorageError("Database is not open")
                return func(self._conn)

        return await asyncio.to_thread(call)

    async def insert_mapping(self, code: str, original_url: str) -> bool:
        """Insert a new code -> URL mapping.

        Returns:
            True if inserted, False if the code is already taken
        """
        def insert(conn: sqlite3.Connection) -> bool:
            try:
                conn.execute(
                    "INSERT INTO urls (code, original_url) VALUES (?, ?)",
                    (code, original_url),
                )
                return True
            except sqlite3.IntegrityError as e:
                # Primary key violations read "UNIQUE constraint failed: urls.code"
                if "UNIQUE" in str(e):
                    return False
                raise StorageError(f"Error inserting mapping: {e}") from e
            except sqlite3.Error as e:
                raise StorageError(f"Error inserting mapping: {e}") from e

        try:
            inserted = await self._run(insert)
        except StorageError as e:
            self.logger.error(str(e))
            raise

        if inserted:
            self.logger.debug(f"Inserted mapping: {code} -> {original_url}")
        else:
            self.logger.warning(f"Short code already exists: {code}")
        return inserted

    async def get_original_url(self, code: str) -> Optional[str]:
        """Get the original URL for a short code."""
        mapping = await self.get_url_mapping(code)
        return mapping.original_url if mapping else None

    async def get_url_mapping(self, code: str) -> Optional[URLMapping]:
        """Get the complete mapping for a short code."""
        def select(conn: sqlite3.Connection):
            try:
                return conn.execute(
                    "SELECT code, original_url FROM urls WHERE code = ?",
                    (code,),
                ).fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Error getting URL mapping: {e}") from e

        try:
            row = await self._run(select)
        except StorageError as e:
            self.logger.error(str(e))
            raise

        if row is None:
            return None
        return URLMapping(code=row[0], original_url=row[1])

    async def count_urls(self) -> int:
        """Return the number of stored mappings."""
        def count(conn: sqlite3.Connection) -> int:
            try:
                return conn.execute("SELECT COUNT(*) FROM urls").fetchone()[0]
            except sqlite3.Error as e:
                raise StorageError(f"Error counting URLs: {e}") from e

        return await self._run(count)

    async def health_check(self) -> bool:
        """Check if database is healthy.

        Returns:
            True if healthy, False otherwise
        """
        try:
            await self._run(lambda conn: conn.execute("SELECT 1").fetchone())
            return True
        except (StorageError, sqlite3.Error) as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the database connection."""
        await asyncio.to_thread(self._close_sync)

    def _close_sync(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
            self.logger.debug(f"Closed SQLite database at {self.db_config}")
