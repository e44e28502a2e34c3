"""Database layer for URL shortener."""

from .base import URLShortenerDBBase, StorageError
from .sqlite import URLShortenerSQLite
from .models import URLMapping

__all__ = ["URLShortenerDBBase", "StorageError", "URLShortenerSQLite", "URLMapping"]
