"""Abstract base class for URL shortener database implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import URLMapping


class StorageError(Exception):
    """Storage failure other than a short code uniqueness conflict."""


class URLShortenerDBBase(ABC):
    """Abstract base class for URL shortener database operations."""
    
    def __init__(self, db_config: str):
        """Initialize database settings.
        
        Args:
            db_config: Database location (file path or connection string)
        """
        self.db_config = db_config
    
    @abstractmethod
    async def open(self) -> None:
        """Open the storage handle and create the schema if absent.
        
        Raises:
            StorageError: If storage cannot be opened or initialized
        """
        pass
    
    @abstractmethod
    async def insert_mapping(self, code: str, original_url: str) -> bool:
        """Insert a new code -> URL mapping.
        
        Args:
            code: The short code to use
            original_url: The original long URL
            
        Returns:
            True if inserted, False if the code already exists
            
        Raises:
            StorageError: On any other storage failure
        """
        pass
    
    @abstractmethod
    async def get_original_url(self, code: str) -> Optional[str]:
        """Get the original URL for a short code.
        
        Args:
            code: The short code to lookup
            
        Returns:
            The original URL if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def get_url_mapping(self, code: str) -> Optional[URLMapping]:
        """Get the complete mapping for a short code.
        
        Args:
            code: The short code to lookup
            
        Returns:
            URLMapping or None if not found
        """
        pass
    
    @abstractmethod
    async def count_urls(self) -> int:
        """Return the number of stored mappings."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if database is healthy.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close database connections."""
        pass
