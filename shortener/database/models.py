"""Data models for URL shortener."""

from dataclasses import dataclass


@dataclass
class URLMapping:
    """Represents a row of the urls table."""
    
    code: str
    original_url: str
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "original_url": self.original_url,
        }
