"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import List, Union

from pydantic import BaseModel, Field, field_validator


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""
    
    url: str = Field(..., description="The URL to shorten", min_length=1)
    
    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL scheme."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"}
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""
    
    short_url: str = Field(..., description="The complete short URL")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"short_url": "http://localhost:8080/aZ3k9Q"}
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Stored mapping for a short code."""
    
    code: str
    original_url: str


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    detail: Union[str, List[str]] = Field(..., description="Error message(s)")
