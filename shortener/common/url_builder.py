"""URL building utilities for URL shortener."""


def build_short_url(short_code: str, base_url: str) -> str:
    """Build complete short URL.
    
    Args:
        short_code: The short code
        base_url: Base URL, with or without trailing slash
            (e.g., http://localhost:8080/)
        
    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{short_code}"
