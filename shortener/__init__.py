"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService, CodeSpaceExhaustedError

__all__ = ["ShortCodeGenerator", "URLShortenerService", "CodeSpaceExhaustedError"]
