"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize short code generator.
        
        Args:
            default_length: Default length for generated codes
            rng: Random source to draw characters from (seed it for
                reproducible codes)
        """
        if default_length < 1:
            raise ValueError("Short code length must be at least 1")
        
        self.default_length = default_length
        self.rng = rng or random.Random()
    
    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.
        
        Each character is drawn independently and uniformly from BASE62_CHARS.
        
        Args:
            length: Length of the code (uses default if not specified)
            
        Returns:
            Random short code
        """
        if length is None:
            length = self.default_length
        if length < 1:
            raise ValueError("Short code length must be at least 1")
        
        return ''.join(self.rng.choices(self.BASE62_CHARS, k=length))
    
    @classmethod
    def keyspace_size(cls, length: int) -> int:
        """Number of distinct codes of the given length."""
        return len(cls.BASE62_CHARS) ** length
    
    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code has valid format (non-empty, alphanumeric only).
        
        Args:
            code: Code to validate
            
        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
