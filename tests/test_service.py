"""Tests for service layer."""

import pytest
from shortener.database.base import StorageError
from shortener.service import URLShortenerService, CodeSpaceExhaustedError
from shortener.shortcode import ShortCodeGenerator


class ScriptedGenerator(ShortCodeGenerator):
    """Hands out a fixed sequence of codes, repeating the last one."""
    
    def __init__(self, codes):
        super().__init__(default_length=len(codes[0]))
        self.codes = list(codes)
        self.calls = 0
    
    def generate_random(self, length=None):
        code = self.codes[min(self.calls, len(self.codes) - 1)]
        self.calls += 1
        return code


class TestURLShortenerService:
    """Test URL shortener service."""
    
    @pytest.mark.asyncio
    async def test_shorten(self, service, sample_urls):
        """Shorten returns a well-formed code."""
        code = await service.shorten(sample_urls[0])
        
        assert len(code) == 6
        assert ShortCodeGenerator.is_valid_format(code)
    
    @pytest.mark.asyncio
    async def test_shorten_then_lookup(self, service, sample_urls):
        """Every shortened URL resolves to exactly the submitted URL."""
        codes = [await service.shorten(url) for url in sample_urls]
        
        for code, url in zip(codes, sample_urls):
            assert await service.get_original_url(code) == url
    
    @pytest.mark.asyncio
    async def test_same_url_gets_distinct_codes(self, service, test_db, sample_urls):
        """Shortening one URL twice creates two independent mappings."""
        first = await service.shorten(sample_urls[1])
        second = await service.shorten(sample_urls[1])
        
        assert first != second
        assert await service.get_original_url(first) == sample_urls[1]
        assert await service.get_original_url(second) == sample_urls[1]
        assert await test_db.count_urls() == 2
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_url", ["", "not a url", "ftp://x", "https://", "mailto:a@b.c"])
    async def test_invalid_url(self, service, test_db, bad_url):
        """Invalid URLs are rejected and create no mapping."""
        with pytest.raises(ValueError, match="Invalid URL"):
            await service.shorten(bad_url)
        
        assert await test_db.count_urls() == 0
    
    @pytest.mark.asyncio
    async def test_get_nonexistent_url(self, service):
        """Test getting nonexistent URL."""
        assert await service.get_original_url("zzzzzz") is None
    
    @pytest.mark.asyncio
    async def test_collision_is_retried(self, test_db, logger):
        """A taken code is skipped silently in favour of a fresh one."""
        await test_db.insert_mapping("AAAAAA", "https://example.com/taken")
        generator = ScriptedGenerator(["AAAAAA", "AAAAAA", "BBBBBB"])
        service = URLShortenerService(db=test_db, short_code_generator=generator, logger=logger)
        
        code = await service.shorten("https://example.com/new")
        
        assert code == "BBBBBB"
        assert generator.calls == 3
        assert await service.get_original_url("AAAAAA") == "https://example.com/taken"
        assert await service.get_original_url("BBBBBB") == "https://example.com/new"
    
    @pytest.mark.asyncio
    async def test_collision_retries_are_bounded(self, test_db, logger):
        """When every code collides, shorten gives up after max_collision_retries."""
        await test_db.insert_mapping("AAAAAA", "https://example.com/taken")
        generator = ScriptedGenerator(["AAAAAA"])
        service = URLShortenerService(
            db=test_db,
            short_code_generator=generator,
            logger=logger,
            max_collision_retries=4,
        )
        
        with pytest.raises(CodeSpaceExhaustedError, match="after 4 attempts"):
            await service.shorten("https://example.com/new")
        
        assert generator.calls == 4
        assert await test_db.count_urls() == 1
    
    @pytest.mark.asyncio
    async def test_storage_error_is_not_retried(self, test_db, logger):
        """Storage failures abort shorten on the first attempt."""
        generator = ScriptedGenerator(["AAAAAA", "BBBBBB"])
        service = URLShortenerService(db=test_db, short_code_generator=generator, logger=logger)
        await test_db.close()
        
        with pytest.raises(StorageError) as exc_info:
            await service.shorten("https://example.com/new")
        
        assert not isinstance(exc_info.value, CodeSpaceExhaustedError)
        assert generator.calls == 1
    
    def test_invalid_retry_count(self, test_db):
        """At least one attempt is required."""
        with pytest.raises(ValueError):
            URLShortenerService(db=test_db, max_collision_retries=0)
    
    @pytest.mark.asyncio
    async def test_get_url_info(self, service, sample_urls):
        """URL info exposes the stored mapping."""
        code = await service.shorten(sample_urls[0])
        
        mapping = await service.get_url_info(code)
        assert mapping.code == code
        assert mapping.original_url == sample_urls[0]
        assert await service.get_url_info("zzzzzz") is None
    
    @pytest.mark.asyncio
    async def test_health_check(self, service):
        """Test health check."""
        health = await service.health_check()
        
        assert health == {"database": True, "overall": True}
