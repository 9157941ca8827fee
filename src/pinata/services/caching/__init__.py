"""Caching services - abstract interface and concrete implementations."""

from pinata.services.caching.response_cache import ResponseCache, CachedResponse, image_cache_key
from pinata.services.caching.in_memory_response_cache import InMemoryResponseCache
from pinata.services.caching.file_response_cache import FileResponseCache

__all__ = [
    "ResponseCache",
    "CachedResponse",
    "image_cache_key",
    "InMemoryResponseCache",
    "FileResponseCache",
]
