"""In-memory response cache for testing and session-level caching."""

from typing import Optional

from pinata.services.caching.response_cache import CachedResponse, ResponseCache


class InMemoryResponseCache(ResponseCache):
    """
    Simple in-memory cache implementation.

    Used for testing and session-level caching. No persistence.
    """

    def __init__(self):
        self._store: dict[tuple[str, str], CachedResponse] = {}

    def get(self, image_key: str, language: str) -> Optional[CachedResponse]:
        return self._store.get((image_key, language))

    def put(self, response: CachedResponse) -> None:
        self._store[(response.image_key, response.language)] = response

    def delete(self, image_key: str, language: str) -> None:
        self._store.pop((image_key, language), None)

    def list_keys(self) -> list[tuple[str, str]]:
        return list(self._store.keys())
