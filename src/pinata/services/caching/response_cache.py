"""Response Cache abstraction - storage for raw vocabulary replies."""

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CachedResponse:
    """A raw model reply stored for one (image, language) pair."""

    image_key: str
    language: str
    text: str
    model: str
    updated_at: datetime


def image_cache_key(image_base64: str) -> str:
    """Stable key for an image, independent of where the file lives."""
    return hashlib.sha1(image_base64.encode("ascii")).hexdigest()


class ResponseCache(ABC):
    """
    Abstract interface for caching vocabulary replies.

    The controller depends on this abstraction so a repeated photo does not
    hit the network or consume a daily attempt.
    """

    @abstractmethod
    def get(self, image_key: str, language: str) -> Optional[CachedResponse]:
        """
        Retrieve a cached reply.

        Args:
            image_key: Key from ``image_cache_key``.
            language: Target language of the reply.

        Returns:
            CachedResponse if found, else None.
        """
        pass

    @abstractmethod
    def put(self, response: CachedResponse) -> None:
        """Store or overwrite the reply for ``(response.image_key, response.language)``."""
        pass

    @abstractmethod
    def delete(self, image_key: str, language: str) -> None:
        """Delete a single cached reply."""
        pass

    @abstractmethod
    def list_keys(self) -> list[tuple[str, str]]:
        """List all (image_key, language) keys. Useful for diagnostics and testing."""
        pass
