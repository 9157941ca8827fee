"""Vocabulary Fetcher - abstract interface for the remote vision model."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class FetchResult:
    """Raw assistant reply from a vocabulary request."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if the request failed or timed out."""
        return self.error is not None


class VocabularyFetcher(ABC):
    """
    Abstract service that asks a vision model for the vocabulary in a photo.

    Implementations (e.g., GeminiVocabularyFetcher) handle transport and auth.
    They never raise; failures come back as a FetchResult with ``error`` set.
    """

    @abstractmethod
    def fetch(self, image_base64: str, target_language: str, api_key: Optional[str]) -> FetchResult:
        """
        Request vocabulary for an image.

        Args:
            image_base64: Base64-encoded image bytes.
            target_language: Language to learn (e.g. "spanish").
            api_key: Model provider API key for authentication.

        Returns:
            FetchResult with the raw reply text or an error message.
        """
        pass
