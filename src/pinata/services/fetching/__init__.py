"""Fetching services - abstract interface, Gemini and sample implementations."""

from pinata.services.fetching.vocabulary_fetcher import FetchResult, VocabularyFetcher
from pinata.services.fetching.gemini_vocabulary_fetcher import GeminiVocabularyFetcher
from pinata.services.fetching.sample_vocabulary_fetcher import SAMPLE_RESPONSE, SampleVocabularyFetcher
from pinata.services.fetching.prompts import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, build_prompt

__all__ = [
    "FetchResult",
    "VocabularyFetcher",
    "GeminiVocabularyFetcher",
    "SampleVocabularyFetcher",
    "SAMPLE_RESPONSE",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "build_prompt",
]
