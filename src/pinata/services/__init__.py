"""Services layer - business logic and external integrations."""

from pinata.services.settings_manager import SettingsManager
from pinata.services.usage_quota_service import UsageQuotaService
from pinata.services.image_loader import ImageLoader
from pinata.services.export_service import SHARE_MESSAGE, ExportService

# Parsing services
from pinata.services.parsing import VocabularyParser, parse_vocabulary

# Text processing services
from pinata.services.text_processing import Segment, highlight

# Fetching services
from pinata.services.fetching import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    FetchResult,
    GeminiVocabularyFetcher,
    SampleVocabularyFetcher,
    VocabularyFetcher,
)

# Caching services
from pinata.services.caching import (
    CachedResponse,
    FileResponseCache,
    InMemoryResponseCache,
    ResponseCache,
    image_cache_key,
)

__all__ = [
    "SettingsManager",
    "UsageQuotaService",
    "ImageLoader",
    "ExportService",
    "SHARE_MESSAGE",
    "VocabularyParser",
    "parse_vocabulary",
    "Segment",
    "highlight",
    "FetchResult",
    "VocabularyFetcher",
    "GeminiVocabularyFetcher",
    "SampleVocabularyFetcher",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "ResponseCache",
    "CachedResponse",
    "InMemoryResponseCache",
    "FileResponseCache",
    "image_cache_key",
]
