"""File-based response cache persisted under the application data directory."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pinata.services.caching.response_cache import CachedResponse, ResponseCache

logger = logging.getLogger(__name__)


class FileResponseCache(ResponseCache):
    """
    File-based cache storing raw replies in a single JSON document.

    Format:
    {
        "version": 1,
        "entries": [
            {
                "image_key": "<sha1>",
                "language": "spanish",
                "text": "<vocabulary>...</vocabulary>",
                "model": "gemini-xxx",
                "updated_at": "2026-01-19T12:34:56"
            }
        ]
    }
    """

    CACHE_VERSION = 1
    CACHE_FILENAME = "responses-cache.json"

    def __init__(self, cache_dir: Path, max_entries: int = 200):
        self.cache_file = Path(cache_dir) / self.CACHE_FILENAME
        self._max_entries = max_entries
        self._entries: Optional[dict[tuple[str, str], CachedResponse]] = None

    def get(self, image_key: str, language: str) -> Optional[CachedResponse]:
        """Retrieve cached reply, loading the file on first access."""
        return self._load().get((image_key, language))

    def put(self, response: CachedResponse) -> None:
        """Store or update an entry, evicting the oldest past ``max_entries``."""
        entries = self._load()
        key = (response.image_key, response.language)
        entries.pop(key, None)
        entries[key] = response

        while len(entries) > self._max_entries:
            del entries[next(iter(entries))]

        self._save()

    def delete(self, image_key: str, language: str) -> None:
        entries = self._load()
        if entries.pop((image_key, language), None) is not None:
            self._save()

    def list_keys(self) -> list[tuple[str, str]]:
        return list(self._load().keys())

    def _load(self) -> dict[tuple[str, str], CachedResponse]:
        """Read the cache file once; a corrupt file is treated as empty."""
        if self._entries is not None:
            return self._entries

        self._entries = {}
        if not self.cache_file.exists():
            return self._entries

        try:
            data = json.loads(self.cache_file.read_text(encoding="utf-8"))
            for entry in data.get("entries", []):
                record = CachedResponse(
                    image_key=entry["image_key"],
                    language=entry["language"],
                    text=entry["text"],
                    model=entry["model"],
                    updated_at=datetime.fromisoformat(entry["updated_at"]),
                )
                self._entries[(record.image_key, record.language)] = record
        except (json.JSONDecodeError, KeyError, ValueError, OSError) as e:
            logger.warning("Error reading cache file %s: %s", self.cache_file, e)
            self._entries = {}

        return self._entries

    def _save(self) -> None:
        data = {
            "version": self.CACHE_VERSION,
            "entries": [
                {
                    "image_key": record.image_key,
                    "language": record.language,
                    "text": record.text,
                    "model": record.model,
                    "updated_at": record.updated_at.isoformat(),
                }
                for record in (self._entries or {}).values()
            ],
        }
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            self.cache_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Error writing cache file %s: %s", self.cache_file, e)
