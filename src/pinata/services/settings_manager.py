"""Settings Manager - Handles API key and feature configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pinata.services.fetching.prompts import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = 10


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment after loading the .env file
    in the project root. Environment variables:
    - GEMINI_API_KEY: Gemini API key
    - PINATA_LANGUAGE: default target language
    - PINATA_DAILY_LIMIT: vocabulary requests allowed per day
    - PINATA_SAMPLE_MODE: "1"/"true" to use the canned offline reply
    - PINATA_DATA_DIR: where the usage ledger and reply cache live
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_target_language(self) -> str:
        """Default target language, falling back to Spanish when unsupported."""
        language = (os.getenv("PINATA_LANGUAGE") or "").strip().lower()
        if not language:
            return DEFAULT_LANGUAGE
        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported PINATA_LANGUAGE %r, using %s", language, DEFAULT_LANGUAGE)
            return DEFAULT_LANGUAGE
        return language

    def get_daily_limit(self) -> int:
        """Daily request limit; invalid or negative values use the default."""
        raw = (os.getenv("PINATA_DAILY_LIMIT") or "").strip()
        if not raw:
            return DEFAULT_DAILY_LIMIT
        try:
            limit = int(raw)
        except ValueError:
            logger.warning("Invalid PINATA_DAILY_LIMIT %r, using %d", raw, DEFAULT_DAILY_LIMIT)
            return DEFAULT_DAILY_LIMIT
        return limit if limit >= 0 else DEFAULT_DAILY_LIMIT

    def is_sample_mode(self) -> bool:
        """True when the app should use the canned reply instead of Gemini."""
        return (os.getenv("PINATA_SAMPLE_MODE") or "").strip().lower() in ("1", "true", "yes")

    def get_data_dir(self) -> Path:
        """Directory for the usage database and reply cache."""
        raw = (os.getenv("PINATA_DATA_DIR") or "").strip()
        return Path(raw).expanduser() if raw else Path.home() / ".pinata"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
