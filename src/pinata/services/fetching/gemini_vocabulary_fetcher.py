"""Gemini Vocabulary Fetcher - asks Google Gemini for the vocabulary in a photo."""

import base64
import binascii
import logging
import time
from typing import Optional

import google.genai as genai
from google.genai import types

from pinata.services.fetching.prompts import build_prompt, build_system_instruction
from pinata.services.fetching.vocabulary_fetcher import FetchResult, VocabularyFetcher

logger = logging.getLogger(__name__)

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class GeminiVocabularyFetcher(VocabularyFetcher):
    """
    Vocabulary fetcher using the Google Gemini multimodal API.

    Sends the photo inline with the per-language prompt and returns the raw
    reply. A request that runs past ``timeout_seconds`` is cancelled by the
    HTTP client and reported as an error result.
    """

    MODEL_NAME = "gemini-2.0-flash"
    TIMEOUT_SECONDS = 25
    MAX_RETRIES = 3

    def __init__(self, timeout_seconds: float = TIMEOUT_SECONDS, retry_delay: float = 2.0):
        self.timeout_seconds = timeout_seconds
        self.retry_delay = retry_delay

    def fetch(self, image_base64: str, target_language: str, api_key: Optional[str]) -> FetchResult:
        """
        Request vocabulary for an image from Gemini.

        Args:
            image_base64: Base64-encoded JPEG or PNG.
            target_language: Language to learn (e.g. "spanish").
            api_key: Gemini API key for authentication.

        Returns:
            FetchResult with the raw reply or a classified error message.
        """
        if not api_key:
            return FetchResult(text="", model=self.MODEL_NAME, error="Missing Gemini API key")

        try:
            image_bytes = base64.b64decode(image_base64, validate=True)
            prompt = build_prompt(target_language)
            system_instruction = build_system_instruction(target_language)
        except (binascii.Error, ValueError) as e:
            return FetchResult(text="", model=self.MODEL_NAME, error=f"Invalid request: {e}")

        retry_delay = self.retry_delay
        attempt = 0
        # One deadline covers every attempt and every backoff sleep
        deadline = time.monotonic() + self.timeout_seconds

        while attempt < self.MAX_RETRIES:
            attempt += 1
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            try:
                client = genai.Client(
                    api_key=api_key,
                    http_options=types.HttpOptions(timeout=int(remaining * 1000)),
                )

                logger.info(
                    "Vocabulary request attempt %d/%d (model=%s, language=%s, %d image bytes)",
                    attempt,
                    self.MAX_RETRIES,
                    self.MODEL_NAME,
                    target_language,
                    len(image_bytes),
                )

                response = client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=[
                        types.Part.from_bytes(data=image_bytes, mime_type=_guess_mime_type(image_bytes)),
                        prompt,
                    ],
                    config=types.GenerateContentConfig(
                        system_instruction=system_instruction,
                        temperature=0.5,
                        max_output_tokens=1000,
                    ),
                )

                if not response.text:
                    return FetchResult(text="", model=self.MODEL_NAME, error="Empty response from API")

                logger.info("Vocabulary response received on attempt %d (%d chars)", attempt, len(response.text))
                return FetchResult(text=response.text, model=self.MODEL_NAME)

            except Exception as e:
                error_msg = str(e).lower()
                logger.warning(
                    "Vocabulary request failed on attempt %d/%d: %s: %s",
                    attempt,
                    self.MAX_RETRIES,
                    type(e).__name__,
                    e,
                )

                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES and time.monotonic() + retry_delay < deadline:
                    logger.info("Rate limit detected. Retrying in %s seconds...", retry_delay)
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
                    return FetchResult(text="", model=self.MODEL_NAME, error=f"Invalid API key or request: {e}")
                elif is_rate_limit:
                    return FetchResult(
                        text="", model=self.MODEL_NAME, error="API quota exceeded. Please try again later."
                    )
                elif "deadline" in error_msg or "timeout" in error_msg or "timed out" in error_msg:
                    return FetchResult(
                        text="", model=self.MODEL_NAME, error="Request timed out. Please check your connection."
                    )
                else:
                    return FetchResult(text="", model=self.MODEL_NAME, error=f"Vocabulary request failed: {e}")

        return FetchResult(
            text="", model=self.MODEL_NAME, error="Request timed out. Please check your connection."
        )


def _guess_mime_type(data: bytes) -> str:
    return "image/png" if data.startswith(_PNG_SIGNATURE) else "image/jpeg"
