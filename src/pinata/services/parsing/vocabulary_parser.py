"""Vocabulary Parser - turns the model's raw reply into VocabularyRecords."""

import json
import logging
import re
from typing import Any, List, Optional, Tuple

from pinata.core import Location, VocabularyRecord, WordCategory

logger = logging.getLogger(__name__)

_BLOCK_PATTERN = re.compile(r"<vocabulary>(.*?)</vocabulary>", re.DOTALL)
_PIXEL_SUFFIX = re.compile(r"(\d+)px")

# Keys the model has used for the word forms list, newest first
_WORD_FORM_KEYS = ("wordForms", "conjugations", "wordConjugation")


class VocabularyParser:
    """Data factory for the ``<vocabulary>`` block of a model response.

    The model output is untrusted: every line is decoded on its own and a bad
    line is dropped without affecting the rest of the batch.
    """

    def parse(self, raw: Any) -> List[VocabularyRecord]:
        """
        Parse a raw model reply.

        Args:
            raw: Assistant text containing a ``<vocabulary>...</vocabulary>`` block.

        Returns:
            Records in the order the model listed them. Empty if no block was
            found or no line could be decoded.
        """
        if not isinstance(raw, str):
            return []

        match = _BLOCK_PATTERN.search(raw)
        if match is None:
            logger.info("No vocabulary block found in response (%d chars)", len(raw))
            return []

        records = []
        for line in match.group(1).split("\n"):
            line = line.strip()
            if not line:
                continue
            record = self._parse_line(line)
            if record is not None:
                records.append(record)
        return records

    def _parse_line(self, line: str) -> Optional[VocabularyRecord]:
        """Decode one JSON object line, or return None if it is malformed."""
        try:
            data = json.loads(_PIXEL_SUFFIX.sub(r"\1", line))
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integer literals, runaway nesting
            logger.debug("Skipping malformed vocabulary line %r: %s", line, e)
            return None

        if not isinstance(data, dict):
            logger.debug("Skipping non-object vocabulary line %r", line)
            return None

        # Older prompts asked for a "spanish" key instead of "word"
        word = _text(data.get("word")) or _text(data.get("spanish"))
        if not word:
            logger.debug("Skipping vocabulary line without a word: %r", line)
            return None

        return VocabularyRecord(
            word=word,
            english=_text(data.get("english")),
            category=WordCategory.from_label(data.get("type")),
            word_type=_text(data.get("wordType")),
            pronunciation=_text(data.get("pronunciation")) or None,
            word_forms=self._parse_word_forms(data),
            sentence=_text(data.get("sentence")),
            translation=_text(data.get("translation")),
            location=self._parse_location(data.get("location")),
        )

    def _parse_word_forms(self, data: dict) -> Tuple[str, ...]:
        """Normalize "[a, b, c]" strings and native lists into a tuple of forms."""
        for key in _WORD_FORM_KEYS:
            if key in data:
                value = data[key]
                break
        else:
            return ()

        if isinstance(value, str):
            items = value.strip().removeprefix("[").removesuffix("]").split(",")
        elif isinstance(value, (list, tuple)):
            items = value
        else:
            return ()

        forms = (str(item).strip() for item in items if item is not None)
        return tuple(form for form in forms if form)

    def _parse_location(self, value: Any) -> Optional[Location]:
        """Parse ``["12%", "15%"]`` (or "[12%, 15%]") into a Location."""
        if isinstance(value, str):
            value = value.strip().removeprefix("[").removesuffix("]").split(",")
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            return None

        try:
            x, y = (float(str(part).strip().strip("\"'").rstrip("%")) for part in value)
        except ValueError:
            return None
        return Location(x, y)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_vocabulary(raw: Any) -> List[VocabularyRecord]:
    """Parse a model reply with a default VocabularyParser."""
    return VocabularyParser().parse(raw)
