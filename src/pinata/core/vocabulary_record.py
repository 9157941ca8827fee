"""VocabularyRecord entity - one word extracted from a photo."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class WordCategory(Enum):
    """Semantic role of a word within the photo."""

    DESCRIPTION = "description"
    ATMOSPHERE = "atmosphere"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "WordCategory":
        """Map a raw ``type`` label to a category, defaulting to DESCRIPTION."""
        if isinstance(label, str):
            normalized = label.strip().lower()
            for category in cls:
                if category.value == normalized:
                    return category
        return cls.DESCRIPTION


@dataclass(frozen=True)
class Location:
    """Anchor point as percentages of the image width and height."""

    x_percent: float
    y_percent: float

    def __post_init__(self):
        object.__setattr__(self, "x_percent", min(max(float(self.x_percent), 0.0), 100.0))
        object.__setattr__(self, "y_percent", min(max(float(self.y_percent), 0.0), 100.0))


@dataclass(frozen=True)
class VocabularyRecord:
    """Represents a single vocabulary item returned by the vision model.

    Attributes:
        word: Target-language surface form. Never empty.
        english: English gloss of the word.
        category: Whether the word describes an object or the mood of the photo.
        word_type: Free-form part of speech (noun, verb, adjective...).
        pronunciation: Simplified phonetic hint, if the model gave one.
        word_forms: Alternate forms or conjugations, in model order.
        sentence: Example sentence in the target language.
        translation: English translation of ``sentence``.
        location: Anchor point on the photo, or None when the model omitted it.
    """

    word: str
    english: str = ""
    category: WordCategory = WordCategory.DESCRIPTION
    word_type: str = ""
    pronunciation: Optional[str] = None
    word_forms: Tuple[str, ...] = field(default_factory=tuple)
    sentence: str = ""
    translation: str = ""
    location: Optional[Location] = None

    @property
    def highlight_targets(self) -> Tuple[str, ...]:
        """Word forms to emphasize inside the example sentence."""
        return (self.word, *self.word_forms)

    @property
    def has_location(self) -> bool:
        return self.location is not None
