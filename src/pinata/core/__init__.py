"""Domain layer - Pure entities representing vocabulary and its placement."""

from .layout import (
    DRAG_EXTENT,
    PLACEMENT_EXTENT,
    ImageSize,
    MarkerExtent,
    clamp_position,
    derive_markers,
    place,
)
from .marker import Marker, MarkerPosition
from .vocabulary_record import Location, VocabularyRecord, WordCategory

__all__ = [
    "VocabularyRecord",
    "WordCategory",
    "Location",
    "Marker",
    "MarkerPosition",
    "ImageSize",
    "MarkerExtent",
    "PLACEMENT_EXTENT",
    "DRAG_EXTENT",
    "place",
    "clamp_position",
    "derive_markers",
]
