"""Marker entity - the draggable tag bound to one vocabulary record."""

from dataclasses import dataclass, replace

from .vocabulary_record import VocabularyRecord


@dataclass(frozen=True)
class MarkerPosition:
    """Absolute pixel coordinates of a marker's centre on the displayed image."""

    left: float
    top: float

    def offset(self, dx: float, dy: float) -> "MarkerPosition":
        return MarkerPosition(self.left + dx, self.top + dy)


@dataclass(frozen=True)
class Marker:
    """A vocabulary tag placed over the photo.

    ``record_index`` points into the screen's record collection. Records
    without a location have no marker, so marker and record indices can differ.
    """

    record: VocabularyRecord
    record_index: int
    position: MarkerPosition

    def moved_to(self, position: MarkerPosition) -> "Marker":
        return replace(self, position=position)

    def with_record_index(self, record_index: int) -> "Marker":
        return replace(self, record_index=record_index)
