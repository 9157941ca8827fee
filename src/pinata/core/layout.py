"""Layout engine - converts percentage locations into on-image pixel positions."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .marker import Marker, MarkerPosition
from .vocabulary_record import Location, VocabularyRecord

# Marker tag footprint: minWidth of the tag and its approximate height with padding
MARKER_WIDTH = 100
MARKER_HEIGHT = 60


@dataclass(frozen=True)
class ImageSize:
    """Displayed size of the photo in pixels."""

    width: float
    height: float

    @property
    def is_known(self) -> bool:
        """True once image metadata is loaded and both dimensions are non-zero."""
        return self.width > 0 and self.height > 0

    @classmethod
    def scaled_to_width(
        cls, natural_width: float, natural_height: float, display_width: float
    ) -> "ImageSize":
        """Size of an image stretched to ``display_width`` keeping its aspect ratio."""
        if natural_width <= 0 or natural_height <= 0:
            return cls(0, 0)
        return cls(display_width, natural_height / natural_width * display_width)


@dataclass(frozen=True)
class MarkerExtent:
    """Footprint used to keep a marker fully inside the image."""

    width: float = MARKER_WIDTH
    height: float = MARKER_HEIGHT

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2


# Initial placement and drag clamping are configured separately but share
# the same symmetric footprint (50px half width, 30px half height).
PLACEMENT_EXTENT = MarkerExtent()
DRAG_EXTENT = MarkerExtent()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(low, value), high)


def clamp_position(
    left: float,
    top: float,
    image_width: float,
    image_height: float,
    marker_width: float = MARKER_WIDTH,
    marker_height: float = MARKER_HEIGHT,
) -> MarkerPosition:
    """Clamp a marker centre so its half-extent never crosses the image edge."""
    return MarkerPosition(
        left=_clamp(left, marker_width / 2, image_width - marker_width / 2),
        top=_clamp(top, marker_height / 2, image_height - marker_height / 2),
    )


def place(
    location: Location,
    image_width: float,
    image_height: float,
    marker_width: float = MARKER_WIDTH,
    marker_height: float = MARKER_HEIGHT,
) -> MarkerPosition:
    """Convert a percentage location into a clamped pixel position.

    Args:
        location: Anchor point in percent of the image dimensions.
        image_width: Displayed image width in pixels.
        image_height: Displayed image height in pixels.
        marker_width: Full marker width used for clamping.
        marker_height: Full marker height used for clamping.

    Returns:
        MarkerPosition with the marker centre in pixels.
    """
    raw_left = location.x_percent / 100 * image_width
    raw_top = location.y_percent / 100 * image_height
    return clamp_position(raw_left, raw_top, image_width, image_height, marker_width, marker_height)


def derive_markers(
    records: Sequence[VocabularyRecord],
    image_size: ImageSize,
    extent: MarkerExtent = PLACEMENT_EXTENT,
) -> Tuple[Marker, ...]:
    """Lay out one marker per located record.

    Layout is deferred (empty result) until the image size is known. Records
    without a location stay in the list view but get no marker.
    """
    if not image_size.is_known:
        return ()

    return tuple(
        Marker(
            record=record,
            record_index=index,
            position=place(
                record.location,
                image_size.width,
                image_size.height,
                extent.width,
                extent.height,
            ),
        )
        for index, record in enumerate(records)
        if record.location is not None
    )
