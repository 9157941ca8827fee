"""Text processing services - sentence highlighting."""

from pinata.services.text_processing.highlighter import Segment, highlight

__all__ = [
    "Segment",
    "highlight",
]
