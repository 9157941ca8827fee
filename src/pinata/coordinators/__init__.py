"""Coordinators - Orchestration layer connecting UI with business logic."""

from .marker_board import MarkerBoard
from .result_controller import ResultController

__all__ = [
    "MarkerBoard",
    "ResultController",
]
