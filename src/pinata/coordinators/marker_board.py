"""Marker board state and its transition functions.

A MarkerBoard is an immutable snapshot of everything drawn over the photo:
the markers, their front-to-back order, the selection, the drag in progress
and the global edit-mode flag. Every interaction is a pure function from one
board to the next; the screen controller swaps the whole board at once.

Per-marker states: idle -> selected -> (dragging | idle). Dragging is only
reachable while edit mode is on.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from pinata.core import (
    DRAG_EXTENT,
    PLACEMENT_EXTENT,
    ImageSize,
    Marker,
    MarkerExtent,
    VocabularyRecord,
    clamp_position,
    derive_markers,
)


@dataclass(frozen=True)
class MarkerBoard:
    """UI state for the markers of one result screen.

    ``z_order`` lists marker indices back to front; it is always a
    permutation of ``range(len(markers))``.
    """

    markers: Tuple[Marker, ...] = ()
    z_order: Tuple[int, ...] = ()
    image_size: ImageSize = ImageSize(0, 0)
    selected_index: Optional[int] = None
    dragging_index: Optional[int] = None
    edit_mode: bool = False
    capturing: bool = False

    @property
    def is_dragging(self) -> bool:
        return self.dragging_index is not None

    def rank_of(self, index: int) -> int:
        """Render rank of a marker; higher is drawn on top."""
        _require_index(self, index)
        return self.z_order.index(index)

    def is_selected(self, index: int) -> bool:
        return self.selected_index == index

    def markers_back_to_front(self) -> Tuple[Tuple[int, Marker], ...]:
        """(index, marker) pairs in paint order."""
        return tuple((index, self.markers[index]) for index in self.z_order)


def _require_index(board: MarkerBoard, index: int) -> int:
    """Fail fast on marker indices that do not belong to the board."""
    if not (0 <= index < len(board.markers)):
        raise IndexError(f"Marker index {index} out of range for {len(board.markers)} markers")
    return index


def layout_board(
    board: MarkerBoard,
    records: Sequence[VocabularyRecord],
    image_size: ImageSize,
    extent: MarkerExtent = PLACEMENT_EXTENT,
) -> MarkerBoard:
    """Derive the initial markers for ``records`` on an image of ``image_size``.

    Layout is deferred while the image size is unknown. The z-order starts
    as record order and the selection is cleared.
    """
    markers = derive_markers(records, image_size, extent)
    return replace(
        board,
        markers=markers,
        z_order=tuple(range(len(markers))),
        image_size=image_size,
        selected_index=None,
        dragging_index=None,
    )


def bring_to_front(board: MarkerBoard, index: int) -> MarkerBoard:
    """Move ``index`` to the top of the z-order, keeping the others' order."""
    _require_index(board, index)
    order = tuple(i for i in board.z_order if i != index) + (index,)
    return replace(board, z_order=order)


def select_or_toggle(board: MarkerBoard, index: int) -> MarkerBoard:
    """Tap on a marker: deselect it if selected, else select and raise it."""
    _require_index(board, index)
    if board.selected_index == index:
        return replace(board, selected_index=None)
    return replace(bring_to_front(board, index), selected_index=index)


def begin_drag(board: MarkerBoard, index: int) -> MarkerBoard:
    """Start dragging a marker. Ignored outside edit mode."""
    _require_index(board, index)
    if not board.edit_mode:
        return board
    return replace(board, dragging_index=index)


def update_drag(
    board: MarkerBoard,
    index: int,
    dx: float,
    dy: float,
    extent: MarkerExtent = DRAG_EXTENT,
) -> MarkerBoard:
    """Move a marker by ``(dx, dy)`` from its last committed position.

    Each call re-bases on the position committed by the previous call, so
    deltas are per move event, not cumulative from the drag start. The new
    position is clamped inside the image and committed immediately. Ignored
    outside edit mode.
    """
    _require_index(board, index)
    if not board.edit_mode:
        return board

    marker = board.markers[index]
    candidate = marker.position.offset(dx, dy)
    position = clamp_position(
        candidate.left,
        candidate.top,
        board.image_size.width,
        board.image_size.height,
        extent.width,
        extent.height,
    )
    markers = board.markers[:index] + (marker.moved_to(position),) + board.markers[index + 1:]
    return replace(board, markers=markers, dragging_index=index)


def end_drag(board: MarkerBoard, index: int) -> MarkerBoard:
    """Finish a drag; the committed position is kept."""
    _require_index(board, index)
    if board.dragging_index != index:
        return board
    return replace(board, dragging_index=None)


def cancel_drag(board: MarkerBoard, index: int) -> MarkerBoard:
    """Abort a drag (e.g. gesture stolen); already committed moves are kept."""
    return end_drag(board, index)


def delete_marker(board: MarkerBoard, index: int) -> MarkerBoard:
    """Remove a marker and compact z-order, selection and record indices."""
    _require_index(board, index)
    removed = board.markers[index]

    markers = tuple(
        marker.with_record_index(marker.record_index - 1)
        if marker.record_index > removed.record_index
        else marker
        for i, marker in enumerate(board.markers)
        if i != index
    )
    z_order = tuple(i - 1 if i > index else i for i in board.z_order if i != index)

    return replace(
        board,
        markers=markers,
        z_order=z_order,
        selected_index=_shift_after_delete(board.selected_index, index),
        dragging_index=_shift_after_delete(board.dragging_index, index),
    )


def delete_record(board: MarkerBoard, record_index: int) -> MarkerBoard:
    """Reflect removal of a record: drop its marker (if any) and re-index the rest."""
    for index, marker in enumerate(board.markers):
        if marker.record_index == record_index:
            return delete_marker(board, index)

    markers = tuple(
        marker.with_record_index(marker.record_index - 1)
        if marker.record_index > record_index
        else marker
        for marker in board.markers
    )
    return replace(board, markers=markers)


def set_edit_mode(board: MarkerBoard, enabled: bool) -> MarkerBoard:
    """Toggle the global edit flag; leaving edit mode drops any drag."""
    if enabled:
        return replace(board, edit_mode=True)
    return replace(board, edit_mode=False, dragging_index=None)


def set_capturing(board: MarkerBoard, capturing: bool) -> MarkerBoard:
    """Show or hide the branding overlay used while exporting."""
    return replace(board, capturing=capturing)


def _shift_after_delete(value: Optional[int], deleted: int) -> Optional[int]:
    if value is None or value == deleted:
        return None
    return value - 1 if value > deleted else value
