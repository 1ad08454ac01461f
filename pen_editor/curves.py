"""Mutating operations on the curve model.

Every operation checks all indices before touching the document, so an
out-of-range reference raises IndexError and leaves the document unchanged.
"""

import logging

from pen_editor.types import Document, HandleKind, HandleSlot, Path, Point, horizontal

logger = logging.getLogger(__name__)

DEFAULT_HANDLE_LENGTH = 30.0


def _check_path_index(document: Document, path_index: int) -> Path:
    if not 0 <= path_index < len(document.paths):
        raise IndexError(
            f"Path index {path_index} out of range ({len(document.paths)} paths)"
        )
    return document.paths[path_index]


def _check_anchor_index(document: Document, path_index: int, anchor_index: int) -> Path:
    path = _check_path_index(document, path_index)
    if not 0 <= anchor_index < len(path.anchors):
        raise IndexError(
            f"Anchor index {anchor_index} out of range "
            f"({len(path.anchors)} anchors in path {path_index})"
        )
    return path


def ensure_seeded(document: Document) -> None:
    """Give an empty document its first empty path."""
    if not document.paths:
        document.paths.append(Path())


def append_path(document: Document) -> int:
    """Append a new empty path and return its index."""
    document.paths.append(Path())
    return len(document.paths) - 1


def clear_document(document: Document) -> None:
    """Discard every path and reset to a single empty path."""
    document.paths = [Path()]


def add_anchor(
    document: Document,
    path_index: int,
    point: Point,
    handle_length: float = DEFAULT_HANDLE_LENGTH,
) -> int:
    """Append an anchor with a symmetric horizontal tangent.

    The incoming handle sits at ``point - (handle_length, 0)`` and the outgoing
    handle at ``point + (handle_length, 0)``.

    Returns:
        Index of the new anchor within its path.
    """
    path = _check_path_index(document, path_index)
    offset = horizontal(handle_length)
    path.anchors.append(point)
    path.incoming.append(HandleSlot.at(point - offset))
    path.outgoing.append(HandleSlot.at(point + offset))
    return len(path.anchors) - 1


def move_anchor(document: Document, path_index: int, anchor_index: int, delta: Point) -> None:
    """Translate an anchor together with its present handles."""
    path = _check_anchor_index(document, path_index, anchor_index)
    path.anchors[anchor_index] = path.anchors[anchor_index] + delta
    path.incoming[anchor_index] = path.incoming[anchor_index].translated(delta)
    path.outgoing[anchor_index] = path.outgoing[anchor_index].translated(delta)


def move_handle(
    document: Document,
    path_index: int,
    anchor_index: int,
    kind: HandleKind,
    delta: Point,
) -> None:
    """Translate a handle and mirror its opposite through the anchor.

    The opposite handle becomes ``anchor - (new_handle - anchor)``, keeping the
    tangent continuous through the anchor. An absent opposite handle is left
    absent, and moving an absent handle does nothing.
    """
    path = _check_anchor_index(document, path_index, anchor_index)
    slot = path.handle(anchor_index, kind)
    if slot.point is None:
        logger.debug(f"Ignoring move of absent {kind.value} handle {path_index}:{anchor_index}")
        return

    anchor = path.anchors[anchor_index]
    new_handle = slot.point + delta
    path.handles(kind)[anchor_index] = HandleSlot.at(new_handle)

    opposite = path.handles(kind.opposite)
    if opposite[anchor_index].is_present:
        opposite[anchor_index] = HandleSlot.at(new_handle.reflect_about(anchor))


def set_handle(
    document: Document,
    path_index: int,
    anchor_index: int,
    kind: HandleKind,
    point: Point | None,
) -> None:
    """Place a handle directly, without touching the opposite handle."""
    path = _check_anchor_index(document, path_index, anchor_index)
    path.handles(kind)[anchor_index] = HandleSlot(point=point)
