"""Resolve pointer positions to anchors and handles."""

from pen_editor.types import AnchorHit, Document, HandleHit, HandleKind, HitResult, NoHit, Point

DEFAULT_HIT_RADIUS = 10.0


def hit_test(
    document: Document, position: Point, threshold: float = DEFAULT_HIT_RADIUS
) -> HitResult:
    """Find the first anchor or outgoing handle strictly within threshold.

    Paths are scanned in insertion order. Within each path every anchor is
    checked before any handle. Only outgoing handles can be grabbed; incoming
    handles follow them through the symmetric update.
    """
    for path_index, path in enumerate(document.paths):
        for anchor_index, anchor in enumerate(path.anchors):
            if anchor.distance_to(position) < threshold:
                return AnchorHit(path_index=path_index, anchor_index=anchor_index)

        for anchor_index, slot in enumerate(path.outgoing):
            if slot.point is not None and slot.point.distance_to(position) < threshold:
                return HandleHit(
                    path_index=path_index,
                    anchor_index=anchor_index,
                    kind=HandleKind.OUTGOING,
                )

    return NoHit()
