"""Interactive editing session.

An EditorSession owns one live document, its undo/redo history, the current
selection and the ephemeral drawing state (preview point, long-press handle
shaping). Pointer and gesture events drive it through a small state machine:

    idle ──pointer_down──▶ drawing ──hit anchor──▶ editing_anchor
                             │    ──hit handle──▶ editing_handle
                             │    ──long press──▶ shaping_new_handle
                             └─toggle_mode──▶ idle

Every mutation takes a history checkpoint first. Drags checkpoint once per
drag_update event, so each incremental movement is its own undo step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pen_editor import curves
from pen_editor.config import Settings
from pen_editor.config import settings as default_settings
from pen_editor.history import HistoryManager
from pen_editor.hit_testing import hit_test
from pen_editor.svg import ensure_svg_dimensions, serialize_document
from pen_editor.types import (
    NO_SELECTION,
    AnchorHit,
    Document,
    EditorMode,
    HandleHit,
    HandleKind,
    Point,
    Selection,
    SessionSummary,
    ShapingState,
    horizontal,
)

logger = logging.getLogger(__name__)


class EditorSession:
    """Editing state for one document, constructed explicitly by the host."""

    def __init__(self, document: Document | None = None, config: Settings | None = None) -> None:
        self._settings = config or default_settings
        self._document = document.snapshot() if document is not None else Document()
        curves.ensure_seeded(self._document)
        self._history = HistoryManager(limit=self._settings.history_limit)

        self._mode: EditorMode = EditorMode.DRAWING
        self._selection: Selection = NO_SELECTION
        self._preview_point: Point | None = None
        self._shaping: ShapingState | None = None

        # Imported SVG overlays (display only, not part of the document)
        self._overlays: list[str] = []

    # --- Properties ---

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def current_document(self) -> Document:
        """Read-only copy of the live document for rendering and export."""
        return self._document.snapshot()

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def is_drawing(self) -> bool:
        return self._mode != EditorMode.IDLE

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def preview_point(self) -> Point | None:
        return self._preview_point

    @property
    def shaping(self) -> ShapingState | None:
        return self._shaping

    @property
    def overlays(self) -> list[str]:
        return list(self._overlays)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def history(self) -> HistoryManager:
        return self._history

    @property
    def has_exportable_paths(self) -> bool:
        return bool(self._document.non_empty_paths)

    def summary(self) -> SessionSummary:
        return SessionSummary(
            mode=self._mode,
            path_count=len(self._document.paths),
            anchor_count=self._document.anchor_count,
            can_undo=self._history.can_undo,
            can_redo=self._history.can_redo,
            undo_depth=self._history.undo_depth,
            redo_depth=self._history.redo_depth,
            overlay_count=len(self._overlays),
        )

    # --- Internal helpers ---

    def _apply(self, action: str, operation: Callable[[], object]) -> bool:
        """Run a curve operation behind a history checkpoint.

        Curve operations validate indices before mutating, so an IndexError
        means the document is untouched; the pre-taken snapshot is discarded
        and the event is dropped.
        """
        before = self._document.snapshot()
        try:
            operation()
        except IndexError as e:
            logger.warning(f"Dropped {action}: {e}")
            return False
        self._history.record(before)
        return True

    def _reset_transient(self) -> None:
        self._selection = NO_SELECTION
        self._preview_point = None
        self._shaping = None

    def _resting_mode(self) -> EditorMode:
        return EditorMode.DRAWING if self.is_drawing else EditorMode.IDLE

    @property
    def _last_path_index(self) -> int:
        return len(self._document.paths) - 1

    # --- Pointer events ---

    def pointer_down(self, position: Point) -> Selection:
        """Select whatever is under the pointer, or add an anchor on a miss.

        In idle mode a tap starts a new path instead.
        """
        if self._mode == EditorMode.IDLE:
            self.start_new_path()
            return self._selection

        self._shaping = None
        hit = hit_test(self._document, position, self._settings.hit_radius)

        if isinstance(hit, AnchorHit):
            self._selection = hit
            self._mode = EditorMode.EDITING_ANCHOR
        elif isinstance(hit, HandleHit):
            self._selection = hit
            self._mode = EditorMode.EDITING_HANDLE
        else:
            self._add_anchor(position)
        return self._selection

    def _add_anchor(self, position: Point) -> None:
        path_index = self._last_path_index
        if self._apply(
            "add_anchor",
            lambda: curves.add_anchor(
                self._document, path_index, position, self._settings.default_handle_length
            ),
        ):
            anchor_index = len(self._document.paths[path_index].anchors) - 1
            self._selection = AnchorHit(path_index=path_index, anchor_index=anchor_index)
            self._mode = EditorMode.DRAWING
            logger.debug(f"Added anchor {path_index}:{anchor_index} at {position.as_tuple()}")

    def drag_update(self, delta: Point) -> bool:
        """Move the selected anchor or handle by delta.

        Returns True if the document changed.
        """
        selection = self._selection
        if isinstance(selection, AnchorHit):
            return self._apply(
                "move_anchor",
                lambda: curves.move_anchor(
                    self._document, selection.path_index, selection.anchor_index, delta
                ),
            )
        if isinstance(selection, HandleHit):
            return self._apply(
                "move_handle",
                lambda: curves.move_handle(
                    self._document,
                    selection.path_index,
                    selection.anchor_index,
                    selection.kind,
                    delta,
                ),
            )
        return False

    def drag_end(self) -> None:
        self._selection = NO_SELECTION
        self._shaping = None
        self._mode = self._resting_mode()

    def hover(self, position: Point) -> None:
        """Track the pointer for the provisional segment after the last anchor."""
        last_path = self._document.paths[-1]
        if self.is_drawing and not last_path.is_empty:
            self._preview_point = position
        else:
            self._preview_point = None

    def preview_segment(self) -> tuple[Point, Point, Point, Point] | None:
        """Provisional cubic from the last anchor to the preview point."""
        last_path = self._document.paths[-1]
        if not self.is_drawing or last_path.is_empty or self._preview_point is None:
            return None
        offset = horizontal(self._settings.default_handle_length)
        start = last_path.anchors[-1]
        handle = last_path.outgoing[-1].point
        control_out = handle if handle is not None else start + offset
        end = self._preview_point
        return (start, control_out, end - offset, end)

    # --- Long-press handle shaping ---

    def long_press_start(self, position: Point) -> bool:
        """Begin sculpting the outgoing handle of the newest anchor."""
        last_path = self._document.paths[-1]
        if not self.is_drawing or last_path.is_empty:
            return False
        self._history.checkpoint(self._document)
        self._shaping = ShapingState(anchor=last_path.anchors[-1], handle=position)
        self._mode = EditorMode.SHAPING_NEW_HANDLE
        return True

    def long_press_move(self, position: Point) -> bool:
        """Set the newest anchor's outgoing handle to the press position.

        The incoming handle is left as it is.
        """
        if self._shaping is None:
            return False
        path_index = self._last_path_index
        anchor_index = len(self._document.paths[path_index].anchors) - 1
        if not self._apply(
            "shape_handle",
            lambda: curves.set_handle(
                self._document, path_index, anchor_index, HandleKind.OUTGOING, position
            ),
        ):
            return False
        self._shaping = ShapingState(anchor=self._shaping.anchor, handle=position)
        return True

    def long_press_end(self) -> None:
        if self._shaping is None:
            return
        self._shaping = None
        self._mode = self._resting_mode()

    # --- Commands ---

    def toggle_mode(self) -> None:
        """Leave drawing mode: no preview and no anchor creation until a new path starts."""
        self._reset_transient()
        self._mode = EditorMode.IDLE
        logger.info("Drawing mode off")

    def start_new_path(self) -> int:
        """Append an empty path and resume drawing. Returns its index."""
        self._history.checkpoint(self._document)
        path_index = curves.append_path(self._document)
        self._reset_transient()
        self._mode = EditorMode.DRAWING
        logger.info(f"Started path {path_index}")
        return path_index

    def clear_canvas(self) -> None:
        """Discard every path and start over with one empty path."""
        self._history.checkpoint(self._document)
        curves.clear_document(self._document)
        self._reset_transient()
        self._mode = EditorMode.DRAWING
        logger.info("Canvas cleared")

    def replace_document(self, document: Document) -> None:
        """Swap in a loaded document as one undoable step."""
        self._history.checkpoint(self._document)
        self._document = document.snapshot()
        curves.ensure_seeded(self._document)
        self._reset_transient()
        self._mode = EditorMode.DRAWING
        logger.info(f"Loaded document with {len(self._document.paths)} paths")

    def undo(self) -> bool:
        restored = self._history.undo(self._document)
        if restored is None:
            return False
        self._restore(restored)
        return True

    def redo(self) -> bool:
        restored = self._history.redo(self._document)
        if restored is None:
            return False
        self._restore(restored)
        return True

    def _restore(self, document: Document) -> None:
        self._document = document
        self._reset_transient()
        self._mode = self._resting_mode()

    # --- SVG ---

    def export_svg(self) -> str:
        """Serialize the document to a complete SVG file."""
        stroke = self._settings.export_stroke
        if self._settings.stroke_follows_mode and self.is_drawing:
            stroke = self._settings.editing_stroke
        return serialize_document(
            self._document, stroke=stroke, stroke_width=self._settings.stroke_width
        )

    def import_overlay(self, svg_text: str) -> str:
        """Normalize an imported SVG and keep it as a display-only overlay.

        Overlays are not part of the document and are not undoable.
        """
        normalized = ensure_svg_dimensions(svg_text, self._settings.overlay_viewbox)
        self._overlays.append(normalized)
        logger.info(f"Imported overlay ({len(svg_text)} chars)")
        return normalized
