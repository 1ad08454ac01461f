"""Editor session state models."""

from enum import Enum

from pydantic import BaseModel

from pen_editor.types.geometry import Point


class EditorMode(str, Enum):
    """Interaction modes of an editor session."""

    IDLE = "idle"  # View mode, no anchor creation
    DRAWING = "drawing"  # Appending anchors to the last path
    EDITING_ANCHOR = "editing_anchor"
    EDITING_HANDLE = "editing_handle"
    SHAPING_NEW_HANDLE = "shaping_new_handle"  # Long-press drag on the newest anchor


class ShapingState(BaseModel):
    """Provisional state of a long-press handle drag."""

    anchor: Point  # Position of the anchor being shaped
    handle: Point  # Current press position


class SessionSummary(BaseModel):
    """Read-only overview of a session for UI collaborators."""

    mode: EditorMode
    path_count: int
    anchor_count: int
    can_undo: bool
    can_redo: bool
    undo_depth: int
    redo_depth: int
    overlay_count: int
