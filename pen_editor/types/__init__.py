"""Type definitions for the path editor.

This package contains all type definitions organized into focused modules:
- geometry: Point arithmetic and handle kinds
- paths: Handle slots, paths and documents
- selection: Hit-test results and selection state
- state: Session modes and summaries
- events: Pointer and gesture event messages
"""

from pen_editor.types.events import (
    ClearEvent,
    DragEndEvent,
    DragUpdateEvent,
    EditorEvent,
    HoverEvent,
    LongPressEndEvent,
    LongPressMoveEvent,
    LongPressStartEvent,
    PointerDownEvent,
    RedoEvent,
    StartNewPathEvent,
    ToggleModeEvent,
    UndoEvent,
    event_adapter,
    event_list_adapter,
    parse_event,
)
from pen_editor.types.geometry import HandleKind, Point, horizontal
from pen_editor.types.paths import Document, HandleSlot, Path
from pen_editor.types.selection import (
    NO_SELECTION,
    AnchorHit,
    HandleHit,
    HitResult,
    NoHit,
    Selection,
)
from pen_editor.types.state import EditorMode, SessionSummary, ShapingState

__all__ = [
    # Geometry
    "HandleKind",
    "Point",
    "horizontal",
    # Paths
    "Document",
    "HandleSlot",
    "Path",
    # Selection
    "AnchorHit",
    "HandleHit",
    "HitResult",
    "NO_SELECTION",
    "NoHit",
    "Selection",
    # State
    "EditorMode",
    "SessionSummary",
    "ShapingState",
    # Events
    "ClearEvent",
    "DragEndEvent",
    "DragUpdateEvent",
    "EditorEvent",
    "HoverEvent",
    "LongPressEndEvent",
    "LongPressMoveEvent",
    "LongPressStartEvent",
    "PointerDownEvent",
    "RedoEvent",
    "StartNewPathEvent",
    "ToggleModeEvent",
    "UndoEvent",
    "event_adapter",
    "event_list_adapter",
    "parse_event",
]
