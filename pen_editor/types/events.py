"""Pointer and gesture event messages."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from pen_editor.types.geometry import Point


class PointerDownEvent(BaseModel):
    """Tap or click on the canvas."""

    type: Literal["pointer_down"] = "pointer_down"
    position: Point


class DragUpdateEvent(BaseModel):
    """Incremental pointer movement during a drag."""

    type: Literal["drag_update"] = "drag_update"
    delta: Point


class DragEndEvent(BaseModel):
    type: Literal["drag_end"] = "drag_end"


class LongPressStartEvent(BaseModel):
    type: Literal["long_press_start"] = "long_press_start"
    position: Point


class LongPressMoveEvent(BaseModel):
    type: Literal["long_press_move"] = "long_press_move"
    position: Point


class LongPressEndEvent(BaseModel):
    type: Literal["long_press_end"] = "long_press_end"


class HoverEvent(BaseModel):
    """Pointer moved without a button pressed."""

    type: Literal["hover"] = "hover"
    position: Point


class ToggleModeEvent(BaseModel):
    """Leave drawing mode (double tap)."""

    type: Literal["toggle_mode"] = "toggle_mode"


class StartNewPathEvent(BaseModel):
    type: Literal["start_new_path"] = "start_new_path"


class ClearEvent(BaseModel):
    type: Literal["clear"] = "clear"


class UndoEvent(BaseModel):
    type: Literal["undo"] = "undo"


class RedoEvent(BaseModel):
    type: Literal["redo"] = "redo"


EditorEvent = Annotated[
    PointerDownEvent
    | DragUpdateEvent
    | DragEndEvent
    | LongPressStartEvent
    | LongPressMoveEvent
    | LongPressEndEvent
    | HoverEvent
    | ToggleModeEvent
    | StartNewPathEvent
    | ClearEvent
    | UndoEvent
    | RedoEvent,
    Field(discriminator="type"),
]

event_adapter: TypeAdapter[EditorEvent] = TypeAdapter(EditorEvent)
event_list_adapter: TypeAdapter[list[EditorEvent]] = TypeAdapter(list[EditorEvent])


def parse_event(data: dict) -> EditorEvent:
    """Validate a raw event dict into its typed message."""
    return event_adapter.validate_python(data)
