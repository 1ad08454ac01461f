"""Event routing with handler registry pattern."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path as FilePath
from typing import Any, Protocol

from pydantic import ValidationError

from pen_editor import files
from pen_editor.session import EditorSession
from pen_editor.types import (
    DragUpdateEvent,
    EditorEvent,
    HoverEvent,
    LongPressMoveEvent,
    LongPressStartEvent,
    PointerDownEvent,
    parse_event,
)

logger = logging.getLogger(__name__)


class EventHandler(Protocol):
    """Protocol for event handlers."""

    def __call__(self, session: EditorSession, event: Any) -> None:
        """Apply an event to a session."""
        ...


class EventRouter:
    """Routes typed editor events to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, EventHandler] = {}

    def register(self, event_type: str) -> Callable[[EventHandler], EventHandler]:
        """Decorator to register a handler for an event type."""

        def decorator(fn: EventHandler) -> EventHandler:
            self._handlers[event_type] = fn
            return fn

        return decorator

    def route(self, session: EditorSession, event: EditorEvent) -> bool:
        """Route an event to its handler.

        Returns True if a handler was found and executed, False otherwise.
        """
        handler = self._handlers.get(event.type)
        if handler is None:
            logger.warning(f"Unknown event type: {event.type}")
            return False
        handler(session, event)
        return True

    @property
    def registered_types(self) -> list[str]:
        """List all registered event types."""
        return list(self._handlers.keys())


router = EventRouter()


@router.register("pointer_down")
def _pointer_down(session: EditorSession, event: PointerDownEvent) -> None:
    session.pointer_down(event.position)


@router.register("drag_update")
def _drag_update(session: EditorSession, event: DragUpdateEvent) -> None:
    session.drag_update(event.delta)


@router.register("drag_end")
def _drag_end(session: EditorSession, event: Any) -> None:
    session.drag_end()


@router.register("long_press_start")
def _long_press_start(session: EditorSession, event: LongPressStartEvent) -> None:
    session.long_press_start(event.position)


@router.register("long_press_move")
def _long_press_move(session: EditorSession, event: LongPressMoveEvent) -> None:
    session.long_press_move(event.position)


@router.register("long_press_end")
def _long_press_end(session: EditorSession, event: Any) -> None:
    session.long_press_end()


@router.register("hover")
def _hover(session: EditorSession, event: HoverEvent) -> None:
    session.hover(event.position)


@router.register("toggle_mode")
def _toggle_mode(session: EditorSession, event: Any) -> None:
    session.toggle_mode()


@router.register("start_new_path")
def _start_new_path(session: EditorSession, event: Any) -> None:
    session.start_new_path()


@router.register("clear")
def _clear(session: EditorSession, event: Any) -> None:
    session.clear_canvas()


@router.register("undo")
def _undo(session: EditorSession, event: Any) -> None:
    session.undo()


@router.register("redo")
def _redo(session: EditorSession, event: Any) -> None:
    session.redo()


class EditorController:
    """Single entry point that serializes events and file operations.

    Pointer events and export/import all run under one lock, so a file
    operation never interleaves with a gesture in progress.
    """

    def __init__(self, session: EditorSession | None = None, event_router: EventRouter = router):
        self.session = session or EditorSession()
        self._router = event_router
        self._lock = asyncio.Lock()

    async def dispatch(self, event: EditorEvent) -> bool:
        async with self._lock:
            return self._router.route(self.session, event)

    async def dispatch_raw(self, message: dict[str, Any]) -> bool:
        """Validate and dispatch a raw event dict. Invalid messages are dropped."""
        try:
            event = parse_event(message)
        except ValidationError as e:
            logger.warning(
                f"Dropped invalid event {message.get('type')!r}: {e.error_count()} errors"
            )
            return False
        return await self.dispatch(event)

    async def replay(self, events: list[EditorEvent]) -> int:
        """Dispatch events in order. Returns how many were handled."""
        handled = 0
        for event in events:
            if await self.dispatch(event):
                handled += 1
        return handled

    async def export_to(self, path: str | FilePath) -> str:
        async with self._lock:
            return await files.export_svg_file(self.session, path)

    async def import_from(self, path: str | FilePath) -> str:
        async with self._lock:
            return await files.import_svg_file(self.session, path)

    async def export_with_dialog(self, dialogs: files.FileDialogs) -> str | None:
        async with self._lock:
            return await files.export_to_dialog(self.session, dialogs)

    async def import_with_dialog(self, dialogs: files.FileDialogs) -> str | None:
        async with self._lock:
            return await files.import_from_dialog(self.session, dialogs)

    async def save_document(self, path: str | FilePath) -> None:
        async with self._lock:
            await files.save_document(self.session.current_document, path)

    async def load_document(self, path: str | FilePath) -> None:
        async with self._lock:
            document = await files.load_document(path)
            self.session.replace_document(document)
