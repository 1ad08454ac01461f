"""Cubic Bezier path editor core."""

from pen_editor.history import HistoryManager
from pen_editor.router import EditorController, EventRouter
from pen_editor.session import EditorSession

__all__ = ["EditorController", "EditorSession", "EventRouter", "HistoryManager"]
