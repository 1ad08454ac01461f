"""Snapshot-based undo/redo history."""

import logging

from pen_editor.types import Document

logger = logging.getLogger(__name__)


class HistoryManager:
    """Linear undo/redo stacks of full document snapshots.

    Each entry is a deep copy taken immediately before a mutation, so later
    changes to the live document never leak into stored snapshots.

    Example:
        history = HistoryManager()
        history.checkpoint(document)
        mutate(document)
        restored = history.undo(document)  # document as it was before mutate()
    """

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self._limit = limit
        self._undo_stack: list[Document] = []
        self._redo_stack: list[Document] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def checkpoint(self, document: Document) -> None:
        """Push a snapshot of document and drop any redo entries."""
        self.record(document.snapshot())

    def record(self, snapshot: Document) -> None:
        """Push a snapshot taken earlier by the caller.

        The caller hands over ownership: snapshot must not alias a live document.
        """
        self._undo_stack.append(snapshot)
        self._redo_stack.clear()
        if self._limit is not None and len(self._undo_stack) > self._limit:
            del self._undo_stack[0]

    def undo(self, document: Document) -> Document | None:
        """Return the previous document, saving document for redo.

        Returns None (and changes nothing) when there is nothing to undo.
        """
        if not self._undo_stack:
            return None
        self._redo_stack.append(document.snapshot())
        restored = self._undo_stack.pop()
        logger.debug(f"Undo: {self.undo_depth} undo / {self.redo_depth} redo entries left")
        return restored

    def redo(self, document: Document) -> Document | None:
        """Mirror of undo()."""
        if not self._redo_stack:
            return None
        self._undo_stack.append(document.snapshot())
        restored = self._redo_stack.pop()
        logger.debug(f"Redo: {self.undo_depth} undo / {self.redo_depth} redo entries left")
        return restored

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()
