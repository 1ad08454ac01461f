"""Async file collaborators for export, overlay import and document storage."""

from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import TYPE_CHECKING, Protocol

import aiofiles
import aiofiles.os
from pydantic import ValidationError

from pen_editor.types import Document

if TYPE_CHECKING:
    from pen_editor.session import EditorSession

logger = logging.getLogger(__name__)


class EditorIOError(OSError):
    """A file read or write failed. The session is left untouched."""

    def __init__(self, path: str | FilePath, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class FileDialogs(Protocol):
    """User-driven file pickers provided by the UI."""

    async def pick_save_destination(self) -> str | None:
        """Ask where to save. None means the user cancelled."""
        ...

    async def pick_open_source(self) -> str | None:
        """Ask which file to open. None means the user cancelled."""
        ...


async def write_text_file(path: str | FilePath, content: str) -> None:
    """Write text atomically: temp file first, then rename over the target."""
    target = FilePath(path)
    temp_file = target.with_name(target.name + ".tmp")
    try:
        async with aiofiles.open(temp_file, "w", encoding="utf-8") as f:
            await f.write(content)
        await aiofiles.os.replace(temp_file, target)
    except OSError as e:
        raise EditorIOError(target, e.strerror or str(e)) from e


async def read_text_file(path: str | FilePath) -> str:
    try:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise EditorIOError(path, reason) from e


async def export_svg_file(session: EditorSession, path: str | FilePath) -> str:
    """Write the session's SVG export to path and return the SVG text."""
    svg_text = session.export_svg()
    await write_text_file(path, svg_text)
    logger.info(f"Exported SVG to {path}", extra={"bytes": len(svg_text)})
    return svg_text


async def import_svg_file(session: EditorSession, path: str | FilePath) -> str:
    """Read an SVG file and add it to the session as an overlay."""
    svg_text = await read_text_file(path)
    return session.import_overlay(svg_text)


async def export_to_dialog(session: EditorSession, dialogs: FileDialogs) -> str | None:
    """Ask for a destination and export there. Returns the path, or None if cancelled."""
    path = await dialogs.pick_save_destination()
    if path is None:
        logger.info("Export cancelled")
        return None
    await export_svg_file(session, path)
    return path


async def import_from_dialog(session: EditorSession, dialogs: FileDialogs) -> str | None:
    """Ask for a source file and import it as an overlay.

    Returns the normalized SVG text, or None if cancelled.
    """
    path = await dialogs.pick_open_source()
    if path is None:
        logger.info("Import cancelled")
        return None
    return await import_svg_file(session, path)


async def save_document(document: Document, path: str | FilePath) -> None:
    """Save a document as JSON."""
    await write_text_file(path, json.dumps(document.model_dump(mode="json"), indent=2))
    logger.info(f"Saved {len(document.paths)} paths to {path}")


async def load_document(path: str | FilePath) -> Document:
    """Load a document saved by save_document().

    Raises:
        EditorIOError: The file could not be read or is not a valid document.
    """
    text = await read_text_file(path)
    try:
        return Document.model_validate_json(text)
    except ValidationError as e:
        logger.warning(f"Invalid document file {path}: {e.error_count()} errors")
        raise EditorIOError(path, f"invalid document: {e.error_count()} validation errors") from e
