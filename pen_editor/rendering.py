"""Preview rendering of documents with Pillow.

Draws the editable document the way the editor shows it: path strokes, and
while drawing, anchor dots, handle lines and the provisional segment that
follows the pointer. Imported overlays are not rasterized here.
"""

from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal

from PIL import Image, ImageDraw

from pen_editor.interpolation import flatten_path, flatten_segment
from pen_editor.types import Document, Point

if TYPE_CHECKING:
    from pen_editor.session import EditorSession

logger = logging.getLogger(__name__)

Segment = tuple[Point, Point, Point, Point]


def image_to_base64(img: Image.Image) -> str:
    """Convert PIL Image to base64 PNG string."""
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return base64.standard_b64encode(buffer.getvalue()).decode("utf-8")


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for document rendering.

    Attributes:
        width: Output image width in pixels
        height: Output image height in pixels
        background_color: Canvas color as hex string
        editing: Draw anchors, handles and the preview segment
        path_color: Stroke color while editing
        final_color: Stroke color when not editing
        stroke_width: Path line width in pixels
        anchor_color: Fill color of anchor and handle dots
        handle_line_color: Color of the anchor-to-handle lines
        anchor_radius: Radius of anchor dots
        handle_radius: Radius of handle dots
        steps_per_unit: Curve flattening density
        output_format: Return type - "image" (PIL), "bytes", or "base64"
    """

    width: int = 800
    height: int = 600
    background_color: str = "#BBDEFB"
    editing: bool = True
    path_color: str = "#9E9E9E"
    final_color: str = "#000000"
    stroke_width: int = 2
    anchor_color: str = "#2196F3"
    handle_line_color: str = "#9E9E9E"
    anchor_radius: float = 5.0
    handle_radius: float = 4.0
    steps_per_unit: float = 0.5
    output_format: Literal["image", "bytes", "base64"] = "bytes"


def _dot(draw: ImageDraw.ImageDraw, center: Point, radius: float, color: str) -> None:
    draw.ellipse(
        (center.x - radius, center.y - radius, center.x + radius, center.y + radius),
        fill=color,
    )


def _draw_polyline(
    draw: ImageDraw.ImageDraw, points: list[Point], color: str, width: int
) -> None:
    if len(points) >= 2:
        draw.line([p.as_tuple() for p in points], fill=color, width=width)


def render_document(
    document: Document,
    options: RenderOptions | None = None,
    preview: Segment | None = None,
) -> Image.Image | bytes | str:
    """Render a document to an image.

    Args:
        document: Document to draw; empty paths are skipped.
        options: Render configuration (defaults used if None).
        preview: Provisional segment to draw after the last anchor.

    Returns:
        PIL Image, PNG bytes, or base64 string depending on output_format.
    """
    opts = options or RenderOptions()
    img = Image.new("RGB", (opts.width, opts.height), opts.background_color)
    draw = ImageDraw.Draw(img)
    stroke_color = opts.path_color if opts.editing else opts.final_color

    for path in document.non_empty_paths:
        points = flatten_path(path, opts.steps_per_unit)
        _draw_polyline(draw, points, stroke_color, opts.stroke_width)

        if not opts.editing:
            continue
        for i, anchor in enumerate(path.anchors):
            for slot in (path.incoming[i], path.outgoing[i]):
                if slot.point is not None:
                    draw.line(
                        [anchor.as_tuple(), slot.point.as_tuple()], fill=opts.handle_line_color
                    )
                    _dot(draw, slot.point, opts.handle_radius, opts.anchor_color)
        for anchor in path.anchors:
            _dot(draw, anchor, opts.anchor_radius, opts.anchor_color)

    if opts.editing and preview is not None:
        start = preview[0]
        points = [start, *flatten_segment(*preview, steps_per_unit=opts.steps_per_unit)]
        _draw_polyline(draw, points, stroke_color, opts.stroke_width)

    if opts.output_format == "image":
        return img
    if opts.output_format == "base64":
        return image_to_base64(img)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def render_session(
    session: EditorSession, options: RenderOptions | None = None
) -> Image.Image | bytes | str:
    """Render a session's document with its editing state."""
    base = options or RenderOptions(
        width=session.settings.canvas_width,
        height=session.settings.canvas_height,
        steps_per_unit=session.settings.path_steps_per_unit,
    )
    opts = replace(base, editing=session.is_drawing)
    logger.debug(f"Rendering session in {session.mode.value} mode")
    return render_document(session.current_document, opts, preview=session.preview_segment())
