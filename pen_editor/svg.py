"""SVG path-data export and overlay normalization."""

from __future__ import annotations

import logging
import math

from pen_editor.types import Document, Path

logger = logging.getLogger(__name__)

SVG_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)
SVG_FOOTER = "</svg>"
DEFAULT_VIEWBOX = "0 0 100 100"


def format_coordinate(value: float) -> str:
    """Format a coordinate at full precision.

    Integral values drop the fractional part ("10" rather than "10.0", "-0"
    for negative zero); anything else uses the shortest repr that
    round-trips the double.
    """
    if value.is_integer():
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        return f"{sign}{abs(int(value))}"
    return repr(value)


def _pair(x: float, y: float) -> str:
    return f"{format_coordinate(x)} {format_coordinate(y)}"


def serialize_path(path: Path) -> str:
    """Convert a path to an SVG path 'd' attribute.

    Emits ``M x0 y0`` and then one ``C ox oy, ix iy, x y`` command per segment.
    Absent handles resolve to their own anchor.
    """
    if path.is_empty:
        return ""

    first = path.anchors[0]
    d_parts = [f"M {_pair(first.x, first.y)}"]
    for _start, control_out, control_in, end in path.segments():
        d_parts.append(
            f"C {_pair(control_out.x, control_out.y)}, "
            f"{_pair(control_in.x, control_in.y)}, "
            f"{_pair(end.x, end.y)}"
        )
    return " ".join(d_parts).strip()


def serialize_document(
    document: Document,
    stroke: str = "black",
    stroke_width: float = 2,
) -> str:
    """Wrap every non-empty path in the fixed SVG envelope."""
    elements = []
    for path in document.non_empty_paths:
        elements.append(
            f'  <path d="{serialize_path(path)}" stroke="{stroke}" '
            f'stroke-width="{format_coordinate(float(stroke_width))}" fill="none" />\n'
        )
    logger.debug(f"Serialized {len(elements)} of {len(document.paths)} paths")
    return SVG_HEADER + "".join(elements) + SVG_FOOTER


def ensure_svg_dimensions(svg_text: str, viewbox: str = DEFAULT_VIEWBOX) -> str:
    """Give an imported SVG a viewBox so it can be scaled as an overlay.

    Plain text substitution: when the text has no ``viewBox`` anywhere, the
    attribute is inserted after the first ``<svg `` only.
    """
    if "viewBox" in svg_text:
        return svg_text
    if "<svg " not in svg_text:
        logger.warning("Imported SVG has no '<svg ' tag, leaving it unchanged")
        return svg_text
    return svg_text.replace("<svg ", f'<svg viewBox="{viewbox}" ', 1)
