"""Path model for editable cubic Bezier curves."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from pen_editor.types.geometry import HandleKind, Point


class HandleSlot(BaseModel):
    """A tangent handle slot that is either present or absent.

    An absent handle means "use the anchor itself as the control point",
    which degenerates that end of the segment to a straight join.
    """

    model_config = ConfigDict(frozen=True)

    point: Point | None = None

    @classmethod
    def at(cls, point: Point) -> HandleSlot:
        return cls(point=point)

    @classmethod
    def absent(cls) -> HandleSlot:
        return cls()

    @property
    def is_present(self) -> bool:
        return self.point is not None

    def resolve(self, anchor: Point) -> Point:
        """Control point for this slot, falling back to the anchor when absent."""
        if self.point is None:
            return anchor
        return self.point

    def translated(self, delta: Point) -> HandleSlot:
        """Slot moved by delta. Absent slots stay absent."""
        if self.point is None:
            return self
        return HandleSlot(point=self.point + delta)


class Path(BaseModel):
    """An open piecewise cubic Bezier path.

    Every anchor owns an incoming and an outgoing handle slot, so the three
    lists always have the same length. An empty path is valid (a path that
    has just been started) and is skipped when rendering and exporting.
    """

    anchors: list[Point] = []
    incoming: list[HandleSlot] = []
    outgoing: list[HandleSlot] = []

    @model_validator(mode="after")
    def _check_slot_counts(self) -> Path:
        if not len(self.anchors) == len(self.incoming) == len(self.outgoing):
            raise ValueError(
                f"Handle slots out of step with anchors: {len(self.anchors)} anchors, "
                f"{len(self.incoming)} incoming, {len(self.outgoing)} outgoing"
            )
        return self

    def __len__(self) -> int:
        return len(self.anchors)

    @property
    def is_empty(self) -> bool:
        return not self.anchors

    def handles(self, kind: HandleKind) -> list[HandleSlot]:
        return self.incoming if kind == HandleKind.INCOMING else self.outgoing

    def handle(self, anchor_index: int, kind: HandleKind) -> HandleSlot:
        return self.handles(kind)[anchor_index]

    def segments(self) -> list[tuple[Point, Point, Point, Point]]:
        """Cubic segments as (start, control1, control2, end) tuples."""
        result: list[tuple[Point, Point, Point, Point]] = []
        for i in range(len(self.anchors) - 1):
            start = self.anchors[i]
            end = self.anchors[i + 1]
            result.append(
                (
                    start,
                    self.outgoing[i].resolve(start),
                    self.incoming[i + 1].resolve(end),
                    end,
                )
            )
        return result


class Document(BaseModel):
    """Ordered collection of paths. Later paths render on top."""

    paths: list[Path] = []

    @property
    def anchor_count(self) -> int:
        return sum(len(p) for p in self.paths)

    @property
    def non_empty_paths(self) -> list[Path]:
        return [p for p in self.paths if not p.is_empty]

    def snapshot(self) -> Document:
        """Independent deep copy with no aliasing to this document."""
        return self.model_copy(deep=True)
