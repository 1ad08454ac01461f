"""Core geometry types."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A 2D point or vector.

    Points are immutable values: arithmetic returns new instances.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(x=self.x * factor, y=self.y * factor)

    __rmul__ = __mul__

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def reflect_about(self, center: "Point") -> "Point":
        """Point reflection through center: center - (self - center)."""
        return center - (self - center)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def horizontal(length: float) -> Point:
    """Vector of the given length along the x axis."""
    return Point(x=length, y=0.0)


class HandleKind(str, Enum):
    """Which tangent handle of an anchor."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @property
    def opposite(self) -> "HandleKind":
        return HandleKind.OUTGOING if self is HandleKind.INCOMING else HandleKind.INCOMING
