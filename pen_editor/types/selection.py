"""Hit-test results and selection state."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from pen_editor.types.geometry import HandleKind


class NoHit(BaseModel):
    """Pointer is not over any anchor or handle."""

    model_config = ConfigDict(frozen=True)

    type: Literal["none"] = "none"


class AnchorHit(BaseModel):
    """Pointer is over an anchor."""

    model_config = ConfigDict(frozen=True)

    type: Literal["anchor"] = "anchor"
    path_index: int
    anchor_index: int


class HandleHit(BaseModel):
    """Pointer is over a handle of an anchor."""

    model_config = ConfigDict(frozen=True)

    type: Literal["handle"] = "handle"
    path_index: int
    anchor_index: int
    kind: HandleKind = HandleKind.OUTGOING


HitResult = NoHit | AnchorHit | HandleHit

# A selection has the same shape as a hit: at most one anchor or one handle
# is selected across the whole document.
Selection = HitResult
NO_SELECTION = NoHit()
