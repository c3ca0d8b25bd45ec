"""Hit-target protocol between the editor and the hosting GUI.

The editor asks the host for a response per interactive region each frame;
the host owns pointer capture, hover tracking and click/drag classification.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Protocol

from tiler.utils.geometry import Bounds


@dataclass(frozen=True)
class HitResponse:
    hovered: bool = False
    clicked: bool = False
    drag_started: bool = False
    dragged: bool = False
    drag_stopped: bool = False


@dataclass(frozen=True)
class HitTarget:
    """Screen-space region. ``hovered`` overrides the host's rectangle hover test."""

    key: Hashable
    rect: Bounds
    hovered: bool | None = None


class FrameHost(Protocol):
    """Per-frame view of the hosting GUI."""

    def pointer_pos(self) -> tuple[float, float] | None: ...

    def shift_held(self) -> bool: ...

    def background(self) -> HitResponse: ...

    def interact(self, target: HitTarget) -> HitResponse: ...


def point_key(shape: int, corner: int) -> tuple[str, int, int]:
    return ("point", shape, corner)


def shape_key(shape: int) -> tuple[str, int]:
    return ("subtile", shape)
