"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tiler.editor.hits import HitResponse, HitTarget, point_key, shape_key
from tiler.editor.session import EditorSession
from tiler.editor.view import view_transform
from tiler.tiling.model import ROOT_TILE_ID
from tiler.tiling.samples import square_step


class ScriptedHost:
    """Stand-in for the GUI: returns scripted responses per hit-target key."""

    def __init__(self, pointer=(0.0, 0.0), shift=False, responses=None, background=None) -> None:
        self.pointer = pointer
        self.shift = shift
        self.responses = responses or {}
        self.bg = background or HitResponse()
        self.targets: list[HitTarget] = []

    def pointer_pos(self):
        return self.pointer

    def shift_held(self) -> bool:
        return self.shift

    def background(self) -> HitResponse:
        return self.bg

    def interact(self, target: HitTarget) -> HitResponse:
        self.targets.append(target)
        return self.responses.get(target.key, HitResponse(hovered=bool(target.hovered)))


def click_shape(j: int, shift: bool = False, pointer=(0.0, 0.0)) -> ScriptedHost:
    return ScriptedHost(pointer=pointer, shift=shift, responses={shape_key(j): HitResponse(clicked=True)})


def click_corner(j: int, i: int, shift: bool = False) -> ScriptedHost:
    return ScriptedHost(shift=shift, responses={point_key(j, i): HitResponse(clicked=True)})


def drag_frame(j: int, pointer, shift: bool = False, started: bool = False, stopped: bool = False) -> ScriptedHost:
    resp = HitResponse(drag_started=started, dragged=not stopped, drag_stopped=stopped)
    return ScriptedHost(pointer=pointer, shift=shift, responses={shape_key(j): resp})


@pytest.fixture
def square():
    return square_step()


@pytest.fixture
def session() -> EditorSession:
    s = EditorSession(snap_enabled=False)
    s.select_rule(ROOT_TILE_ID)
    return s


@pytest.fixture
def view():
    # 100 screen units per model unit, model origin at (200, 200)
    return view_transform(400.0, 400.0)


@pytest.fixture
def fine_view():
    # 1000 screen units per model unit, model origin at (2000, 2000)
    return view_transform(4000.0, 4000.0)
