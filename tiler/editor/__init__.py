"""Interactive rule editor over a TilingStep."""

from tiler.editor.config import EditorConfig
from tiler.editor.hits import FrameHost, HitResponse, HitTarget
from tiler.editor.selection import NoSelection, PointSelection, Selection, ShapeSelection
from tiler.editor.session import EditorSession
from tiler.editor.view import view_transform

__all__ = [
    "EditorConfig",
    "EditorSession",
    "FrameHost",
    "HitResponse",
    "HitTarget",
    "NoSelection",
    "PointSelection",
    "Selection",
    "ShapeSelection",
    "view_transform",
]
