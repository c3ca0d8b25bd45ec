"""Substitution tiling model, expansion engine and path emitter."""

from tiler.tiling.model import (
    ROOT_TILE_ID,
    RuleSetError,
    Tile,
    TilePlacement,
    TilingRule,
    TilingStep,
)
from tiler.tiling.expansion import (
    DEFAULT_POLYGON_LIMIT,
    ExpansionConfig,
    ExpansionEngine,
    ExpansionResult,
)
from tiler.tiling.emitter import placements_to_path

__all__ = [
    "ROOT_TILE_ID",
    "RuleSetError",
    "Tile",
    "TilePlacement",
    "TilingRule",
    "TilingStep",
    "DEFAULT_POLYGON_LIMIT",
    "ExpansionConfig",
    "ExpansionEngine",
    "ExpansionResult",
    "placements_to_path",
]
