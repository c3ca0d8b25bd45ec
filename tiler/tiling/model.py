"""Tiling data model: tile outlines, placements and per-type rules.

Rules reference tile types by integer id into ``TilingStep.rules``, so a rule
may list placements of its own type without any cyclic ownership.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from matplotlib.transforms import Affine2D
from numpy.typing import NDArray

from tiler.utils.geometry import Bounds, apply

if TYPE_CHECKING:
    from matplotlib.path import Path

    from tiler.tiling.expansion import ExpansionResult

# Seed tile type used by every sample rule set.
ROOT_TILE_ID = 1


class RuleSetError(ValueError):
    """A rule set that cannot be expanded (dangling tile id, bad factor)."""


def _as_corners(points) -> NDArray[np.float64]:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


@dataclass(eq=False)
class Tile:
    """Closed polygon outline. The first corner is revisited to close the loop."""

    corners: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))

    def __post_init__(self) -> None:
        self.corners = _as_corners(self.corners)

    @classmethod
    def polygon(cls, points) -> Tile:
        return cls(_as_corners(points))

    @classmethod
    def empty(cls) -> Tile:
        """Structural placeholder with no visible outline."""
        return cls()

    @classmethod
    def square(cls, size: float = 1.0) -> Tile:
        return cls.polygon([(0.0, 0.0), (0.0, size), (size, size), (size, 0.0)])

    @classmethod
    def rhombus(cls, length: float, angle_deg: float) -> Tile:
        """Rhombus with its apex at the origin, opening along +y."""
        half = math.radians(angle_deg) * 0.5
        dx = math.sin(half) * length
        dy = math.cos(half) * length
        return cls.polygon([(0.0, 0.0), (-dx, dy), (0.0, 2.0 * dy), (dx, dy)])

    @property
    def is_empty(self) -> bool:
        return len(self.corners) == 0

    def transformed_corners(self, transform: Affine2D) -> NDArray[np.float64]:
        return apply(transform, self.corners)


@dataclass
class TilePlacement:
    """One positioned instance of a tile type."""

    tile_id: int
    transform: Affine2D = field(default_factory=Affine2D)

    def copy(self) -> TilePlacement:
        return TilePlacement(self.tile_id, self.transform.frozen())


@dataclass
class TilingRule:
    """Replacement for one tile type; child transforms are relative to the parent."""

    tile: Tile
    result: list[TilePlacement] = field(default_factory=list)


@dataclass
class TilingStep:
    """Complete rule set, indexed by tile type id."""

    rules: list[TilingRule] = field(default_factory=list)
    expansion_factor: float = 1.0

    def rule_for(self, tile_id: int) -> TilingRule:
        """Rule for ``tile_id``. Out-of-range ids (negative included) raise IndexError."""
        if not 0 <= tile_id < len(self.rules):
            raise IndexError(f"tile id {tile_id} out of range for {len(self.rules)} rules")
        return self.rules[tile_id]

    def validate(self) -> None:
        if not self.expansion_factor > 0:
            raise RuleSetError(f"expansion factor must be positive, got {self.expansion_factor}")
        for rule_id, rule in enumerate(self.rules):
            for j, child in enumerate(rule.result):
                if not 0 <= child.tile_id < len(self.rules):
                    raise RuleSetError(
                        f"rule {rule_id} placement {j} references unknown tile id {child.tile_id}"
                    )

    # --- Convenience wrappers over the engine and emitter ---

    def expand_tile(self, placement: TilePlacement, output: list[TilePlacement]) -> None:
        from tiler.tiling.expansion import ExpansionEngine

        ExpansionEngine(self).expand_tile(placement, output)

    def expand_levels(
        self,
        placements: list[TilePlacement],
        levels: int,
        max_tiles: int | None = None,
    ) -> ExpansionResult:
        from tiler.tiling.expansion import ExpansionEngine

        return ExpansionEngine(self).expand(placements, levels, max_tiles=max_tiles)

    def expand_bound(
        self,
        placements: list[TilePlacement],
        levels: int,
        bounds: Bounds,
        max_tiles: int | None = None,
    ) -> ExpansionResult:
        from tiler.tiling.expansion import ExpansionEngine

        return ExpansionEngine(self).expand(placements, levels, bounds=bounds, max_tiles=max_tiles)

    def estimate_bounds(self, placement: TilePlacement) -> Bounds:
        from tiler.tiling.expansion import ExpansionEngine

        return ExpansionEngine(self).estimate_bounds(placement)

    def root_placement(
        self,
        initial_scale: float,
        levels: int = 0,
        scale_with_levels: bool = False,
    ) -> TilePlacement:
        """Seed placement: a pure uniform scale of the root tile type.

        With ``scale_with_levels`` the scale grows by ``expansion_factor`` per
        level so the final generation keeps the same apparent tile size.
        """
        scale = initial_scale
        if scale_with_levels:
            scale *= self.expansion_factor**levels
        return TilePlacement(ROOT_TILE_ID, Affine2D().scale(scale))

    def expand_from_root(
        self,
        levels: int,
        initial_scale: float,
        bounds: Bounds | None = None,
        scale_with_levels: bool = False,
    ) -> ExpansionResult:
        from tiler.tiling.expansion import ExpansionEngine

        return ExpansionEngine(self).expand_from_root(
            levels, initial_scale, bounds=bounds, scale_with_levels=scale_with_levels
        )

    def to_path(self, placements: list[TilePlacement]) -> Path:
        from tiler.tiling.emitter import placements_to_path

        return placements_to_path(self, placements)
