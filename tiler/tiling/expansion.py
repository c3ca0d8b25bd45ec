"""Expansion engine. Generational substitution with bound culling and a placement cap."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from tiler.tiling.model import TilePlacement, TilingStep
from tiler.utils.geometry import (
    Bounds,
    bounds_overlap,
    bounds_size,
    compose,
    inflate,
    translation_of,
    union_point,
)

logger = logging.getLogger(__name__)

DEFAULT_POLYGON_LIMIT = 1_000_000


@dataclass
class ExpansionConfig:
    """Safety limits and culling heuristics for the engine."""

    # Cap on placements per generation; generations past it are truncated
    polygon_limit: int = DEFAULT_POLYGON_LIMIT

    # Estimated bounds are inflated by bound_margin * max(width, height) per side.
    # 1.0 doubles the extent; the heuristic is not a proven bound for every rule set.
    bound_margin: float = 1.0


@dataclass
class ExpansionResult:
    """Final generation plus what was given up to produce it."""

    placements: list[TilePlacement] = field(default_factory=list)
    levels: int = 0
    truncated: bool = False
    pruned: int = 0

    def __len__(self) -> int:
        return len(self.placements)


class ExpansionEngine:
    """Runs substitution generations over a ``TilingStep``."""

    def __init__(self, step: TilingStep, config: ExpansionConfig | None = None) -> None:
        self.step = step
        self.config = config or ExpansionConfig()

    def expand_tile(self, placement: TilePlacement, output: list[TilePlacement]) -> None:
        """Append the children of one placement, composed into its frame."""
        rule = self.step.rule_for(placement.tile_id)
        for child in rule.result:
            output.append(
                TilePlacement(child.tile_id, compose(placement.transform, child.transform))
            )

    def estimate_bounds(self, placement: TilePlacement) -> Bounds:
        """Padded world rectangle that descendants of ``placement`` are assumed to stay in."""
        tile = self.step.rule_for(placement.tile_id).tile
        ox, oy = translation_of(placement.transform)
        result: Bounds = (ox, oy, ox, oy)
        for x, y in tile.transformed_corners(placement.transform):
            result = union_point(result, (float(x), float(y)))
        w, h = bounds_size(result)
        pad = max(w, h) * self.config.bound_margin
        return inflate(result, pad, pad)

    def expand(
        self,
        placements: list[TilePlacement],
        levels: int,
        bounds: Bounds | None = None,
        max_tiles: int | None = None,
    ) -> ExpansionResult:
        """Run ``levels`` generations and return the final one only.

        With ``bounds``, a placement whose estimated rectangle misses the bound
        is dropped before expansion. With ``max_tiles``, a generation stops
        growing once it holds more than that many placements.
        """
        if levels < 0:
            raise ValueError(f"levels must be non-negative, got {levels}")

        start = time.perf_counter()
        current = [p.copy() for p in placements]
        result = ExpansionResult(levels=levels)

        for level in range(levels):
            nxt: list[TilePlacement] = []
            for placement in current:
                if bounds is not None and not bounds_overlap(self.estimate_bounds(placement), bounds):
                    result.pruned += 1
                    continue
                self.expand_tile(placement, nxt)
                if max_tiles is not None and len(nxt) > max_tiles:
                    result.truncated = True
                    logger.warning(
                        "Level %d truncated at %d placements (limit %d)", level + 1, len(nxt), max_tiles
                    )
                    break
            current = nxt
            logger.debug("  level %d: %d placements", level + 1, len(current))

        result.placements = current
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Expansion complete: %d placements after %d levels in %.1fms (%d pruned)",
            len(current),
            levels,
            elapsed,
            result.pruned,
        )
        return result

    def expand_from_root(
        self,
        levels: int,
        initial_scale: float,
        bounds: Bounds | None = None,
        scale_with_levels: bool = False,
    ) -> ExpansionResult:
        """Expand the conventional single root placement under the configured cap."""
        root = self.step.root_placement(initial_scale, levels, scale_with_levels)
        return self.expand([root], levels, bounds=bounds, max_tiles=self.config.polygon_limit)


def create_engine(step: TilingStep, config: ExpansionConfig | None = None) -> ExpansionEngine:
    """Factory function for creating an engine instance."""
    return ExpansionEngine(step, config=config)
