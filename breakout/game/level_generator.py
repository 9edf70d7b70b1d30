"""Level generator for Breakout.

Builds the brick grid for a level: four point tiers of colored rows,
wall bricks in the top row's outer columns, and one counter brick plus one
bonus brick per row.

Column placement of the special bricks comes from a private random source
seeded with a fixed constant, so every level and every run gets the same
layout. Bonus types are drawn from the general-purpose source and vary.
"""

import random
from typing import List, Optional, Sequence, Tuple

from models.breakout import BreakoutConfig, BonusType, BrickColor, BRICK_TIERS

from .entities.block import Block, INDESTRUCTIBLE
from .physics.geometry import Box
from ..config import get_color
from ..logging import get_logger

log = get_logger('level_generator')

NUM_BONUS_TYPES = len(BonusType)


class LevelGenerator:
    """Deterministic brick layout for a given arena width."""

    def __init__(self, config: BreakoutConfig, rng: Optional[random.Random] = None):
        """Initialize generator.

        Args:
            config: Grid dimensions, brick sizes and layout seed
            rng: General-purpose random source for bonus types
        """
        self._config = config
        self._rng = rng if rng is not None else random.Random()

    def special_columns(self) -> Tuple[List[int], List[int]]:
        """Pick the bonus column and counter column of every row.

        Both are drawn from the inner columns [1, bricks_per_row - 2] and are
        distinct within a row. The draw uses a fresh generator seeded with
        config.layout_seed, so it never disturbs the general random source.

        Returns:
            Tuple of (bonus columns, counter columns), one entry per row
        """
        layout_rng = random.Random(self._config.layout_seed)
        inner = self._config.bricks_per_row - 2
        bonus_columns: List[int] = []
        counter_columns: List[int] = []

        for _ in range(self._config.brick_rows):
            bonus = 1 + layout_rng.randrange(inner)
            counter = bonus
            while counter == bonus:
                counter = 1 + layout_rng.randrange(inner)
            bonus_columns.append(bonus)
            counter_columns.append(counter)

        return bonus_columns, counter_columns

    def brick_width(self, bound_x: float) -> float:
        """Width that makes a row of bricks and gaps span [-bound_x, bound_x]."""
        cols = self._config.bricks_per_row
        total_gap = (cols - 1) * self._config.brick_gap
        return (2.0 * bound_x - total_gap) / cols

    def _box_for(self, row: int, col: int, width: float, bound_x: float) -> Box:
        config = self._config
        x = -bound_x + col * (width + config.brick_gap)
        y = config.brick_start_y - row * (config.brick_height + config.brick_gap)
        return Box(x, y, width, config.brick_height)

    def tier_for_row(self, row: int) -> Tuple[BrickColor, int]:
        """Color channel and points of a row; always one of four tiers."""
        rows_per_tier = max(1, self._config.brick_rows // len(BRICK_TIERS))
        tier = min(row // rows_per_tier, len(BRICK_TIERS) - 1)
        return BRICK_TIERS[tier]

    def _wall_kind(self, row: int, col: int) -> Optional[bool]:
        """None for a normal cell, else whether the wall is reflective."""
        if row != 0:
            return None
        last = self._config.bricks_per_row - 1
        if col in (0, last):
            return False
        if col in (1, last - 1):
            return True
        return None

    def generate(self, bound_x: float) -> List[Block]:
        """Build a fresh grid of active bricks in row-major order.

        Args:
            bound_x: Arena half-width

        Returns:
            List of BRICK_ROWS * BRICKS_PER_ROW blocks
        """
        width = self.brick_width(bound_x)
        bonus_columns, counter_columns = self.special_columns()
        blocks: List[Block] = []

        for row in range(self._config.brick_rows):
            tier_color, points = self.tier_for_row(row)

            for col in range(self._config.bricks_per_row):
                box = self._box_for(row, col, width, bound_x)
                wall_kind = self._wall_kind(row, col)

                if wall_kind is not None:
                    color_type = BrickColor.WHITE if wall_kind else BrickColor.GRAY
                    block = Block(
                        box, get_color(color_type), color_type, (row, col),
                        points=points,
                        hit_counter=INDESTRUCTIBLE,
                        is_wall=True,
                        is_reflective=wall_kind,
                    )
                elif col == counter_columns[row]:
                    block = Block(
                        box, get_color(tier_color, darker=True), tier_color, (row, col),
                        points=points,
                        hit_counter=2,
                    )
                elif col == bonus_columns[row]:
                    block = Block(
                        box, get_color(tier_color), tier_color, (row, col),
                        points=points,
                        is_bonus=True,
                        bonus_type=BonusType(self._rng.randrange(NUM_BONUS_TYPES)),
                    )
                else:
                    block = Block(
                        box, get_color(tier_color), tier_color, (row, col),
                        points=points,
                    )
                blocks.append(block)

        log.debug("Generated %d bricks (width %.4f, bound_x %.4f)", len(blocks), width, bound_x)
        return blocks

    def relayout(self, blocks: Sequence[Block], bound_x: float) -> List[Block]:
        """Recompute brick geometry for a new arena width.

        Only position and size change; active flags, counters, points and
        bonus assignments are preserved.
        """
        width = self.brick_width(bound_x)
        return [
            block.with_box(self._box_for(*block.grid_position, width, bound_x))
            for block in blocks
        ]
