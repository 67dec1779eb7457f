from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Set, Tuple

from ..config import DEFAULT_RULES, GameRules
from ..core.rng import RNG
from ..errors import ConfigurationError
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    """A collectible product occupying one grid cell."""

    x: int
    y: int
    is_healthy: bool
    points: int

    @property
    def pos(self) -> Cell:
        return (self.x, self.y)


class ItemPlacementGenerator:
    """Places a level's products on distinct interior cells.

    Positions are drawn uniformly from the interior by rejection sampling
    against the cells already taken. Sampling is capped per item; once the
    cap is hit the cell is chosen directly among the remaining free cells.
    """

    def __init__(self, rules: GameRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def eligible_cells(self, grid: Grid) -> int:
        start_inside = grid.is_interior(*grid.start)
        return grid.interior_size - (1 if start_inside else 0)

    def generate(self, rng: RNG, count: int, grid: Grid) -> FrozenSet[Item]:
        """Generate exactly ``count`` items for ``grid``.

        Per item the healthy flag is drawn first, then the cell, then the
        point value.

        Raises:
            ConfigurationError: if ``count`` cannot fit the eligible cells.
        """
        capacity = self.eligible_cells(grid)
        if count < 0 or count >= capacity:
            raise ConfigurationError(
                f"Cannot place {count} items on {capacity} eligible cells of {grid!r}"
            )

        taken: Set[Cell] = set()
        items = []
        for _ in range(count):
            is_healthy = rng.coin()
            cell = self._draw_free_cell(rng, grid, taken)
            taken.add(cell)
            items.append(Item(cell[0], cell[1], is_healthy, self._draw_points(rng, is_healthy)))

        logger.debug(
            "Placed %d items (%d healthy) on %r",
            len(items),
            sum(1 for i in items if i.is_healthy),
            grid,
        )
        return frozenset(items)

    def _draw_free_cell(self, rng: RNG, grid: Grid, taken: Set[Cell]) -> Cell:
        for _ in range(self.rules.max_attempts_per_item):
            cell = (rng.randint(1, grid.width - 2), rng.randint(1, grid.height - 2))
            if cell in taken or cell == grid.start:
                continue
            return cell
        # count < eligible cells, so at least one free cell is left
        free = sorted(set(grid.interior_cells()) - taken - {grid.start})
        logger.debug(
            "No free cell after %d attempts (%d of %d taken); choosing among the rest",
            self.rules.max_attempts_per_item,
            len(taken),
            grid.interior_size,
        )
        return rng.choice(free)

    def _draw_points(self, rng: RNG, is_healthy: bool) -> int:
        lo, hi = self.rules.healthy_points if is_healthy else self.rules.unhealthy_points
        return rng.randint(lo, hi)


def items_at(items: FrozenSet[Item], cell: Cell) -> Tuple[Item, ...]:
    """Return every item located at ``cell``."""
    return tuple(i for i in items if i.pos == cell)
