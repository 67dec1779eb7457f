from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..config import GameRules
from ..errors import ConfigurationError
from .tiles import Tile

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed-size level grid with a wall border and a single gate cell.

    Border cells (x=0, y=0, x=width-1, y=height-1) are walls except the gate
    at (0, height // 2). The player starts at the right edge, vertically
    centered. Instances are immutable and shared read-only.
    """

    width: int = 20
    height: int = 15

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ConfigurationError(
                f"Grid must be at least 3x3 to keep a wall border, got {self.width}x{self.height}"
            )

    @classmethod
    def from_rules(cls, rules: GameRules) -> "Grid":
        return cls(rules.grid_width, rules.grid_height)

    @property
    def gate(self) -> Cell:
        return (0, self.height // 2)

    @property
    def start(self) -> Cell:
        return (self.width - 1, self.height // 2)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_gate(self, x: int, y: int) -> bool:
        return (x, y) == self.gate

    def is_wall(self, x: int, y: int) -> bool:
        """True iff (x, y) lies on the outer border and is not the gate."""
        if not self.in_bounds(x, y):
            return False
        on_border = x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1
        return on_border and not self.is_gate(x, y)

    def is_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self.width}x{self.height}")
        if self.is_gate(x, y):
            return Tile.GATE
        if self.is_wall(x, y):
            return Tile.WALL
        return Tile.FLOOR

    def interior_cells(self) -> Iterator[Cell]:
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield (x, y)

    def wall_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_wall(x, y):
                    yield (x, y)

    @property
    def interior_size(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def to_lines(self) -> List[str]:
        """ASCII representation of the bare grid (for debugging/testing)."""
        return [
            ''.join(self.tile_at(x, y).glyph for x in range(self.width))
            for y in range(self.height)
        ]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
