from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .grid import Cell


class Direction(Enum):
    """Cardinal movement directions in screen space (y grows downwards)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Player:
    """The player's position on the grid.

    Movement is split in two: ``move`` computes a candidate cell without
    validating it, and the state machine decides whether to commit it via
    ``moved_to``.
    """

    x: int
    y: int

    @property
    def pos(self) -> Cell:
        return (self.x, self.y)

    def move(self, direction: Direction) -> Cell:
        dx, dy = direction.offset
        return (self.x + dx, self.y + dy)

    def moved_to(self, cell: Cell) -> "Player":
        return replace(self, x=cell[0], y=cell[1])
