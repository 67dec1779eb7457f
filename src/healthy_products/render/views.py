from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

from ..game.grid import Cell, Grid
from ..game.items import Item
from ..game.state import GameState, LevelState, Mode

logger = logging.getLogger(__name__)

TITLE = "Healthy Products Game"


class SpriteId(Enum):
    """Semantic identity of everything a renderer has to draw."""

    WALL = "wall"
    FLOOR = "grass"
    GATE = "gate"
    HEALTHY_ITEM = "healthy_product"
    UNHEALTHY_ITEM = "unhealthy_product"
    PLAYER_0 = "player_1"
    PLAYER_1 = "player_2"

    @property
    def filename(self) -> str:
        return f"{self.value}.png"

    @property
    def color(self) -> Tuple[int, int, int]:
        """Placeholder RGB color when no texture is available."""
        return {
            SpriteId.WALL: (90, 70, 60),
            SpriteId.FLOOR: (70, 140, 60),
            SpriteId.GATE: (200, 160, 40),
            SpriteId.HEALTHY_ITEM: (60, 200, 90),
            SpriteId.UNHEALTHY_ITEM: (210, 60, 60),
            SpriteId.PLAYER_0: (240, 240, 255),
            SpriteId.PLAYER_1: (200, 200, 235),
        }[self]


@dataclass(frozen=True)
class MenuView:
    title: str
    levels: Tuple[int, ...]


@dataclass(frozen=True)
class PlayView:
    """Everything needed to draw a level; coordinates are grid cells."""

    width: int
    height: int
    walls: Tuple[Cell, ...]
    gate: Cell
    gate_open: bool
    items: Tuple[Item, ...]
    player: Cell
    frame: int
    score: int
    level: int

    @property
    def player_sprite(self) -> SpriteId:
        return SpriteId.PLAYER_1 if self.frame else SpriteId.PLAYER_0

    def sprites(self) -> Iterator[Tuple[Cell, SpriteId]]:
        """Yield (cell, sprite) pairs in draw order: tiles, gate, items, player."""
        walls = set(self.walls)
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), (SpriteId.WALL if (x, y) in walls else SpriteId.FLOOR)
        yield self.gate, SpriteId.GATE
        for item in self.items:
            yield item.pos, (SpriteId.HEALTHY_ITEM if item.is_healthy else SpriteId.UNHEALTHY_ITEM)
        yield self.player, self.player_sprite


@dataclass(frozen=True)
class PauseOverlayView:
    previous: PlayView


RenderState = Union[MenuView, PauseOverlayView, PlayView]


def _play_view(level: LevelState, grid: Grid, frame: int) -> PlayView:
    return PlayView(
        width=grid.width,
        height=grid.height,
        walls=tuple(grid.wall_cells()),
        gate=grid.gate,
        gate_open=level.gate_open,
        items=tuple(sorted(level.items, key=lambda i: (i.y, i.x))),
        player=level.player.pos,
        frame=frame,
        score=level.score,
        level=level.number,
    )


def project(state: GameState, grid: Grid, frame: int = 0, selectable_levels: int = 3) -> RenderState:
    """Map a game state to a drawable description.

    ``frame`` is the player animation frame chosen by the rendering layer;
    it is reduced to 0/1 and never stored in game state.
    """
    if state.mode is Mode.MAIN_MENU or state.level is None:
        return MenuView(title=TITLE, levels=tuple(range(1, selectable_levels + 1)))
    view = _play_view(state.level, grid, frame % 2)
    if state.mode is Mode.PAUSED:
        return PauseOverlayView(previous=view)
    return view
