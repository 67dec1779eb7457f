"""
Headless game core: grid, products, player and the level state machine.

Rendering and input devices live outside this package; they consume
snapshots from ``render.views`` and feed ``input.commands`` in.
"""
from .events import GameEvent
from .grid import Grid
from .items import Item, ItemPlacementGenerator
from .player import Direction, Player
from .state import GameState, LevelState, Mode
from .tiles import Tile

__all__ = [
    "GameEvent",
    "Grid",
    "Item",
    "ItemPlacementGenerator",
    "Direction",
    "Player",
    "GameState",
    "LevelState",
    "Mode",
    "Tile",
]
