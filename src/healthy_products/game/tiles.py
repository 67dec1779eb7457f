from enum import Enum, auto


class Tile(Enum):
    """Tile types of the level grid.

    - WALL: border cell, never walkable
    - FLOOR: interior cell
    - GATE: the single border cell leading to the next level; walkable only
      once every product has been collected
    """

    WALL = auto()
    FLOOR = auto()
    GATE = auto()

    @property
    def glyph(self) -> str:
        """A single-character visualization used for logs/debug."""
        return {Tile.WALL: '#', Tile.FLOOR: '.', Tile.GATE: 'G'}[self]
