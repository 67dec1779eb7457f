from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Optional

from .items import Item
from .player import Player


class Mode(Enum):
    MAIN_MENU = "main_menu"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class LevelState:
    """One level in progress: number, score, remaining items and the player."""

    number: int
    score: int
    items: FrozenSet[Item]
    player: Player

    @property
    def gate_open(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of the whole game.

    ``level`` is None in the main menu and set while playing or paused.
    """

    mode: Mode = Mode.MAIN_MENU
    level: Optional[LevelState] = None

    @classmethod
    def main_menu(cls) -> "GameState":
        return cls()

    @classmethod
    def playing(cls, level: LevelState) -> "GameState":
        return cls(Mode.PLAYING, level)

    def with_mode(self, mode: Mode) -> "GameState":
        return replace(self, mode=mode)

    def with_level(self, level: LevelState) -> "GameState":
        return replace(self, level=level)

    @property
    def level_number(self) -> Optional[int]:
        return self.level.number if self.level else None

    @property
    def score(self) -> Optional[int]:
        return self.level.score if self.level else None

    @property
    def items(self) -> FrozenSet[Item]:
        return self.level.items if self.level else frozenset()
