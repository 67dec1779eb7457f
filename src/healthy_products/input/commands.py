from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..errors import ConfigurationError
from ..game.player import Direction


class Action(Enum):
    """Abstract commands understood by the game state machine.

    Physical devices never reach the core; a KeyMapper (or any other input
    layer) translates raw events into these actions.
    """

    SELECT_LEVEL = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    PAUSE = auto()
    RESUME = auto()
    MAIN_MENU = auto()


_DIRECTIONS = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

_SELECT_LEVEL_NAME = re.compile(r"^select_level_(\d+)$")


@dataclass(frozen=True)
class Command:
    """A single abstract input command.

    Attributes:
        action: What is requested.
        level: Target level; only meaningful for SELECT_LEVEL.
    """

    action: Action
    level: Optional[int] = None

    @classmethod
    def select_level(cls, level: int) -> "Command":
        return cls(Action.SELECT_LEVEL, level)

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self.action)

    @property
    def name(self) -> str:
        if self.action is Action.SELECT_LEVEL:
            return f"select_level_{self.level}"
        return self.action.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Command":
        """Parse a settings action name such as ``move_up`` or ``select_level_2``."""
        key = name.strip().lower()
        m = _SELECT_LEVEL_NAME.match(key)
        if m:
            return cls.select_level(int(m.group(1)))
        try:
            action = Action[key.upper()]
        except KeyError as e:
            raise ConfigurationError(f"Unknown input action: {name!r}") from e
        if action is Action.SELECT_LEVEL:
            raise ConfigurationError("select_level needs a level number, e.g. select_level_1")
        return cls(action)


MOVE_UP = Command(Action.MOVE_UP)
MOVE_DOWN = Command(Action.MOVE_DOWN)
MOVE_LEFT = Command(Action.MOVE_LEFT)
MOVE_RIGHT = Command(Action.MOVE_RIGHT)
PAUSE = Command(Action.PAUSE)
RESUME = Command(Action.RESUME)
MAIN_MENU = Command(Action.MAIN_MENU)


__all__ = [
    "Action",
    "Command",
    "MOVE_UP",
    "MOVE_DOWN",
    "MOVE_LEFT",
    "MOVE_RIGHT",
    "PAUSE",
    "RESUME",
    "MAIN_MENU",
]
