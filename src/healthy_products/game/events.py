from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by the state machine to notify UI or systems."""

    LEVEL_STARTED = auto()
    PLAYER_MOVED = auto()
    MOVE_BLOCKED = auto()
    ITEM_COLLECTED = auto()
    GATE_OPENED = auto()
    LEVEL_COMPLETED = auto()
    PAUSED = auto()
    RESUMED = auto()
    RETURNED_TO_MENU = auto()
