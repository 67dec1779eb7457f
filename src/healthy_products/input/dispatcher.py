from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..game.machine import GameController
from ..game.state import GameState
from .commands import Command
from .mapping import KeyMapper

logger = logging.getLogger(__name__)


class InputDispatcher:
    """Feeds abstract commands, one at a time, into the game controller.

    Commands that make no sense in the current mode are dropped by the state
    machine itself, so dispatching never fails.
    """

    def __init__(self, controller: GameController, mapper: Optional[KeyMapper] = None) -> None:
        self.controller = controller
        self.mapper = mapper or KeyMapper.default()

    def dispatch(self, command: Command) -> GameState:
        logger.debug("Dispatching %s", command.name)
        return self.controller.handle(command)

    def dispatch_key(self, key: str | int) -> GameState:
        """Translate a key name and dispatch it; unbound keys are ignored."""
        command = self.mapper.translate_key(key)
        if command is None:
            logger.debug("Unbound key %r ignored", key)
            return self.controller.state
        return self.dispatch(command)

    def dispatch_keys(self, keys: Iterable[str | int]) -> GameState:
        state = self.controller.state
        for key in keys:
            state = self.dispatch_key(key)
        return state
