from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional, Tuple

from ..config import DEFAULT_RULES, GameRules
from ..core.rng import RNG
from ..input.commands import Action, Command
from .events import GameEvent
from .grid import Cell, Grid
from .items import ItemPlacementGenerator, items_at
from .player import Direction, Player
from .state import GameState, LevelState, Mode

logger = logging.getLogger(__name__)

# Called with each event and the state that event describes
Listener = Callable[[GameEvent, GameState], None]


class LevelFactory:
    """Builds fresh levels: player at the start cell, score 0, new products.

    Owns the only reference to the RNG used for item placement.
    """

    def __init__(self, rules: GameRules, grid: Grid, rng: RNG) -> None:
        self.rules = rules
        self.grid = grid
        self.rng = rng
        self.generator = ItemPlacementGenerator(rules)

    @property
    def selectable_levels(self) -> int:
        return self.rules.selectable_levels

    def new_level(self, number: int) -> LevelState:
        items = self.generator.generate(self.rng, self.rules.items_per_level, self.grid)
        sx, sy = self.grid.start
        logger.info("Starting level %d with %d items", number, len(items))
        return LevelState(number=number, score=0, items=items, player=Player(sx, sy))


@dataclass(frozen=True)
class Transition:
    """Result of applying one command: the next state and what happened.

    When the command finishes a level, ``finished`` holds the state of that
    level on the gate cell. Events up to LEVEL_COMPLETED describe it and the
    events after it describe ``state``.
    """

    state: GameState
    events: Tuple[GameEvent, ...] = ()
    finished: Optional[GameState] = None

    def announcements(self) -> Iterator[Tuple[GameEvent, GameState]]:
        """Pair each event with the state it describes."""
        current = self.finished if self.finished is not None else self.state
        for event in self.events:
            yield event, current
            if event is GameEvent.LEVEL_COMPLETED:
                current = self.state


def can_enter(grid: Grid, cell: Cell, gate_open: bool) -> bool:
    """Whether the player may step onto ``cell``."""
    x, y = cell
    if not grid.in_bounds(x, y) or grid.is_wall(x, y):
        return False
    if grid.is_gate(x, y):
        return gate_open
    return True


def step(state: GameState, command: Command, levels: LevelFactory) -> Transition:
    """Apply ``command`` to ``state``.

    Commands that are not valid in the current mode leave the state
    unchanged and produce no events; a blocked move keeps the state and
    reports MOVE_BLOCKED.
    """
    action = command.action

    if state.mode is Mode.MAIN_MENU:
        if action is Action.SELECT_LEVEL and command.level is not None \
                and 1 <= command.level <= levels.selectable_levels:
            return Transition(GameState.playing(levels.new_level(command.level)), (GameEvent.LEVEL_STARTED,))
        return _ignored(state, command)

    if state.mode is Mode.PAUSED:
        if action is Action.RESUME:
            return Transition(state.with_mode(Mode.PLAYING), (GameEvent.RESUMED,))
        if action is Action.MAIN_MENU:
            return Transition(GameState.main_menu(), (GameEvent.RETURNED_TO_MENU,))
        return _ignored(state, command)

    # Mode.PLAYING
    if action is Action.PAUSE:
        return Transition(state.with_mode(Mode.PAUSED), (GameEvent.PAUSED,))
    direction = command.direction
    if direction is not None:
        return _move(state, direction, levels)
    return _ignored(state, command)


def _ignored(state: GameState, command: Command) -> Transition:
    logger.debug("Ignoring %s in mode %s", command.name, state.mode.value)
    return Transition(state)


def _move(state: GameState, direction: Direction, levels: LevelFactory) -> Transition:
    level = state.level
    assert level is not None, "playing state without a level"
    grid = levels.grid

    candidate = level.player.move(direction)
    if not can_enter(grid, candidate, level.gate_open):
        logger.debug("Blocked move %s from %s to %s", direction.name, level.player.pos, candidate)
        return Transition(state, (GameEvent.MOVE_BLOCKED,))

    events: List[GameEvent] = [GameEvent.PLAYER_MOVED]
    player = level.player.moved_to(candidate)

    collected = items_at(level.items, candidate)
    score = level.score
    items = level.items
    if collected:
        score += sum(i.points for i in collected)
        items = items - frozenset(collected)
        events.extend(GameEvent.ITEM_COLLECTED for _ in collected)
        logger.debug("Collected %s at %s; score=%d", [i.points for i in collected], candidate, score)
        if not items:
            logger.info("All products collected on level %d; the gate is open", level.number)
            events.append(GameEvent.GATE_OPENED)

    level = replace(level, player=player, score=score, items=items)

    if level.gate_open and grid.is_gate(*player.pos):
        logger.info("Level %d completed with score %d", level.number, level.score)
        events.append(GameEvent.LEVEL_COMPLETED)
        events.append(GameEvent.LEVEL_STARTED)
        return Transition(
            GameState.playing(levels.new_level(level.number + 1)),
            tuple(events),
            finished=state.with_level(level),
        )

    return Transition(state.with_level(level), tuple(events))


class GameController:
    """Owns the current GameState and applies commands to it.

    The controller is the single writer of game state; renderers and HUDs
    read ``state`` (an immutable snapshot) and the convenience properties.
    """

    def __init__(
        self,
        rules: GameRules = DEFAULT_RULES,
        rng: Optional[RNG] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.rules = rules
        self.grid = Grid.from_rules(rules)
        self.levels = LevelFactory(rules, self.grid, rng or RNG(seed))
        self._state = GameState.main_menu()
        self._listeners: List[Listener] = []
        logger.info("GameController initialized on %r (items/level=%d)", self.grid, rules.items_per_level)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events.

        A listener that raises is logged and skipped; the state change and
        the remaining listeners are unaffected.
        """
        self._listeners.append(listener)

    def _emit(self, event: GameEvent, state: GameState) -> None:
        for l in list(self._listeners):
            try:
                l(event, state)
            except Exception as ex:
                logger.exception("Listener errored on %s: %s", event, ex)

    def handle(self, command: Command) -> GameState:
        """Process one command to completion and return the new state."""
        transition = step(self._state, command, self.levels)
        self._state = transition.state
        for event, state in transition.announcements():
            self._emit(event, state)
        return self._state

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def score(self) -> Optional[int]:
        return self._state.score

    @property
    def level(self) -> Optional[int]:
        return self._state.level_number
