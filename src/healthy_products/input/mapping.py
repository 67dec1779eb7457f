from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .commands import Command

logger = logging.getLogger(__name__)


DEFAULT_BINDINGS: Dict[str, List[str]] = {
    "select_level_1": ["1"],
    "select_level_2": ["2"],
    "select_level_3": ["3"],
    "move_up": ["W", "UP"],
    "move_down": ["S", "DOWN"],
    "move_left": ["A", "LEFT"],
    "move_right": ["D", "RIGHT"],
    "pause": ["P"],
    "resume": ["R"],
    "main_menu": ["M"],
}


class KeyMapper:
    """Rebindable mapping from physical key names to abstract commands.

    The mapper is agnostic to the input backend. Keys are strings normalized
    to uppercase, so a window layer only has to turn its key constants into
    names (``"W"``, ``"LEFT"``, ``"1"``) before calling ``translate_key``.

    Example usage:
        mapper = KeyMapper.default()
        mapper.translate_key("a")   # -> Command(Action.MOVE_LEFT)
    """

    def __init__(self, bindings: Optional[Dict[str, Command]] = None) -> None:
        self._bindings: Dict[str, Command] = {}
        if bindings:
            for key, command in bindings.items():
                self.bind(key, command)

        # Backend specific names (e.g. "KEY_1", "NUM_1") -> canonical key names
        self._aliases: Dict[str, str] = {}

    @staticmethod
    def _normalize(key: str | int) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str | int, command: Command) -> None:
        """Bind a single key to a command."""
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = command

    def bind_many(self, keys: Iterable[str | int], command: Command) -> None:
        for k in keys:
            self.bind(k, command)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int) -> Optional[Command]:
        """Translate a physical key into a command, or None if unbound."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "KeyMapper":
        """Build a mapper from action names to key names.

        Raises ConfigurationError for unknown action names.
        """
        mapper = cls()
        for action_name, keys in mapping.items():
            mapper.bind_many(keys, Command.from_name(action_name))
        logger.debug("Key bindings: %s", mapper._bindings)
        return mapper

    @classmethod
    def default(cls, overrides: Optional[Mapping[str, Iterable[str]]] = None) -> "KeyMapper":
        """Default bindings (1/2/3, WASD, arrows, P/R/M) with optional overrides.

        An override replaces every default key of the same action.
        """
        merged: Dict[str, Iterable[str]] = dict(DEFAULT_BINDINGS)
        merged.update(overrides or {})
        mapper = cls.from_mapping(merged)
        for digit in "123":
            mapper.set_alias(f"KEY_{digit}", digit)
            mapper.set_alias(f"NUM_{digit}", digit)
        return mapper


__all__ = ["KeyMapper", "DEFAULT_BINDINGS"]
