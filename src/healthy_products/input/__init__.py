from .commands import Action, Command
from .mapping import KeyMapper

__all__ = ["Action", "Command", "KeyMapper"]
