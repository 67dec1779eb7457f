"""
Healthy Products game package root.

The game core (``game``) is headless and deterministic under a fixed seed;
Arcade is only imported by ``render.window`` when a window is opened.
"""

__version__ = "0.1.0"

__all__ = [
    "game",
    "input",
    "render",
]
