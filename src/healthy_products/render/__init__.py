"""
Render-state projection and the renderers that draw it.

``views.project`` is pure; ``text`` and ``window`` are the external drawing
layers (ASCII for headless runs, Arcade for the desktop window).
"""
from .animation import FrameClock
from .views import MenuView, PauseOverlayView, PlayView, RenderState, SpriteId, project

__all__ = [
    "FrameClock",
    "MenuView",
    "PauseOverlayView",
    "PlayView",
    "RenderState",
    "SpriteId",
    "project",
]
