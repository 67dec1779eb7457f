from __future__ import annotations

import logging
import os
from typing import Optional, Sequence, Tuple

from .errors import AssetLoadError, HealthyProductsError
from .game.machine import GameController
from .input.dispatcher import InputDispatcher
from .input.mapping import KeyMapper
from .render.text import render_lines
from .render.views import project
from .settings import Settings

logger = logging.getLogger(__name__)


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def build_game(settings: Settings, seed: Optional[int] = None) -> Tuple[GameController, InputDispatcher]:
    """Create the controller and dispatcher described by ``settings``.

    Raises ConfigurationError for invalid rules or key bindings, before any
    level is generated.
    """
    seed = seed if seed is not None else settings.seed
    controller = GameController(settings.rules, seed=seed)
    mapper = KeyMapper.default(settings.input.mapping)
    return controller, InputDispatcher(controller, mapper)


def status_line(controller: GameController) -> str:
    state = controller.state
    level = controller.level if controller.level is not None else "-"
    score = controller.score if controller.score is not None else "-"
    return f"Level: {level} | Score: {score} | Items left: {len(state.items)} | Mode: {state.mode.value}"


def run_gui(settings: Settings, seed: Optional[int] = None) -> int:
    """Run the game in an Arcade window, falling back to headless without Arcade.

    Returns:
        Process exit code (0 on success, 1 on asset or runtime failure).
    """
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(settings, seed=seed)

    import arcade

    from .render.window import GameWindow, load_textures

    controller, dispatcher = build_game(settings, seed)
    try:
        textures = load_textures(settings.video.assets_dir)
    except AssetLoadError:
        logger.exception("Failed to load textures; exiting")
        return 1

    window = GameWindow(controller, dispatcher, settings.video, textures)
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
    finally:
        try:
            window.close()
        except Exception:
            logger.debug("Window already closed")


def run_headless(settings: Settings, keys: Sequence[str] = (), seed: Optional[int] = None) -> int:
    """Play a scripted key sequence and print the resulting frame as text.

    Returns:
        Process exit code (0 on success, 1 if the game fails mid-script).
    """
    print("Healthy Products Game (headless)")

    controller, dispatcher = build_game(settings, seed)
    try:
        dispatcher.dispatch_keys(keys)
    except HealthyProductsError:
        logger.exception("Game error while replaying keys %s", list(keys))
        return 1

    view = project(controller.state, controller.grid, selectable_levels=settings.rules.selectable_levels)
    for line in render_lines(view):
        print(line)
    print()
    print(status_line(controller))
    return 0


def run_auto(settings: Settings, keys: Sequence[str] = (), seed: Optional[int] = None) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors environment overrides:
      - HP_HEADLESS=1 forces headless.
      - HP_GUI=1 forces GUI (if arcade importable).
    """
    if os.getenv("HP_HEADLESS") == "1":
        return run_headless(settings, keys=keys, seed=seed)

    if os.getenv("HP_GUI") == "1":
        return run_gui(settings, seed=seed)

    # A key script only makes sense without a window
    if keys:
        return run_headless(settings, keys=keys, seed=seed)
    return run_gui(settings, seed=seed)
