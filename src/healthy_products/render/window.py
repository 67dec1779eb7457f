from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import arcade

from ..errors import AssetLoadError
from ..game.machine import GameController
from ..input.dispatcher import InputDispatcher
from ..settings import VideoSettings
from .animation import FrameClock
from .views import TITLE, MenuView, PauseOverlayView, PlayView, SpriteId, project

logger = logging.getLogger(__name__)

HUD_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 150)


def load_textures(assets_dir: Optional[str]) -> Dict[SpriteId, "arcade.Texture"]:
    """Load one texture per SpriteId from ``assets_dir``.

    Without a directory the window draws flat colors instead. A configured
    directory missing any texture is a fatal startup error.
    """
    if not assets_dir:
        logger.info("No assets directory configured; drawing placeholder colors")
        return {}
    root = Path(assets_dir)
    textures: Dict[SpriteId, arcade.Texture] = {}
    for sprite in SpriteId:
        path = root / sprite.filename
        if not path.is_file():
            raise AssetLoadError(f"Missing texture for {sprite.name}: {path}")
        try:
            textures[sprite] = arcade.load_texture(str(path))
        except Exception as e:
            raise AssetLoadError(f"Cannot load texture {path}: {e}") from e
    logger.info("Loaded %d textures from %s", len(textures), root)
    return textures


def _key_names() -> Dict[int, str]:
    names: Dict[int, str] = {}
    for name in dir(arcade.key):
        if not name.isupper() or name.startswith("MOD_"):
            continue
        code = getattr(arcade.key, name)
        if isinstance(code, int):
            names.setdefault(code, name)
    return names


class GameWindow(arcade.Window):
    """Arcade window drawing the projected render state.

    The window owns the frame clock and translates key symbols to names for
    the dispatcher; it never mutates game state directly.
    """

    def __init__(
        self,
        controller: GameController,
        dispatcher: InputDispatcher,
        video: VideoSettings,
        textures: Optional[Dict[SpriteId, "arcade.Texture"]] = None,
    ) -> None:
        self.controller = controller
        self.dispatcher = dispatcher
        self.video = video
        self.textures = textures or {}
        self.clock = FrameClock(video.frame_interval)
        self._key_names = _key_names()

        grid = controller.grid
        super().__init__(
            grid.width * video.tile_size,
            grid.height * video.tile_size,
            TITLE,
            fullscreen=video.fullscreen,
            vsync=video.vsync,
        )
        self.background_color = arcade.color.BLACK
        logger.info("GameWindow initialized: %dx%d", self.width, self.height)

    # Arcade lifecycle
    def on_draw(self):  # noqa: N802 (arcade API)
        self.clear()
        view = project(
            self.controller.state,
            self.controller.grid,
            self.clock.frame,
            self.controller.rules.selectable_levels,
        )
        if isinstance(view, MenuView):
            self._draw_menu(view)
        elif isinstance(view, PauseOverlayView):
            self._draw_play(view.previous)
            self._draw_pause()
        else:
            self._draw_play(view)

    def on_update(self, delta_time: float):  # noqa: N802 (arcade API)
        self.clock.tick(delta_time)

    def on_key_press(self, symbol: int, modifiers: int):  # noqa: N802 (arcade API)
        name = self._key_names.get(symbol)
        if name is None:
            return
        self.dispatcher.dispatch_key(name)

    # Drawing helpers
    def _cell_rect(self, x: int, y: int, size: int):
        tile = self.video.tile_size
        left = x * tile + (tile - size) / 2
        # grid rows grow downwards, arcade's y axis grows upwards
        bottom = (self.controller.grid.height - 1 - y) * tile + (tile - size) / 2
        return left, bottom

    def _draw_sprite(self, x: int, y: int, sprite: SpriteId, size: int) -> None:
        left, bottom = self._cell_rect(x, y, size)
        texture = self.textures.get(sprite)
        if texture is not None:
            arcade.draw_texture_rect(texture, arcade.LBWH(left, bottom, size, size))
        else:
            arcade.draw_lrbt_rectangle_filled(left, left + size, bottom, bottom + size, sprite.color)

    def _draw_play(self, view: PlayView) -> None:
        player_sprite = view.player_sprite
        for (x, y), sprite in view.sprites():
            size = self.video.player_size if sprite is player_sprite else self.video.tile_size
            self._draw_sprite(x, y, sprite, size)
        arcade.draw_text(f"Score: {view.score}", 10, self.height - 20, HUD_COLOR, 16, bold=True)
        arcade.draw_text(f"Level: {view.level}", 10, self.height - 40, HUD_COLOR, 16, bold=True)

    def _draw_pause(self) -> None:
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, OVERLAY_COLOR)
        arcade.draw_text("Game Paused", 150, self.height - 150, HUD_COLOR, 36, bold=True)
        arcade.draw_text("Press R to Resume", 150, self.height - 200, HUD_COLOR, 24)
        arcade.draw_text("Press M for Main Menu", 150, self.height - 250, HUD_COLOR, 24)

    def _draw_menu(self, view: MenuView) -> None:
        arcade.draw_text(view.title, 100, self.height - 100, HUD_COLOR, 36, bold=True)
        for i, level in enumerate(view.levels):
            arcade.draw_text(f"Press {level} for Level {level}", 150, self.height - 200 - 50 * i, HUD_COLOR, 24)
