from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from platformdirs import user_config_dir

from .config import GameRules
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_NAME = "healthy-products"
USER_SETTINGS_FILE = "settings.yaml"


@dataclass
class VideoSettings:
    tile_size: int = 32
    player_size: int = 28
    fullscreen: bool = False
    vsync: bool = True
    frame_interval: float = 0.25  # seconds per player animation frame
    assets_dir: Optional[str] = None


@dataclass
class InputSettings:
    # action name -> key names; empty means KeyMapper defaults
    mapping: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Settings:
    rules: GameRules = field(default_factory=GameRules)
    video: VideoSettings = field(default_factory=VideoSettings)
    input: InputSettings = field(default_factory=InputSettings)
    seed: Optional[int] = None

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        try:
            video = VideoSettings(**(data.get("video") or {}))
        except TypeError as e:
            raise ConfigurationError(f"Invalid video settings: {e}") from e
        if video.frame_interval <= 0:
            raise ConfigurationError("video.frame_interval must be positive")

        raw_mapping = (data.get("input") or {}).get("mapping") or {}
        mapping = {str(action): [str(k) for k in keys] for action, keys in raw_mapping.items()}

        seed = data.get("seed")
        if seed is not None:
            try:
                seed = int(seed)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid seed {seed!r}: expected an integer") from e
        return Settings(
            rules=GameRules.from_dict(data.get("rules")),
            video=video,
            input=InputSettings(mapping=mapping),
            seed=seed,
        )

    @staticmethod
    def default_user_path() -> Path:
        return Path(user_config_dir(appname=APP_NAME)) / USER_SETTINGS_FILE

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        Without an explicit path the user config directory is consulted; a
        missing file there is not an error.
        """
        try:
            text = resources.files("healthy_products").joinpath("default_settings.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = {}

        user_data: dict = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigurationError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)
        else:
            candidate = cls.default_user_path()
            if candidate.exists():
                user_data = cls._load_yaml(candidate)
                logger.info("Loaded user settings from %s", candidate)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
