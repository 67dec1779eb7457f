from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class GameRules(BaseModel):
    """Fixed rules of the game: grid size, per-level item count, point ranges.

    The model is validated on construction so that a configuration which could
    never produce a level (e.g. more items than free cells) fails at startup
    rather than while a level is being generated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    grid_width: int = Field(20, ge=3, description="Grid width in tiles")
    grid_height: int = Field(15, ge=3, description="Grid height in tiles")
    items_per_level: int = Field(10, ge=1, description="Products generated for every level")
    healthy_points: Tuple[int, int] = Field((10, 19), description="Inclusive point range of healthy products")
    unhealthy_points: Tuple[int, int] = Field((-5, -1), description="Inclusive point range of unhealthy products")
    selectable_levels: int = Field(3, ge=1, description="Levels offered in the main menu")
    max_attempts_per_item: int = Field(1000, ge=1, description="Rejection sampling cap per item")

    @field_validator("healthy_points")
    @classmethod
    def healthy_range_positive(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        lo, hi = v
        if lo > hi or lo <= 0:
            raise ValueError(f"healthy_points must be a positive ascending range, got {v}")
        return v

    @field_validator("unhealthy_points")
    @classmethod
    def unhealthy_range_negative(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        lo, hi = v
        if lo > hi or hi >= 0:
            raise ValueError(f"unhealthy_points must be a negative ascending range, got {v}")
        return v

    @model_validator(mode="after")
    def items_fit_interior(self) -> "GameRules":
        # The start cell sits on the right border, so every interior cell is eligible.
        interior = (self.grid_width - 2) * (self.grid_height - 2)
        if self.items_per_level >= interior:
            raise ValueError(
                f"items_per_level={self.items_per_level} must be smaller than the "
                f"{interior} interior cells of a {self.grid_width}x{self.grid_height} grid"
            )
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "GameRules":
        """Build rules from plain data, reporting problems as ConfigurationError."""
        try:
            rules = cls(**(data or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid game rules: {e}") from e
        logger.debug("Game rules: %s", rules)
        return rules


DEFAULT_RULES = GameRules()
