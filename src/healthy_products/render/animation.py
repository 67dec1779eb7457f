from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class FrameClock:
    """Two-frame toggle driven by the renderer's delta time.

    Lives entirely in the rendering layer; the chosen frame is passed to
    ``project`` and never written into game state.
    """

    def __init__(self, interval: float = 0.25) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = float(interval)
        self._elapsed = 0.0
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    def tick(self, dt: float) -> int:
        """Advance by ``dt`` seconds and return the current frame index."""
        self._elapsed += max(0.0, dt)
        while self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self._frame ^= 1
        return self._frame

    def reset(self) -> None:
        self._elapsed = 0.0
        self._frame = 0
