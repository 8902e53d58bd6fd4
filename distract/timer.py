"""A clock that can be paused, on its own or together with the game."""

from __future__ import annotations

import time
from typing import Any, Callable


class PausableClock:
    """Accumulates elapsed time only while neither it nor the game is paused.

    ``clock`` is a source of seconds, such as ``time.monotonic``.
    """

    def __init__(
        self,
        game: Any = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.game = game
        self._clock = clock
        self.time = 0.0
        self.is_paused = False
        self.has_game_pause = True
        self._started = clock()

    def _elapsed_and_restart(self) -> float:
        now = self._clock()
        elapsed = now - self._started
        self._started = now
        return elapsed

    def _is_stopped(self) -> bool:
        if self.is_paused:
            return True
        return (
            self.has_game_pause
            and self.game is not None
            and bool(self.game.is_paused)
        )

    def tick(self) -> float:
        """Seconds since the previous tick, or 0.0 while paused."""
        elapsed = self._elapsed_and_restart()
        if self._is_stopped():
            return 0.0
        self.time += elapsed
        return elapsed

    def restart(self) -> None:
        """Reset the accumulated time and start measuring from now."""
        self.time = 0.0
        self._started = self._clock()