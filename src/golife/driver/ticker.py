"""Frame-driven scheduling of engine steps.

A renderer calls :meth:`Ticker.tick` once per frame; the ticker decides on
which frames the engine advances, and exposes the speed, pause and replay
controls of the original button bar.
"""
import logging

from ..core.life_engine import LifeEngine, _is_int
from ..utils.config import Config

LOG = logging.getLogger(__name__)


class Ticker:
    """Steps a :class:`LifeEngine` once every ``render_every`` ticks."""

    def __init__(self, engine: LifeEngine, render_every: int = Config.INITIAL_RENDER_EVERY):
        if not _is_int(render_every) or not 1 <= render_every <= Config.MAX_RENDER_EVERY:
            raise ValueError(f"render_every must be an integer between 1 and {Config.MAX_RENDER_EVERY}, "
                             f"got {render_every!r}")
        self.engine = engine
        self.render_every = render_every
        self.paused = False
        self.ticks = 0
        self._count = 0

    def tick(self) -> bool:
        """Advance one frame.

        Returns:
            True if the engine stepped on this frame
        """
        self.ticks += 1
        if self.paused:
            return False

        self._count += 1
        if self._count < self.render_every:
            return False

        self._count = 0
        self.engine.step()
        return True

    def run(self, ticks: int) -> int:
        """Call :meth:`tick` ``ticks`` times and return how many steps were taken."""
        return sum(1 for _ in range(ticks) if self.tick())

    def speed_up(self) -> None:
        if self.render_every > 1:
            self.render_every -= 1
        LOG.debug(f"Stepping every {self.render_every} ticks")

    def slow_down(self) -> None:
        if self.render_every < Config.MAX_RENDER_EVERY:
            self.render_every += 1
        LOG.debug(f"Stepping every {self.render_every} ticks")

    def toggle_pause(self) -> bool:
        """Pause or resume stepping. Returns the new paused state."""
        self.paused = not self.paused
        LOG.info("Paused" if self.paused else "Resumed")
        return self.paused

    def replay(self) -> None:
        """Restart the engine from its initial field."""
        self.engine.reset()
        self._count = 0
        self.ticks = 0
