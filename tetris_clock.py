
"""Drop clock: turns frame timestamps into gravity ticks"""
import logging
from tetris_config import CONFIG

log = logging.getLogger(__name__)


def gravity_interval(level: int) -> int:
    base, step = CONFIG["DROP_BASE_MS"], CONFIG["DROP_STEP_MS"]
    return max(CONFIG["DROP_MIN_MS"], base - (level - 1) * step)


class DropClock:
    """
    Accumulates elapsed time against the current gravity interval.

    A delayed frame fires every tick it owes, so no drop is lost to jitter.
    Nothing accumulates while the game is paused or over, and resuming starts
    counting again from the resume instant.
    """
    def __init__(self, game, now: float = 0.0):
        self.game = game
        self.last = now
        self.acc = 0.0

    def update(self, now: float) -> int:
        g = self.game
        if g.paused or g.game_over:
            # paused time never counts toward a drop, however play resumes
            self.last = now
            return 0
        self.acc += max(0.0, now - self.last)
        self.last = now
        grav = gravity_interval(g.level)
        ticks = 0
        while self.acc >= grav:
            self.acc -= grav
            g.gravity_tick()
            ticks += 1
            if g.game_over:
                break
        if ticks > 1:
            log.debug("caught up %d gravity ticks", ticks)
        return ticks

    def toggle_pause(self, now: float) -> bool:
        if not self.game.toggle_pause():
            return False
        if not self.game.paused:
            self.last = now
        return True

    def restart(self, now: float):
        self.game.restart()
        self.last = now
        self.acc = 0.0
