"""
Elapsed-time tracking for a single game.

The board starts the timer on the first accepted reveal and freezes it
when the game ends; the front-end samples it every time it redraws.
"""
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class GameTimer:
    """
    Start/stop semantics for the game clock.

    Attributes:
        clock: Monotonic time source in seconds.
        start_time: Clock reading of the first reveal, or None.
        elapsed_time: Last sampled duration in seconds.
    """

    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    start_time: Optional[float] = None
    elapsed_time: float = 0.0
    _frozen: bool = False

    @property
    def started(self) -> bool:
        return self.start_time is not None

    @property
    def frozen(self) -> bool:
        return self._frozen

    def start(self) -> bool:
        """
        Start the clock unless it already runs.

        Returns:
            True if this call started it.
        """
        if self.start_time is not None:
            return False
        self.start_time = self.clock()
        return True

    def sample(self) -> float:
        """Refresh elapsed_time while running and return it."""
        if self.start_time is not None and not self._frozen:
            self.elapsed_time = self.clock() - self.start_time
        return self.elapsed_time

    def freeze(self) -> None:
        """Take a final sample and stop updating."""
        if self._frozen:
            return
        self.sample()
        self._frozen = True
