"""
Time-based quadrant animations for the pygame presentation layer
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Sequence, Tuple

from game_system.quadrant import Quadrant


Clock = Callable[[], float]


class Animation(ABC):
    """
    Abstract base class for time-based animations.

    An animation starts when it is created and is sampled by elapsed time,
    so frame rate only affects smoothness, never duration. Subclasses report
    how strongly each quadrant is highlighted (0.0 base color, 1.0 highlight).
    """

    def __init__(self, clock: Clock = time.time):
        """
        Initialize animation timing.

        Args:
            clock: Time source in seconds (injectable for tests)
        """
        self.clock: Clock = clock
        self.start_time: float = clock()

    def get_name(self) -> str:
        """Get animation name from class name"""
        return self.__class__.__name__

    def elapsed_ms(self) -> float:
        return (self.clock() - self.start_time) * 1000

    def is_finished(self) -> bool:
        return self.elapsed_ms() >= self.duration_ms

    @property
    @abstractmethod
    def duration_ms(self) -> float:
        """Total animation length in milliseconds"""
        pass

    @abstractmethod
    def highlight_levels(self) -> Dict[Quadrant, float]:
        """
        Highlight amount per quadrant at the current time.

        Quadrants missing from the result are drawn in their base color.
        """
        pass


def _triangle(progress: float) -> float:
    """Rise 0 -> 1 over the first half, fall back to 0 over the second"""
    return max(0.0, 1.0 - abs(2.0 * progress - 1.0))


class SequenceFlashAnimation(Animation):
    """
    Flashes each entry of a sequence in order.

    Timeline:
        [start delay] [flash 0] [gap] [flash 1] [gap] ... [flash n-1]

    Each flash tints base -> highlight -> base over flash_ms.
    """

    def __init__(self,
                 entries: Sequence[Quadrant],
                 flash_ms: int,
                 gap_ms: int,
                 start_delay_ms: int = 0,
                 clock: Clock = time.time):
        super().__init__(clock)
        self.entries: Tuple[Quadrant, ...] = tuple(entries)
        self.flash_ms: int = flash_ms
        self.gap_ms: int = gap_ms
        self.start_delay_ms: int = start_delay_ms

    @property
    def duration_ms(self) -> float:
        if not self.entries:
            return self.start_delay_ms
        count = len(self.entries)
        return self.start_delay_ms + count * self.flash_ms + (count - 1) * self.gap_ms

    def current_index(self) -> Optional[int]:
        """Index of the entry flashing right now, or None between flashes"""
        t = self.elapsed_ms() - self.start_delay_ms
        if t < 0 or not self.entries:
            return None

        period = self.flash_ms + self.gap_ms
        index = int(t // period)
        if index >= len(self.entries):
            return None
        if t - index * period >= self.flash_ms:
            return None  # In the gap after this flash
        return index

    def highlight_levels(self) -> Dict[Quadrant, float]:
        index = self.current_index()
        if index is None:
            return {}

        t = self.elapsed_ms() - self.start_delay_ms
        period = self.flash_ms + self.gap_ms
        progress = (t - index * period) / self.flash_ms
        return {self.entries[index]: _triangle(progress)}


class EndOfRoundAnimation(Animation):
    """
    Break between games: reveal the score while the quadrants fade out,
    hold it, then hide it while the quadrants fade back in.

    Timeline:
        [reveal transition_ms] [hold show_score_ms] [hide transition_ms]
    """

    def __init__(self,
                 score: int,
                 transition_ms: int,
                 show_score_ms: int,
                 clock: Clock = time.time):
        super().__init__(clock)
        self.score: int = score
        self.transition_ms: int = transition_ms
        self.show_score_ms: int = show_score_ms

    @property
    def duration_ms(self) -> float:
        return 2 * self.transition_ms + self.show_score_ms

    def reveal_fraction(self) -> float:
        """How much of the score circle is visible (0.0-1.0)"""
        t = self.elapsed_ms()
        hide_start = self.transition_ms + self.show_score_ms

        if t >= self.duration_ms:
            return 0.0
        if t < self.transition_ms:
            return t / self.transition_ms
        if t < hide_start:
            return 1.0
        return 1.0 - (t - hide_start) / self.transition_ms

    def highlight_levels(self) -> Dict[Quadrant, float]:
        level = self.reveal_fraction()
        return {quadrant: level for quadrant in Quadrant}


class TapFlashAnimation(Animation):
    """Press feedback: the tapped quadrant decays from highlight to base"""

    def __init__(self, quadrant: Quadrant, flash_ms: int, clock: Clock = time.time):
        super().__init__(clock)
        self.quadrant: Quadrant = quadrant
        self.flash_ms: int = flash_ms

    @property
    def duration_ms(self) -> float:
        return self.flash_ms

    def highlight_levels(self) -> Dict[Quadrant, float]:
        if self.flash_ms <= 0 or self.is_finished():
            return {}
        return {self.quadrant: 1.0 - self.elapsed_ms() / self.flash_ms}
