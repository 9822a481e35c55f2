"""
Haptic pattern playback over a rumble device
"""

import time
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from game_system.interfaces import HapticPattern

if TYPE_CHECKING:
    from hybridLogger import ClassLogger
    from game_system.config import HapticConfig


RumbleFunction = Callable[[int], None]


class HapticPlayer:
    """
    Plays off/on vibration patterns without blocking the frame loop.

    Pattern timings alternate off/on starting with "off", the way an Android
    vibrator reads them: [200, 100] waits 200ms and then vibrates for 100ms.
    Each "on" segment becomes one pulse sent to the rumble function when its
    offset is reached. Starting a new pattern drops whatever is left of the
    previous one.

    Example:
        player = HapticPlayer(config.haptics, rumble=joystick_rumble, logger=logger)
        player.start(HapticPattern.ROUND_EXTENDED)
        # In update loop:
        player.update()
    """

    def __init__(self,
                 config: 'HapticConfig',
                 rumble: RumbleFunction,
                 logger: 'ClassLogger',
                 clock: Callable[[], float] = time.time):
        self.logger = logger
        self.rumble = rumble
        self.clock = clock
        self._patterns: Dict[HapticPattern, List[int]] = {
            HapticPattern.ROUND_EXTENDED: list(config.round_extended_ms),
            HapticPattern.ROUND_FAILED: list(config.round_failed_ms),
        }
        self._pending: List[Tuple[float, int]] = []  # (offset_ms, duration_ms)
        self._start_time: Optional[float] = None

    @staticmethod
    def pulses_for(timings: List[int]) -> List[Tuple[float, int]]:
        """
        Convert off/on timings into (offset_ms, duration_ms) pulses.

        Zero-length pulses are dropped.

        Example:
            pulses_for([250, 100, 300, 100]) -> [(250, 100), (650, 100)]
            pulses_for([0, 500]) -> [(0, 500)]
        """
        pulses = []
        offset = 0.0
        for index, duration in enumerate(timings):
            if index % 2 == 1 and duration > 0:
                pulses.append((offset, duration))
            offset += duration
        return pulses

    def start(self, pattern: HapticPattern) -> None:
        """Begin playing a pattern, replacing any pattern still in progress"""
        self._pending = self.pulses_for(self._patterns[pattern])
        self._start_time = self.clock()
        self.logger.debug(f"Haptic {pattern.name}: {self._patterns[pattern]}")
        self.update()

    def update(self) -> None:
        """Fire every pulse whose offset has been reached"""
        if self._start_time is None:
            return

        elapsed_ms = (self.clock() - self._start_time) * 1000
        while self._pending and self._pending[0][0] <= elapsed_ms:
            _, duration = self._pending.pop(0)
            self.rumble(duration)

        if not self._pending:
            self._start_time = None
