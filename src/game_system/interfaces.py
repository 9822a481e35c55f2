"""
Abstract interfaces between the sequence engine and the presentation layer
"""

import enum
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .quadrant import Quadrant


CompletionCallback = Callable[[], None]


class HapticPattern(enum.Enum):
    """Haptic feedback events emitted by the engine"""
    ROUND_EXTENDED = "round_extended"
    ROUND_FAILED = "round_failed"


class IPresentationLayer(ABC):
    """
    Abstract interface for everything the player sees and feels.

    The engine never touches views, animators or vibration hardware directly.
    Implementations can render with pygame, record calls for tests, or drive
    any other output.

    Completion callbacks must be invoked exactly once when the requested
    animation ends. The engine tolerates duplicates and ignores them.
    """

    @abstractmethod
    def play_sequence(self,
                      entries: Sequence[Quadrant],
                      flash_duration_ms: int,
                      inter_entry_delay_ms: int,
                      on_complete: CompletionCallback) -> None:
        """
        Flash each entry in order, then invoke on_complete.

        Args:
            entries: Full sequence to show the player
            flash_duration_ms: How long each quadrant flash lasts
            inter_entry_delay_ms: Pause between consecutive flashes
            on_complete: Called once playback has finished
        """
        pass

    @abstractmethod
    def play_end_of_round_transition(self, score: int, on_complete: CompletionCallback) -> None:
        """
        Show the end-of-round score, then invoke on_complete.

        Args:
            score: Number of entries reproduced before the mistake
            on_complete: Called once the transition has finished
        """
        pass

    @abstractmethod
    def vibrate(self, pattern: HapticPattern) -> None:
        """Fire-and-forget haptic feedback"""
        pass

    @abstractmethod
    def set_input_enabled(self, enabled: bool) -> None:
        """Enable or disable acceptance of quadrant taps at the UI layer"""
        pass

    def show_tap(self, quadrant: Quadrant) -> None:
        """Give visual feedback for an accepted tap (override if needed)"""
        pass
