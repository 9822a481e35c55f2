"""
Mock Presentation Layer - Records calls instead of drawing, for tests
"""

from typing import List, Optional, Sequence, Tuple

from game_system.interfaces import CompletionCallback, HapticPattern, IPresentationLayer
from game_system.quadrant import Quadrant


class MockPresentationLayer(IPresentationLayer):
    """
    Mock implementation of IPresentationLayer that performs no output.

    Every request is recorded so tests can assert on what the engine asked
    for. Completion callbacks are held until complete_presentation() is
    called, or invoked immediately when auto_complete is set.
    """

    def __init__(self, logger, auto_complete: bool = False):
        """
        Initialize mock presentation.

        Args:
            logger: ClassLogger instance for logging
            auto_complete: Invoke completion callbacks synchronously
        """
        self.logger = logger
        self.auto_complete = auto_complete

        self.played_sequences: List[Tuple[Quadrant, ...]] = []
        self.played_timings: List[Tuple[int, int]] = []
        self.transitions: List[int] = []
        self.vibrations: List[HapticPattern] = []
        self.input_enabled_history: List[bool] = []
        self.taps: List[Quadrant] = []

        self.pending_callback: Optional[CompletionCallback] = None

    @property
    def input_enabled(self) -> bool:
        return bool(self.input_enabled_history) and self.input_enabled_history[-1]

    @property
    def event_count(self) -> int:
        """Total number of recorded requests"""
        return (len(self.played_sequences) + len(self.transitions)
                + len(self.vibrations) + len(self.input_enabled_history))

    def play_sequence(self,
                      entries: Sequence[Quadrant],
                      flash_duration_ms: int,
                      inter_entry_delay_ms: int,
                      on_complete: CompletionCallback) -> None:
        """Mock: Record the sequence"""
        self.played_sequences.append(tuple(entries))
        self.played_timings.append((flash_duration_ms, inter_entry_delay_ms))
        self.logger.debug(f"Mock: play sequence of {len(entries)}")
        self._hold(on_complete)

    def play_end_of_round_transition(self, score: int, on_complete: CompletionCallback) -> None:
        """Mock: Record the score"""
        self.transitions.append(score)
        self.logger.debug(f"Mock: end of round, score {score}")
        self._hold(on_complete)

    def vibrate(self, pattern: HapticPattern) -> None:
        """Mock: Record the pattern"""
        self.vibrations.append(pattern)

    def set_input_enabled(self, enabled: bool) -> None:
        """Mock: Record the toggle"""
        self.input_enabled_history.append(enabled)

    def show_tap(self, quadrant: Quadrant) -> None:
        """Mock: Record the tap feedback"""
        self.taps.append(quadrant)

    def complete_presentation(self) -> CompletionCallback:
        """
        Invoke the most recent completion callback.

        Returns:
            The callback that was invoked, so tests can call it again

        Raises:
            RuntimeError: If no presentation has been requested
        """
        callback = self.pending_callback
        if callback is None:
            raise RuntimeError("No presentation pending")
        self.pending_callback = None
        callback()
        return callback

    def _hold(self, on_complete: CompletionCallback) -> None:
        if self.auto_complete:
            on_complete()
        else:
            self.pending_callback = on_complete
