"""
Sequence engine - the state machine behind the memory game
"""

import enum
import random
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from .interfaces import CompletionCallback, HapticPattern
from .quadrant import QUADRANTS, Quadrant

if TYPE_CHECKING:
    from hybridLogger import ClassLogger
    from game_system.config import GameConfig
    from game_system.interfaces import IPresentationLayer


class EngineState(enum.Enum):
    """Logical engine states"""
    IDLE = "idle"                      # No active round yet
    PRESENTING = "presenting"          # Sequence or end-of-round animation in flight
    AWAITING_INPUT = "awaiting_input"  # Player may tap


class SequenceEngine:
    """
    Owns the expected sequence, the player's progress and the random source.

    The engine is driven by three operations - start_new_game(), extend()
    and submit_input() - and reacts to presentation completion callbacks.
    It holds no reference to concrete views; everything visible goes through
    the IPresentationLayer it was given.

    Example:
        engine = SequenceEngine(presentation, config, logger, rng=random.Random(7))
        engine.start_new_game()        # Sequence has one entry, PRESENTING
        # ... presentation calls back ...
        engine.submit_input(engine.sequence[0])  # Sequence grows to two
    """

    def __init__(self,
                 presentation: 'IPresentationLayer',
                 config: 'GameConfig',
                 logger: 'ClassLogger',
                 rng: Optional[random.Random] = None):
        """
        Initialize the engine in IDLE state.

        Args:
            presentation: Presentation layer receiving play/vibrate requests
            config: Game configuration (timings and failure behaviour)
            logger: ClassLogger for game events
            rng: Random source; defaults to one seeded from config.seed
        """
        self.presentation = presentation
        self.config = config
        self.logger = logger
        self._rng: random.Random = rng if rng is not None else random.Random(config.seed)

        self._sequence: List[Quadrant] = []
        self._progress: int = 0
        self._state: EngineState = EngineState.IDLE
        self.last_score: Optional[int] = None

        # Presentation bookkeeping - only the pending presentation may complete
        self._presentation_counter: int = 0
        self._pending_presentation: Optional[int] = None

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def sequence(self) -> Tuple[Quadrant, ...]:
        return tuple(self._sequence)

    @property
    def progress(self) -> int:
        return self._progress

    def start_new_game(self) -> None:
        """Clear the sequence and start over with a single entry"""
        self.logger.info("Starting new game")
        self._sequence.clear()
        self._progress = 0
        self.extend()

    def extend(self) -> None:
        """Append one random entry and play the full sequence to the player"""
        self._sequence.append(QUADRANTS[self._rng.randrange(len(QUADRANTS))])
        self._progress = 0

        self.logger.debug(f"Sequence: {[entry.name for entry in self._sequence]}")

        self._enter_presenting()
        self.presentation.play_sequence(
            tuple(self._sequence),
            self.config.flash_duration_ms,
            self.config.inter_entry_delay_ms,
            self._completion_for(self._on_sequence_presented),
        )

    def submit_input(self, quadrant: Quadrant) -> None:
        """
        Register a player tap.

        Ignored unless the engine is awaiting input with an expected entry.

        Args:
            quadrant: Quadrant the player tapped
        """
        if self._state != EngineState.AWAITING_INPUT:
            self.logger.debug(f"Ignoring tap on {quadrant.name} while {self._state.value}")
            return

        if self._progress >= len(self._sequence):
            # Could happen if we receive an event before the game is initialized
            self.logger.debug(f"Received unexpected tap on {quadrant.name}")
            return

        expected = self._sequence[self._progress]
        if quadrant == expected:
            self._progress += 1
            if self._progress >= len(self._sequence):
                self.logger.info(f"Round complete at length {len(self._sequence)}")
                self.presentation.vibrate(HapticPattern.ROUND_EXTENDED)
                self.extend()
        else:
            self.presentation.vibrate(HapticPattern.ROUND_FAILED)
            self._end_round()

    def _end_round(self) -> None:
        """Report the score and restart, through the score screen if configured"""
        score = len(self._sequence) - 1
        self.last_score = score
        self.logger.info(f"Round failed - score {score}")

        if not self.config.show_score_on_failure:
            self.start_new_game()
            return

        self._enter_presenting()
        self.presentation.play_end_of_round_transition(
            score, self._completion_for(self.start_new_game)
        )

    def _enter_presenting(self) -> None:
        self._state = EngineState.PRESENTING
        self.presentation.set_input_enabled(False)

    def _on_sequence_presented(self) -> None:
        self._state = EngineState.AWAITING_INPUT
        self.presentation.set_input_enabled(True)

    def _completion_for(self, handler: Callable[[], None]) -> CompletionCallback:
        """
        Create a single-use completion callback for a new presentation.

        The callback is a no-op when invoked a second time, or after a newer
        presentation has started.
        """
        self._presentation_counter += 1
        presentation_id = self._presentation_counter
        self._pending_presentation = presentation_id

        def on_complete() -> None:
            if self._pending_presentation != presentation_id:
                self.logger.debug(f"Ignoring stale completion for presentation {presentation_id}")
                return
            self._pending_presentation = None
            handler()

        return on_complete

    def __str__(self) -> str:
        """Human-readable representation"""
        return (
            f"SequenceEngine(state={self._state.value}, "
            f"length={len(self._sequence)}, progress={self._progress})"
        )
