"""
Pygame presentation layer - draws the quadrants, plays animations and haptics
"""

import time
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

import pygame

from game_system.interfaces import CompletionCallback, HapticPattern, IPresentationLayer
from game_system.quadrant import Quadrant
from .animations import Animation, EndOfRoundAnimation, SequenceFlashAnimation, TapFlashAnimation
from .haptics import HapticPlayer, RumbleFunction
from .quadrant_layout import BACKGROUND, QUADRANT_COLORS, SCORE_BACKGROUND, SCORE_TEXT, QuadrantLayout

if TYPE_CHECKING:
    from hybridLogger import ClassLogger
    from game_system.config import GameConfig


class PygamePresentation(IPresentationLayer):
    """
    Renders the game face on a pygame surface.

    Animations run against the clock and are advanced by update(), which the
    game loop calls once per frame. When the active animation finishes its
    completion callback is invoked from update(), never from inside the play
    call itself.

    Only one sequence/end-of-round animation is active at a time; tap flashes
    are layered on top.
    """

    def __init__(self,
                 surface: pygame.Surface,
                 config: 'GameConfig',
                 logger: 'ClassLogger',
                 rumble: Optional[RumbleFunction] = None,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the presentation.

        Args:
            surface: Square surface to draw on (window or offscreen)
            config: Game configuration (display timings and haptic patterns)
            logger: ClassLogger for presentation events
            rumble: Pulse function taking a duration in ms; defaults to logging only
            clock: Time source in seconds
        """
        self.surface = surface
        self.config = config
        self.logger = logger
        self.clock = clock
        self.layout = QuadrantLayout(surface.get_width(), config.display.quadrant_gap_px)

        self.haptics = HapticPlayer(
            config.haptics,
            rumble=rumble if rumble is not None else self._log_pulse,
            logger=logger,
            clock=clock,
        )

        self._input_enabled: bool = False
        self._animation: Optional[Animation] = None
        self._on_complete: Optional[CompletionCallback] = None
        self._tap_flashes: List[TapFlashAnimation] = []
        self._font: Optional[pygame.font.Font] = None

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    @property
    def active_animation(self) -> Optional[Animation]:
        return self._animation

    # IPresentationLayer

    def play_sequence(self,
                      entries: Sequence[Quadrant],
                      flash_duration_ms: int,
                      inter_entry_delay_ms: int,
                      on_complete: CompletionCallback) -> None:
        animation = SequenceFlashAnimation(
            entries,
            flash_ms=flash_duration_ms,
            gap_ms=inter_entry_delay_ms,
            start_delay_ms=self.config.display.sequence_start_delay_ms,
            clock=self.clock,
        )
        self._start_animation(animation, on_complete)

    def play_end_of_round_transition(self, score: int, on_complete: CompletionCallback) -> None:
        animation = EndOfRoundAnimation(
            score,
            transition_ms=self.config.display.reset_transition_ms,
            show_score_ms=self.config.display.show_score_ms,
            clock=self.clock,
        )
        self._start_animation(animation, on_complete)

    def vibrate(self, pattern: HapticPattern) -> None:
        self.haptics.start(pattern)

    def set_input_enabled(self, enabled: bool) -> None:
        self._input_enabled = enabled

    def show_tap(self, quadrant: Quadrant) -> None:
        self._tap_flashes.append(
            TapFlashAnimation(quadrant, self.config.display.tap_flash_ms, clock=self.clock)
        )

    # Frame loop

    def update(self) -> None:
        """Advance haptics and finish the active animation if it is done"""
        self.haptics.update()
        self._tap_flashes = [flash for flash in self._tap_flashes if not flash.is_finished()]

        if self._animation is not None and self._animation.is_finished():
            on_complete = self._on_complete
            self._animation = None
            self._on_complete = None
            # May start the next animation straight away
            if on_complete is not None:
                on_complete()

    def render(self) -> None:
        """Draw the current frame to the surface (caller flips the display)"""
        self.surface.fill(BACKGROUND.rgb)

        levels = {}
        if self._animation is not None:
            levels.update(self._animation.highlight_levels())
        for flash in self._tap_flashes:
            for quadrant, level in flash.highlight_levels().items():
                levels[quadrant] = max(level, levels.get(quadrant, 0.0))

        for quadrant in Quadrant:
            base, highlight = QUADRANT_COLORS[quadrant]
            color = base.blend(highlight, levels.get(quadrant, 0.0))
            pygame.draw.rect(self.surface, color.rgb, self.layout.rect_for(quadrant))

        if isinstance(self._animation, EndOfRoundAnimation):
            self._render_score(self._animation)

    def _render_score(self, animation: EndOfRoundAnimation) -> None:
        """Circular reveal of the score in the middle of the face"""
        max_radius = self.layout.cell // 2
        radius = int(max_radius * animation.reveal_fraction())
        if radius <= 0:
            return

        pygame.draw.circle(self.surface, SCORE_BACKGROUND.rgb, self.layout.center, radius)

        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, max(12, max_radius))

        text = self._font.render(str(animation.score), True, SCORE_TEXT.rgb)
        # Only draw the text once the circle can hold it
        if radius * 2 >= max(text.get_width(), text.get_height()):
            self.surface.blit(text, text.get_rect(center=self.layout.center))

    def _start_animation(self, animation: Animation, on_complete: CompletionCallback) -> None:
        if self._animation is not None:
            self.logger.warning(
                f"Replacing unfinished {self._animation.get_name()} with {animation.get_name()}"
            )
        self.logger.debug(f"Starting {animation.get_name()} ({animation.duration_ms:.0f}ms)")
        self._animation = animation
        self._on_complete = on_complete

    def _log_pulse(self, duration_ms: int) -> None:
        self.logger.debug(f"No rumble device - pulse {duration_ms}ms")
