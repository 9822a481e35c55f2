"""
Main game manager - orchestrates the sequence engine, pygame input and rendering
"""

import functools
import random
import time
from typing import TYPE_CHECKING, Callable, Dict, Optional

import psutil
import pygame

from .quadrant import Quadrant
from .sequence_engine import SequenceEngine
from utils import OnceInMs

if TYPE_CHECKING:
    from hybridLogger import ClassLogger
    from game_system.config import GameConfig
    from presentation_system.pygame_presentation import PygamePresentation


# Keyboard stand-ins for taps: QW/AS block and numeric keypad corners
KEY_BINDINGS: Dict[int, Quadrant] = {
    pygame.K_q: Quadrant.TOP_LEFT,
    pygame.K_w: Quadrant.TOP_RIGHT,
    pygame.K_a: Quadrant.BOTTOM_LEFT,
    pygame.K_s: Quadrant.BOTTOM_RIGHT,
    pygame.K_KP7: Quadrant.TOP_LEFT,
    pygame.K_KP9: Quadrant.TOP_RIGHT,
    pygame.K_KP1: Quadrant.BOTTOM_LEFT,
    pygame.K_KP3: Quadrant.BOTTOM_RIGHT,
}


class GameManager:
    """
    Main game manager that orchestrates the entire game system.

    Responsibilities:
    - Rebuild the sequence engine on every activation
    - Route pointer and keyboard events to quadrant handlers
    - Maintain consistent frame timing
    """

    def __init__(self,
                 presentation: 'PygamePresentation',
                 config: 'GameConfig',
                 logger: 'ClassLogger',
                 rng: Optional[random.Random] = None):
        """
        Initialize the game manager.

        Args:
            presentation: Presentation layer that draws the game face
            config: Game configuration
            logger: Logger for debugging and monitoring
            rng: Random source shared by every engine this manager creates
        """
        self.presentation = presentation
        self.config = config
        self.logger = logger
        self.rng: random.Random = rng if rng is not None else random.Random(config.seed)
        self.target_frame_duration = config.frame_duration_ms / 1000.0
        self.running = True
        self.engine: Optional[SequenceEngine] = None

        # One handler per quadrant instead of one closure per button
        self._quadrant_handlers: Dict[Quadrant, Callable[[], None]] = {
            quadrant: functools.partial(self._on_quadrant_tapped, quadrant)
            for quadrant in Quadrant
        }

        # Resource monitoring using OnceInMs
        self._memory_monitor = OnceInMs(60000)  # Log every 60 seconds
        self._process = psutil.Process()

        self.logger.info(f"GameManager initialized: {int(config.frame_duration_ms)}ms frame duration")

    def activate(self) -> None:
        """Start from a fresh engine - nothing carries over from a previous activation"""
        self.logger.info("Activating game")
        self.engine = SequenceEngine(
            self.presentation,
            self.config,
            self.logger.create_class_logger("SequenceEngine"),
            rng=self.rng,
        )
        self.engine.start_new_game()

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call activate() first. Returns when the window is closed or ESC is
        pressed.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration*1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                for event in pygame.event.get():
                    self.handle_event(event)

                self.update()
                self.presentation.render()
                pygame.display.flip()

                # Frame duration limiting
                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Translate one pygame event into a game action"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in KEY_BINDINGS:
                self._quadrant_handlers[KEY_BINDINGS[event.key]]()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            quadrant = self.presentation.layout.quadrant_at(event.pos)
            if quadrant is not None:
                self._quadrant_handlers[quadrant]()
        elif event.type == pygame.WINDOWRESTORED:
            self.activate()

    def update(self) -> None:
        """Per-frame update: advance animations and log resource usage"""
        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        self.presentation.update()

    def stop(self) -> None:
        """Stop the game loop."""
        self.running = False
        self.logger.info("Game stopped")

    def _on_quadrant_tapped(self, quadrant: Quadrant) -> None:
        if self.engine is None or not self.presentation.input_enabled:
            self.logger.debug(f"Tap on {quadrant.name} dropped (input disabled)")
            return

        self.presentation.show_tap(quadrant)
        self.engine.submit_input(quadrant)

    def _log_memory_usage(self) -> None:
        """Log current process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            self.logger.info(f"Memory - Process: {process_mb:.1f}MB | CPU - Process: {process_cpu_percent:.1f}%")
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
