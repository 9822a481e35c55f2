#!/usr/bin/env python3
"""
Memory game launcher

Opens a square pygame window with four colored quadrants and runs the
"Simon says" loop: watch the sequence, repeat it by clicking (or with the
Q/W/A/S keys), and it grows by one every time you get it right.
"""

import argparse
import logging
import signal
import sys
from typing import Optional

import pygame

from game_system import GameManager, VARIANTS, create_variant_config
from game_system.config import DEFAULT_VARIANT, DisplayConfig
from hybridLogger import HybridLogger
from presentation_system import PygamePresentation
from presentation_system.haptics import RumbleFunction


def create_rumble(logger) -> Optional[RumbleFunction]:
    """
    Use the first joystick's rumble motor for haptics, if there is one.

    Returns:
        Pulse function taking a duration in ms, or None without a device
    """
    pygame.joystick.init()
    if pygame.joystick.get_count() == 0:
        logger.info("No joystick found - haptic feedback will be logged only")
        return None

    joystick = pygame.joystick.Joystick(0)
    logger.info(f"Haptic feedback on {joystick.get_name()}")

    def rumble(duration_ms: int) -> None:
        if not joystick.rumble(0.5, 1.0, duration_ms):
            logger.debug("Joystick rumble not supported")

    return rumble


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simon-says memory game with four colored quadrants",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--variant',
        choices=sorted(VARIANTS),
        default=DEFAULT_VARIANT,
        help='Game variant: "score" shows the score after a mistake, "quick" restarts immediately'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the sequence generator (repeatable games)'
    )
    parser.add_argument(
        '--size',
        type=int,
        default=DisplayConfig.window_size,
        help='Window size in pixels'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log sequences and ignored taps'
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function - sets up and runs the game.
    """
    args = parse_args(argv)

    main_logger = HybridLogger("MemoryGame")
    level = logging.DEBUG if args.debug else logging.INFO
    logger = main_logger.get_main_logger(level)

    try:
        config = create_variant_config(
            args.variant,
            seed=args.seed,
            display=DisplayConfig(window_size=args.size),
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        main_logger.cleanup()
        return 2

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.display.window_size, config.display.window_size))
        pygame.display.set_caption("Memem")

        presentation = PygamePresentation(
            screen,
            config,
            logger=main_logger.get_class_logger("PygamePresentation", level),
            rumble=create_rumble(logger),
        )
        game_manager = GameManager(
            presentation,
            config,
            logger=main_logger.get_class_logger("GameManager", level),
        )

        logger.info(
            f"Variant '{args.variant}': show score on failure={config.show_score_on_failure}, "
            f"{config.target_fps:.0f} FPS"
        )

        # Stop the loop cleanly on termination
        signal.signal(signal.SIGTERM, lambda sig, frame: game_manager.stop())

        game_manager.activate()
        game_manager.run_game_loop()
        return 0

    except Exception as e:
        logger.error(f"Game system error: {e}", exception=e)
        raise
    finally:
        pygame.quit()
        logger.info("Game system shut down")
        logger.flush()
        main_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
