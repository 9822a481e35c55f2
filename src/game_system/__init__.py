"""
Game System - Sequence engine and game loop for the memory game

This module provides the core architecture: a small state machine that
generates and checks the quadrant sequence, the interface it drives the
presentation layer through, and the manager that runs it in a pygame loop.
"""

from .quadrant import Quadrant, QUADRANTS
from .interfaces import IPresentationLayer, HapticPattern
from .config import GameConfig, DisplayConfig, HapticConfig, VARIANTS, create_variant_config
from .sequence_engine import SequenceEngine, EngineState
from .game_manager import GameManager

__all__ = [
    # Model
    "Quadrant",
    "QUADRANTS",
    # Interfaces
    "IPresentationLayer",
    "HapticPattern",
    # Engine
    "SequenceEngine",
    "EngineState",
    "GameManager",
    # Configuration
    "GameConfig",
    "DisplayConfig",
    "HapticConfig",
    "VARIANTS",
    "create_variant_config"
]
