"""
Presentation System Package

Everything the player sees and feels: quadrant colors and geometry,
time-based flash animations, haptic pattern playback, and the pygame and
mock implementations of IPresentationLayer.
"""

from .pixel import Pixel
from .quadrant_layout import QuadrantLayout, QUADRANT_COLORS
from .animations import Animation, SequenceFlashAnimation, EndOfRoundAnimation, TapFlashAnimation
from .haptics import HapticPlayer
from .pygame_presentation import PygamePresentation
from .mock_presentation import MockPresentationLayer

__all__ = [
    "Pixel",
    "QuadrantLayout",
    "QUADRANT_COLORS",
    "Animation",
    "SequenceFlashAnimation",
    "EndOfRoundAnimation",
    "TapFlashAnimation",
    "HapticPlayer",
    "PygamePresentation",
    "MockPresentationLayer"
]
