"""
Game system configuration
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional


@dataclass
class HapticConfig:
    """
    Vibration patterns in milliseconds.

    Timings alternate off/on starting with "off", as an Android vibrator
    reads them: [200, 100] waits 200ms and then vibrates for 100ms, and
    [0, 500] vibrates for 500ms straight away.
    """
    round_extended_ms: List[int] = field(default_factory=lambda: [200, 100])
    round_failed_ms: List[int] = field(default_factory=lambda: [0, 500])


@dataclass
class DisplayConfig:
    """Window and animation timing configuration"""
    window_size: int = 400  # Square, like a watch face
    sequence_start_delay_ms: int = 500
    reset_transition_ms: int = 250
    show_score_ms: int = 1000
    tap_flash_ms: int = 150
    quadrant_gap_px: int = 6


@dataclass
class GameConfig:
    """Main game system configuration"""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    haptics: HapticConfig = field(default_factory=HapticConfig)

    # Sequence playback
    flash_duration_ms: int = 300
    inter_entry_delay_ms: int = 100

    # Round failure behaviour
    show_score_on_failure: bool = True

    # Random source seed (None = nondeterministic)
    seed: Optional[int] = None

    # Timing configuration
    frame_duration_ms: float = 20.0  # 50 FPS

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.flash_duration_ms <= 0:
            raise ValueError(f"Flash duration must be positive, got {self.flash_duration_ms}")

        if self.inter_entry_delay_ms < 0:
            raise ValueError(f"Inter-entry delay must not be negative, got {self.inter_entry_delay_ms}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        display = self.display
        for name in ("sequence_start_delay_ms", "reset_transition_ms", "show_score_ms", "tap_flash_ms"):
            if getattr(display, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(display, name)}")

        if display.quadrant_gap_px < 0:
            raise ValueError(f"Quadrant gap must not be negative, got {display.quadrant_gap_px}")

        # Each quadrant needs at least one pixel left after the gap
        if display.window_size < display.quadrant_gap_px + 2:
            raise ValueError(
                f"Window size {display.window_size} too small for gap {display.quadrant_gap_px}"
            )

        for name, timings in (("round_extended_ms", self.haptics.round_extended_ms),
                              ("round_failed_ms", self.haptics.round_failed_ms)):
            if not timings:
                raise ValueError(f"Haptic pattern {name} must not be empty")
            if any(t < 0 for t in timings):
                raise ValueError(f"Haptic pattern {name} timings must not be negative, got {timings}")
            if not any(t > 0 for t in timings[1::2]):
                raise ValueError(f"Haptic pattern {name} never vibrates, got {timings}")


# Observed game variants: score screen vs. immediate restart
VARIANTS: Dict[str, Dict] = {
    "score": {
        "show_score_on_failure": True,
        "round_extended_ms": [200, 100],
        "round_failed_ms": [0, 500],
    },
    "quick": {
        "show_score_on_failure": False,
        "round_extended_ms": [250, 100, 300, 100],
        "round_failed_ms": [0, 500],
    },
}

DEFAULT_VARIANT = "score"


def create_variant_config(name: str = DEFAULT_VARIANT, **overrides) -> GameConfig:
    """
    Create a configuration for a named game variant.

    Args:
        name: Variant name (see VARIANTS)
        **overrides: GameConfig fields to replace after applying the variant

    Returns:
        Validated GameConfig

    Raises:
        ValueError: If the variant is unknown or the result is invalid
    """
    if name not in VARIANTS:
        raise ValueError(f"Unknown game variant '{name}' (available: {', '.join(sorted(VARIANTS))})")

    variant = VARIANTS[name]
    config = GameConfig(
        haptics=HapticConfig(
            round_extended_ms=list(variant["round_extended_ms"]),
            round_failed_ms=list(variant["round_failed_ms"]),
        ),
        show_score_on_failure=variant["show_score_on_failure"],
    )
    if overrides:
        config = replace(config, **overrides)

    config.validate()
    return config
