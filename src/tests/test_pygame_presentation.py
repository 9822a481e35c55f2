import pygame
import pytest

from game_system.config import DisplayConfig, GameConfig
from game_system.interfaces import HapticPattern
from game_system.quadrant import Quadrant
from presentation_system.animations import EndOfRoundAnimation, SequenceFlashAnimation
from presentation_system.pygame_presentation import PygamePresentation
from presentation_system.quadrant_layout import QUADRANT_COLORS


@pytest.fixture
def surface():
    return pygame.Surface((200, 200))


@pytest.fixture
def pulses():
    return []


@pytest.fixture
def pygame_presentation(surface, logger, clock, pulses):
    config = GameConfig(display=DisplayConfig(window_size=200, quadrant_gap_px=4))
    return PygamePresentation(surface, config, logger, rumble=pulses.append, clock=clock)


def pixel_at(surface, quadrant, presentation):
    rect = presentation.layout.rect_for(quadrant)
    return tuple(surface.get_at((rect.x + 5, rect.y + 5)))[:3]


def test_input_starts_disabled(pygame_presentation):
    assert pygame_presentation.input_enabled is False

    pygame_presentation.set_input_enabled(True)
    assert pygame_presentation.input_enabled is True


def test_sequence_completion_fires_once_after_duration(pygame_presentation, clock):
    calls = []
    pygame_presentation.play_sequence((Quadrant.TOP_LEFT, Quadrant.TOP_RIGHT), 300, 100, lambda: calls.append(1))
    assert isinstance(pygame_presentation.active_animation, SequenceFlashAnimation)

    # 500 lead-in + 300 + 100 + 300
    clock.advance_ms(1190)
    pygame_presentation.update()
    assert calls == []

    clock.advance_ms(20)
    pygame_presentation.update()
    pygame_presentation.update()
    assert calls == [1]
    assert pygame_presentation.active_animation is None


def test_completion_may_start_next_animation(pygame_presentation, clock):
    started = []

    def restart():
        pygame_presentation.play_sequence((Quadrant.BOTTOM_LEFT,), 300, 100, lambda: None)
        started.append(1)

    pygame_presentation.play_end_of_round_transition(3, restart)
    assert isinstance(pygame_presentation.active_animation, EndOfRoundAnimation)

    clock.advance_ms(1510)
    pygame_presentation.update()

    assert started == [1]
    assert isinstance(pygame_presentation.active_animation, SequenceFlashAnimation)


def test_vibrate_sends_configured_pulses(pygame_presentation, clock, pulses):
    pygame_presentation.vibrate(HapticPattern.ROUND_EXTENDED)
    assert pulses == []

    clock.advance_ms(210)
    pygame_presentation.update()
    assert pulses == [100]

    pygame_presentation.vibrate(HapticPattern.ROUND_FAILED)
    assert pulses == [100, 500]


def test_render_idle_draws_base_colors(pygame_presentation, surface):
    pygame_presentation.render()

    for quadrant in Quadrant:
        base, _ = QUADRANT_COLORS[quadrant]
        assert pixel_at(surface, quadrant, pygame_presentation) == base.rgb


def test_render_highlights_flashing_entry(pygame_presentation, surface, clock):
    pygame_presentation.play_sequence((Quadrant.BOTTOM_RIGHT,), 300, 100, lambda: None)
    clock.advance_ms(500 + 150)

    pygame_presentation.render()

    _, highlight = QUADRANT_COLORS[Quadrant.BOTTOM_RIGHT]
    base, _ = QUADRANT_COLORS[Quadrant.TOP_LEFT]
    assert pixel_at(surface, Quadrant.BOTTOM_RIGHT, pygame_presentation) == highlight.rgb
    assert pixel_at(surface, Quadrant.TOP_LEFT, pygame_presentation) == base.rgb


def test_tap_flash_highlights_then_expires(pygame_presentation, surface, clock):
    pygame_presentation.show_tap(Quadrant.TOP_RIGHT)
    pygame_presentation.render()

    _, highlight = QUADRANT_COLORS[Quadrant.TOP_RIGHT]
    assert pixel_at(surface, Quadrant.TOP_RIGHT, pygame_presentation) == highlight.rgb

    clock.advance_ms(200)
    pygame_presentation.update()
    pygame_presentation.render()

    base, _ = QUADRANT_COLORS[Quadrant.TOP_RIGHT]
    assert pixel_at(surface, Quadrant.TOP_RIGHT, pygame_presentation) == base.rgb


def test_render_end_of_round_shows_score(pygame_presentation, surface, clock):
    pygame_presentation.play_end_of_round_transition(7, lambda: None)
    clock.advance_ms(600)

    pygame_presentation.render()

    # Score circle covers the middle of the face
    center = pygame_presentation.layout.center
    assert tuple(surface.get_at(center))[:3] != (0, 0, 0)
