import random

import pytest

from game_system.config import GameConfig
from game_system.interfaces import HapticPattern
from game_system.quadrant import QUADRANTS, Quadrant
from game_system.sequence_engine import EngineState, SequenceEngine
from presentation_system.mock_presentation import MockPresentationLayer


def wrong_for(quadrant: Quadrant) -> Quadrant:
    return QUADRANTS[(quadrant.value + 1) % len(QUADRANTS)]


def play_round(engine: SequenceEngine, presentation: MockPresentationLayer) -> None:
    """Finish the playback and tap the whole sequence back correctly"""
    presentation.complete_presentation()
    for entry in engine.sequence:
        engine.submit_input(entry)


def test_new_engine_is_idle(make_engine):
    engine = make_engine()

    assert engine.state == EngineState.IDLE
    assert engine.sequence == ()
    assert engine.progress == 0
    assert engine.last_score is None


def test_start_new_game_presents_single_entry(make_engine, presentation, config):
    engine = make_engine()
    engine.start_new_game()

    assert len(engine.sequence) == 1
    assert engine.progress == 0
    assert engine.state == EngineState.PRESENTING
    assert presentation.played_sequences == [engine.sequence]
    assert presentation.played_timings == [(config.flash_duration_ms, config.inter_entry_delay_ms)]
    assert presentation.input_enabled_history == [False]


def test_presentation_complete_awaits_input(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    presentation.complete_presentation()

    assert engine.state == EngineState.AWAITING_INPUT
    assert presentation.input_enabled is True


@pytest.mark.parametrize("rounds", [1, 2, 5, 12])
def test_sequence_grows_by_one_per_successful_round(make_engine, presentation, rounds):
    engine = make_engine()
    engine.start_new_game()

    for _ in range(rounds):
        play_round(engine, presentation)

    assert len(engine.sequence) == rounds + 1
    assert len(presentation.played_sequences) == rounds + 1
    assert presentation.vibrations == [HapticPattern.ROUND_EXTENDED] * rounds


def test_extension_keeps_existing_prefix(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    before = engine.sequence

    play_round(engine, presentation)

    assert engine.sequence[:len(before)] == before


def test_correct_taps_advance_progress_then_extend_once(make_engine, presentation):
    engine = make_engine(seed=3)
    engine.start_new_game()
    play_round(engine, presentation)
    play_round(engine, presentation)
    sequence = engine.sequence
    assert len(sequence) == 3

    presentation.complete_presentation()
    for index, entry in enumerate(sequence[:-1]):
        engine.submit_input(entry)
        assert engine.progress == index + 1
        assert engine.state == EngineState.AWAITING_INPUT

    played_before = len(presentation.played_sequences)
    engine.submit_input(sequence[-1])

    assert len(presentation.played_sequences) == played_before + 1
    assert len(engine.sequence) == 4
    assert engine.progress == 0
    assert engine.state == EngineState.PRESENTING


def test_wrong_tap_reports_score_and_restarts(make_engine, presentation):
    engine = make_engine(seed=11)
    engine.start_new_game()
    play_round(engine, presentation)
    play_round(engine, presentation)
    sequence = engine.sequence
    assert len(sequence) == 3

    presentation.complete_presentation()
    engine.submit_input(sequence[0])
    engine.submit_input(sequence[1])
    engine.submit_input(wrong_for(sequence[2]))

    assert presentation.vibrations[-1] == HapticPattern.ROUND_FAILED
    assert presentation.vibrations.count(HapticPattern.ROUND_FAILED) == 1
    assert presentation.transitions == [2]
    assert engine.last_score == 2
    assert engine.state == EngineState.PRESENTING

    presentation.complete_presentation()

    assert len(engine.sequence) == 1
    assert engine.progress == 0
    assert engine.state == EngineState.PRESENTING


@pytest.mark.parametrize("step", [0, 1, 2, 3])
def test_wrong_tap_at_any_step_scores_length_minus_one(make_engine, presentation, step):
    engine = make_engine(seed=5)
    engine.start_new_game()
    for _ in range(3):
        play_round(engine, presentation)
    sequence = engine.sequence
    assert len(sequence) == 4

    presentation.complete_presentation()
    for entry in sequence[:step]:
        engine.submit_input(entry)
    engine.submit_input(wrong_for(sequence[step]))

    assert presentation.transitions == [3]


def test_input_during_presentation_is_ignored(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    sequence, progress, events = engine.sequence, engine.progress, presentation.event_count

    for quadrant in Quadrant:
        engine.submit_input(quadrant)

    assert engine.sequence == sequence
    assert engine.progress == progress
    assert presentation.event_count == events
    assert engine.state == EngineState.PRESENTING


def test_input_during_end_of_round_transition_is_ignored(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    presentation.complete_presentation()
    engine.submit_input(wrong_for(engine.sequence[0]))
    events = presentation.event_count

    engine.submit_input(engine.sequence[0])

    assert presentation.event_count == events
    assert presentation.transitions == [0]


def test_input_before_game_started_is_ignored(make_engine, presentation):
    engine = make_engine()

    engine.submit_input(Quadrant.TOP_LEFT)

    assert engine.sequence == ()
    assert engine.state == EngineState.IDLE
    assert presentation.event_count == 0


def test_duplicate_sequence_completion_is_noop(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    callback = presentation.complete_presentation()
    engine.submit_input(engine.sequence[0])
    assert engine.progress == 0  # Extended to length 2, presenting
    events = presentation.event_count

    callback()

    assert engine.state == EngineState.PRESENTING
    assert presentation.event_count == events


def test_duplicate_transition_completion_starts_one_game(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    presentation.complete_presentation()
    engine.submit_input(wrong_for(engine.sequence[0]))

    callback = presentation.complete_presentation()
    games_played = len(presentation.played_sequences)
    callback()

    assert len(presentation.played_sequences) == games_played
    assert len(engine.sequence) == 1


def test_start_new_game_always_resets(make_engine, presentation):
    engine = make_engine()
    engine.start_new_game()
    for _ in range(4):
        play_round(engine, presentation)

    engine.start_new_game()

    assert len(engine.sequence) == 1
    assert engine.progress == 0


def test_quick_variant_restarts_without_transition(make_engine, presentation):
    engine = make_engine(show_score_on_failure=False)
    engine.start_new_game()
    play_round(engine, presentation)
    presentation.complete_presentation()

    engine.submit_input(wrong_for(engine.sequence[0]))

    assert presentation.transitions == []
    assert presentation.vibrations[-1] == HapticPattern.ROUND_FAILED
    assert engine.last_score == 1
    assert len(engine.sequence) == 1
    assert engine.state == EngineState.PRESENTING


def test_seeded_engines_generate_same_sequence(logger):
    sequences = []
    for _ in range(2):
        presentation = MockPresentationLayer(logger, auto_complete=True)
        engine = SequenceEngine(presentation, GameConfig(), logger, rng=random.Random(99))
        engine.start_new_game()
        for _ in range(6):
            for entry in engine.sequence:
                engine.submit_input(entry)
        sequences.append(engine.sequence)

    assert sequences[0] == sequences[1]
    assert len(sequences[0]) == 7


def test_config_seed_used_without_explicit_rng(logger):
    first = MockPresentationLayer(logger)
    second = MockPresentationLayer(logger)
    SequenceEngine(first, GameConfig(seed=42), logger).start_new_game()
    SequenceEngine(second, GameConfig(seed=42), logger).start_new_game()

    assert first.played_sequences == second.played_sequences


def test_generated_entries_cover_all_quadrants(logger):
    presentation = MockPresentationLayer(logger, auto_complete=True)
    engine = SequenceEngine(presentation, GameConfig(), logger, rng=random.Random(0))
    engine.start_new_game()
    for _ in range(40):
        for entry in engine.sequence:
            engine.submit_input(entry)

    assert set(engine.sequence) == set(Quadrant)


def test_auto_complete_presentation_reaches_awaiting_input(logger):
    presentation = MockPresentationLayer(logger, auto_complete=True)
    engine = SequenceEngine(presentation, GameConfig(), logger, rng=random.Random(1))

    engine.start_new_game()
    engine.submit_input(engine.sequence[0])

    assert len(engine.sequence) == 2
    assert engine.state == EngineState.AWAITING_INPUT


def test_example_trace(logger):
    presentation = MockPresentationLayer(logger)
    engine = SequenceEngine(presentation, GameConfig(), logger, rng=random.Random(2024))

    engine.start_new_game()
    assert len(engine.sequence) == 1
    first = engine.sequence[0]

    presentation.complete_presentation()
    engine.submit_input(first)
    assert len(engine.sequence) == 2

    presentation.complete_presentation()
    engine.submit_input(engine.sequence[0])
    engine.submit_input(wrong_for(engine.sequence[1]))
    assert presentation.transitions == [1]

    presentation.complete_presentation()
    assert len(engine.sequence) == 1
    assert engine.progress == 0
