import logging
import os
import random

# Headless pygame: must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from game_system.config import GameConfig
from game_system.sequence_engine import SequenceEngine
from hybridLogger import HybridLogger
from presentation_system.mock_presentation import MockPresentationLayer


class FakeClock:
    """Manually advanced time source in seconds"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def hybrid_logger(tmp_path):
    hybrid = HybridLogger("memem-test", log_dir=str(tmp_path), console=False)
    yield hybrid
    hybrid.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def presentation(logger):
    return MockPresentationLayer(logger)


@pytest.fixture
def make_engine(presentation, config, logger):
    def _make(seed: int = 1234, **config_overrides) -> SequenceEngine:
        engine_config = config
        for name, value in config_overrides.items():
            setattr(engine_config, name, value)
        return SequenceEngine(presentation, engine_config, logger, rng=random.Random(seed))
    return _make
