"""
Shared pytest fixtures for the hyperlog test suite.
"""

import random

import pytest

from hyperlog.logging import Entry, LoggingConfig
from hyperlog.protocol import (
    V0_8_2_2,
    V0_10_2_2,
    V1_0_2_0,
    V1_1_1_0,
    V2_0_1_0,
    V2_2_2_0,
    V2_4_1_0,
    V2_6_3_0,
    V2_8_2_0,
    V3_1_2_0,
    V3_3_2_0,
    V3_6_2_0,
)


# Reduced set of broker versions for cross-version checks.
FUNCTIONAL_TEST_VERSIONS = [
    V0_8_2_2,
    V0_10_2_2,
    V1_0_2_0,
    V1_1_1_0,
    V2_0_1_0,
    V2_2_2_0,
    V2_4_1_0,
    V2_6_3_0,
    V2_8_2_0,
    V3_1_2_0,
    V3_3_2_0,
    V3_6_2_0,
]


class RecordingLogger:
    """Logger that keeps entries in memory instead of writing them."""

    def __init__(self) -> None:
        self.entries: list[Entry] = []

    def log(self, entry: Entry) -> None:
        self.entries.append(entry)


class FixedJitterRandom(random.Random):
    """Random whose uniform() always returns one end of the range."""

    def __init__(self, use_upper: bool = False) -> None:
        super().__init__(0)
        self.use_upper = use_upper
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        self.calls += 1
        return b if self.use_upper else a


class ExplodingRandom(random.Random):
    """Random that fails the test if any value is drawn from it."""

    def uniform(self, a: float, b: float) -> float:
        raise AssertionError("uniform() should not be called")

    def random(self) -> float:
        raise AssertionError("random() should not be called")


@pytest.fixture(autouse=True)
def restore_logging_config():
    config = LoggingConfig()
    previous_level = config.level
    previous_output = config.output
    previous_disabled = config.disabled_loggers

    yield

    config.update(
        log_level=previous_level.value.lower(),
        log_output=previous_output.value,
        disabled_loggers=list(previous_disabled),
    )


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def lower_jitter_rng() -> FixedJitterRandom:
    return FixedJitterRandom(use_upper=False)


@pytest.fixture
def upper_jitter_rng() -> FixedJitterRandom:
    return FixedJitterRandom(use_upper=True)


@pytest.fixture
def exploding_rng() -> ExplodingRandom:
    return ExplodingRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(580)


@pytest.fixture
def functional_versions():
    return list(FUNCTIONAL_TEST_VERSIONS)
