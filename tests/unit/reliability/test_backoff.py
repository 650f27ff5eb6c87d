"""
Tests for KIP-580 exponential retry backoff.

These tests verify that:
1. Non-positive parameters fall back to the defaults
2. base > max_backoff is clamped with a single warning
3. retries <= 0 returns the base delay without jitter
4. Jitter stays within [0.8, 1.2] and the result never exceeds max_backoff
5. One policy can be shared across threads
"""

import math
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from hyperlog.logging import LogLevel, RetryBackoffClamped
from hyperlog.reliability import (
    DEFAULT_RETRY_BACKOFF,
    DEFAULT_RETRY_MAX_BACKOFF,
    ExponentialBackoff,
    make_exponential_backoff,
)


class TestBackoffConstruction:
    """Test parameter defaulting and clamping."""

    def test_defaults(self):
        """Defaults should be 100ms and 1s."""
        assert DEFAULT_RETRY_BACKOFF == 0.1
        assert DEFAULT_RETRY_MAX_BACKOFF == 1.0

    def test_parameters_kept(self, recording_logger):
        """Valid parameters should be kept as given."""
        backoff = make_exponential_backoff(0.25, 4.0, logger=recording_logger)

        assert isinstance(backoff, ExponentialBackoff)
        assert backoff.base == 0.25
        assert backoff.max_backoff == 4.0
        assert recording_logger.entries == []

    def test_negative_parameters_use_defaults(self, recording_logger):
        """Negative parameters should behave like (100ms, 1s)."""
        backoff = make_exponential_backoff(-0.005, -0.005, logger=recording_logger)

        assert backoff.base == DEFAULT_RETRY_BACKOFF
        assert backoff.max_backoff == DEFAULT_RETRY_MAX_BACKOFF
        assert recording_logger.entries == []

    def test_zero_parameters_use_defaults(self):
        """Zero parameters should behave like (100ms, 1s)."""
        backoff = make_exponential_backoff(0, 0)

        assert backoff.base == DEFAULT_RETRY_BACKOFF
        assert backoff.max_backoff == DEFAULT_RETRY_MAX_BACKOFF

    def test_defaulted_policy_matches_explicit_policy(self):
        """A defaulted policy should compute the same delays."""
        defaulted = make_exponential_backoff(-0.005, -0.005, rng=random.Random(11))
        explicit = make_exponential_backoff(0.1, 1.0, rng=random.Random(11))

        for retries in range(0, 8):
            assert defaulted(retries, 10) == explicit(retries, 10)

    def test_base_greater_than_max_is_clamped(self, recording_logger):
        """base > max_backoff should use max_backoff as the base."""
        backoff = make_exponential_backoff(2.0, 1.0, logger=recording_logger)

        assert backoff.base == 1.0
        assert backoff.max_backoff == 1.0

    def test_clamp_logs_single_warning(self, recording_logger):
        """Clamping should log exactly one warning entry."""
        make_exponential_backoff(2.0, 1.0, logger=recording_logger)

        assert len(recording_logger.entries) == 1

        entry = recording_logger.entries[0]
        assert isinstance(entry, RetryBackoffClamped)
        assert entry.level == LogLevel.WARN
        assert entry.base == 2.0
        assert entry.max_backoff == 1.0

    def test_nan_base_uses_default(self, recording_logger, seeded_rng):
        """A NaN base falls back to the default and delays stay bounded."""
        backoff = make_exponential_backoff(
            float("nan"),
            1.0,
            logger=recording_logger,
            rng=seeded_rng,
        )

        assert backoff.base == DEFAULT_RETRY_BACKOFF
        assert backoff(0, 3) == DEFAULT_RETRY_BACKOFF
        assert 0.08 <= backoff(1, 3) <= 0.12
        assert backoff(10, 3) == 1.0
        assert recording_logger.entries == []

    def test_nan_max_backoff_uses_default(self, recording_logger, seeded_rng):
        """A NaN max_backoff falls back to the default cap."""
        backoff = make_exponential_backoff(
            0.1,
            float("nan"),
            logger=recording_logger,
            rng=seeded_rng,
        )

        assert backoff.max_backoff == DEFAULT_RETRY_MAX_BACKOFF
        assert not math.isnan(backoff(3, 3))
        assert backoff(10, 3) == DEFAULT_RETRY_MAX_BACKOFF

    def test_infinite_max_backoff_uses_default(self, recording_logger, seeded_rng):
        """An infinite cap would leave delays unbounded and is replaced."""
        backoff = make_exponential_backoff(
            0.1,
            math.inf,
            logger=recording_logger,
            rng=seeded_rng,
        )

        assert backoff.max_backoff == DEFAULT_RETRY_MAX_BACKOFF
        assert backoff(10_000, 3) == DEFAULT_RETRY_MAX_BACKOFF

    def test_infinite_base_clamped_to_max(self, recording_logger):
        """An infinite base is clamped to max_backoff with a warning."""
        backoff = make_exponential_backoff(math.inf, 2.0, logger=recording_logger)

        assert backoff.base == 2.0
        assert backoff(0, 3) == 2.0
        assert len(recording_logger.entries) == 1

    def test_clamp_after_max_defaulted(self, recording_logger):
        """A base above the default max should be clamped to it."""
        backoff = make_exponential_backoff(5.0, 0, logger=recording_logger)

        assert backoff.base == DEFAULT_RETRY_MAX_BACKOFF
        assert len(recording_logger.entries) == 1

    def test_clamp_warning_written_without_injected_logger(self, capsys):
        """Without a logger the warning goes to the default stream."""
        make_exponential_backoff(2.0, 1.0)

        captured = capsys.readouterr()
        assert "WARN" in captured.err
        assert "Backoff is greater than max backoff" in captured.err

    def test_calls_do_not_log(self, recording_logger, seeded_rng):
        """The warning is only written at construction time."""
        backoff = make_exponential_backoff(
            2.0,
            1.0,
            logger=recording_logger,
            rng=seeded_rng,
        )

        for retries in range(5):
            backoff(retries, 5)

        assert len(recording_logger.entries) == 1

    def test_repr(self):
        """repr should show the effective parameters."""
        backoff = make_exponential_backoff(0.1, 1.0)
        assert repr(backoff) == "ExponentialBackoff(base=0.1, max_backoff=1.0)"


class TestBackoffCompute:
    """Test delay calculation."""

    def test_zero_retries_returns_base(self, exploding_rng):
        """retries=0 returns exactly base without drawing jitter."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=exploding_rng)

        assert backoff(0, 3) == 0.1

    def test_negative_retries_returns_base(self, exploding_rng):
        """Negative retries are treated like zero."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=exploding_rng)

        assert backoff(-4, 3) == 0.1

    def test_clamped_policy_zero_retries(self, recording_logger):
        """A clamped policy returns max_backoff for retries=0."""
        backoff = make_exponential_backoff(2.0, 1.0, logger=recording_logger)

        assert backoff(0, 3) == 1.0

    def test_first_retry_within_jitter_range(self, seeded_rng):
        """retries=1 returns base jittered into [80ms, 120ms]."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=seeded_rng)

        for _ in range(1000):
            delay = backoff(1, 3)
            assert 0.08 <= delay <= 0.12

    def test_jitter_range_endpoints(self, lower_jitter_rng, upper_jitter_rng):
        """The jitter factor spans exactly 0.8 to 1.2."""
        low = make_exponential_backoff(0.1, 1.0, rng=lower_jitter_rng)
        high = make_exponential_backoff(0.1, 1.0, rng=upper_jitter_rng)

        assert low(1, 3) == pytest.approx(0.08)
        assert high(1, 3) == pytest.approx(0.12)
        assert low(3, 3) == pytest.approx(0.32)
        assert high(3, 3) == pytest.approx(0.48)

    def test_delay_doubles_per_retry(self, lower_jitter_rng):
        """With fixed jitter each retry doubles the delay until the cap."""
        backoff = make_exponential_backoff(0.1, 100.0, rng=lower_jitter_rng)

        delays = [backoff(retries, 10) for retries in range(1, 8)]
        for previous, current in zip(delays, delays[1:]):
            assert current == pytest.approx(previous * 2)

    def test_large_retries_clamped_to_max(self, seeded_rng):
        """retries=10 is far beyond the cap and returns exactly max."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=seeded_rng)

        for _ in range(100):
            assert backoff(10, 3) == 1.0

    def test_huge_retries_do_not_overflow(self, seeded_rng):
        """Very large retry counts still return max_backoff."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=seeded_rng)

        assert backoff(10_000, 3) == 1.0
        assert backoff(2**40, 3) == 1.0

    def test_never_exceeds_max_or_goes_negative(self, seeded_rng):
        """Every delay is within [0, max_backoff]."""
        backoff = make_exponential_backoff(0.05, 2.0, rng=seeded_rng)

        for retries in range(-2, 64):
            delay = backoff(retries, 64)
            assert 0 <= delay <= 2.0

    def test_max_retries_does_not_affect_delay(
        self,
        lower_jitter_rng,
    ):
        """max_retries is accepted but ignored."""
        backoff = make_exponential_backoff(0.1, 10.0, rng=lower_jitter_rng)

        assert backoff(3, 0) == backoff(3, 3) == backoff(3, 1000)

    def test_compute_matches_call(self, lower_jitter_rng):
        """compute() and calling the policy are the same operation."""
        backoff = make_exponential_backoff(0.1, 10.0, rng=lower_jitter_rng)

        assert backoff.compute(4, 5) == backoff(4, 5)

    def test_seeded_rng_is_deterministic(self):
        """The same seed yields the same jittered delays."""
        first = make_exponential_backoff(0.1, 10.0, rng=random.Random(7))
        second = make_exponential_backoff(0.1, 10.0, rng=random.Random(7))

        assert [first(n, 5) for n in range(1, 6)] == [second(n, 5) for n in range(1, 6)]


class TestBackoffConcurrency:
    """Test sharing one policy between threads."""

    def test_shared_policy_across_threads(self, seeded_rng):
        """Concurrent callers all receive bounded delays."""
        backoff = make_exponential_backoff(0.1, 1.0, rng=seeded_rng)

        def compute_many(retries: int) -> list[float]:
            return [backoff(retries, 10) for _ in range(200)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(compute_many, range(0, 16)))

        for retries, delays in enumerate(results):
            for delay in delays:
                if retries == 0:
                    assert delay == 0.1
                else:
                    assert 0.08 <= delay <= 1.0
