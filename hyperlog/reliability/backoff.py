"""
Exponential Retry Backoff with Jitter (KIP-580).

Computes how long to wait before resubmitting a failed request:

    min(max_backoff, base * 2^(retries - 1) * random(0.8, 1.2))

Deciding whether to retry at all, and sleeping the returned delay, is
left to the caller.
"""

import math
import random

from hyperlog.logging import (
    LoggerProtocol,
    LoggerStream,
    RetryBackoffClamped,
)


DEFAULT_RETRY_BACKOFF = 0.1  # seconds
DEFAULT_RETRY_MAX_BACKOFF = 1.0  # seconds

JITTER_MIN = 0.8
JITTER_MAX = 1.2

# Beyond this the exponential term exceeds any usable max_backoff while
# still fitting in a float.
_MAX_EXPONENT = 1000


class ExponentialBackoff:
    """
    Backoff policy over a fixed base and maximum delay.

    Instances are callables ``(retries, max_retries) -> seconds`` and hold
    no state between calls, so one instance can be shared by any number
    of retrying callers.

    Example usage:
        backoff = make_exponential_backoff(0.1, 2.0)

        delay = backoff(attempt, max_retries)
        await asyncio.sleep(delay)
    """

    __slots__ = ("_base", "_max_backoff", "_rng")

    def __init__(
        self,
        base: float,
        max_backoff: float,
        logger: LoggerProtocol | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not base > 0:
            base = DEFAULT_RETRY_BACKOFF

        if not 0 < max_backoff < math.inf:
            max_backoff = DEFAULT_RETRY_MAX_BACKOFF

        if base > max_backoff:
            if logger is None:
                logger = LoggerStream(name="backoff")

            logger.log(
                RetryBackoffClamped(
                    message="Backoff is greater than max backoff, using max backoff instead",
                    base=base,
                    max_backoff=max_backoff,
                )
            )

            base = max_backoff

        if rng is None:
            rng = random.Random()

        self._base = base
        self._max_backoff = max_backoff
        self._rng = rng

    @property
    def base(self) -> float:
        return self._base

    @property
    def max_backoff(self) -> float:
        return self._max_backoff

    def compute(self, retries: int, max_retries: int) -> float:
        """
        Calculate the delay before the next retry.

        Args:
            retries: Number of failed attempts so far. Zero or less returns
                the base delay without growth or jitter.
            max_retries: The caller's retry limit. Accepted for signature
                compatibility; it does not affect the delay.

        Returns:
            Delay in seconds, never greater than max_backoff.
        """
        if retries <= 0:
            return self._base

        calculated = math.ldexp(self._base, min(retries - 1, _MAX_EXPONENT))
        calculated *= self._rng.uniform(JITTER_MIN, JITTER_MAX)

        return min(calculated, self._max_backoff)

    __call__ = compute

    def __repr__(self) -> str:
        return f"ExponentialBackoff(base={self._base}, max_backoff={self._max_backoff})"


def make_exponential_backoff(
    base: float,
    max_backoff: float,
    logger: LoggerProtocol | None = None,
    rng: random.Random | None = None,
) -> ExponentialBackoff:
    """
    Create a KIP-580 backoff function.

    Args:
        base: Initial delay in seconds. Non-positive or NaN values use
            DEFAULT_RETRY_BACKOFF.
        max_backoff: Delay cap in seconds. Non-positive, NaN or infinite
            values use DEFAULT_RETRY_MAX_BACKOFF.
        logger: Receives the warning written when base exceeds max_backoff.
        rng: Source of jitter. A fresh random.Random() when omitted.

    Returns:
        Callable ``(retries, max_retries) -> seconds``.
    """
    return ExponentialBackoff(
        base,
        max_backoff,
        logger=logger,
        rng=rng,
    )
