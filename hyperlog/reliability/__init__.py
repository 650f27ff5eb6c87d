"""
Reliability module for broker requests.

This module provides:
- KIP-580 exponential retry backoff with jitter
"""

from hyperlog.reliability.backoff import (
    DEFAULT_RETRY_BACKOFF as DEFAULT_RETRY_BACKOFF,
    DEFAULT_RETRY_MAX_BACKOFF as DEFAULT_RETRY_MAX_BACKOFF,
    ExponentialBackoff as ExponentialBackoff,
    make_exponential_backoff as make_exponential_backoff,
)
