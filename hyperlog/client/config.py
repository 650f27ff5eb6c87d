"""
Client configuration for the hyperlog client.

Resolves environment settings into the broker version the client speaks
and the backoff policy it waits on between retries.
"""

import random
from dataclasses import dataclass

from hyperlog.env import Env, load_env
from hyperlog.logging import (
    BrokerVersionFallback,
    LoggerProtocol,
    LoggerStream,
    LoggingConfig,
)
from hyperlog.protocol import BrokerVersion, parse_version, supports_feature
from hyperlog.reliability import ExponentialBackoff, make_exponential_backoff


@dataclass(slots=True)
class ClientConfig:
    """
    Configuration for a hyperlog client.

    Attributes:
        broker_version: Version of the brokers the client talks to.
        backoff: Delay policy used between retries.
        max_retries: Retry limit handed to the backoff policy.
    """

    broker_version: BrokerVersion
    backoff: ExponentialBackoff
    max_retries: int = 3

    def supports(self, feature: str) -> bool:
        """Check if the configured broker version provides a feature."""
        return supports_feature(self.broker_version, feature)

    def retry_delay(self, retries: int) -> float:
        """Delay in seconds before resubmitting after ``retries`` failures."""
        return self.backoff(retries, self.max_retries)


def create_client_config(
    env: Env | None = None,
    logger: LoggerProtocol | None = None,
    rng: random.Random | None = None,
) -> ClientConfig:
    """
    Create client configuration from environment settings.

    An unparseable broker version is not fatal: a warning is logged and
    the default version is used instead.

    Args:
        env: Settings to use. Loaded with load_env() when omitted.
        logger: Receives configuration warnings.
        rng: Source of backoff jitter.

    Returns:
        Resolved ClientConfig.
    """
    if env is None:
        env = load_env(Env)

    LoggingConfig().update(
        log_level=env.HYPERLOG_LOG_LEVEL,
        log_output=env.HYPERLOG_LOG_OUTPUT,
    )

    if logger is None:
        logger = LoggerStream(name="client")

    broker_version, error = parse_version(env.HYPERLOG_BROKER_VERSION)
    if error is not None:
        logger.log(
            BrokerVersionFallback(
                message=f"{error}, falling back to {broker_version}",
                value=error.value,
                fallback=str(broker_version),
            )
        )

    retry_config = env.get_retry_config()

    return ClientConfig(
        broker_version=broker_version,
        backoff=make_exponential_backoff(
            retry_config["base"],
            retry_config["max_backoff"],
            logger=logger,
            rng=rng,
        ),
        max_retries=retry_config["max_retries"],
    )
