from .protocol import (
    BrokerVersion as BrokerVersion,
    DEFAULT_VERSION as DEFAULT_VERSION,
    MAX_VERSION as MAX_VERSION,
    MIN_VERSION as MIN_VERSION,
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    is_at_least as is_at_least,
    parse_version as parse_version,
)
from .reliability import (
    ExponentialBackoff as ExponentialBackoff,
    make_exponential_backoff as make_exponential_backoff,
)
