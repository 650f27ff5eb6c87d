"""
Protocol feature gates.

Maps protocol features to the first broker release that provides them.
A feature is only used against a broker whose configured version is at
least the release that introduced it.
"""

from .releases import (
    V0_10_0_0,
    V0_11_0_0,
    V1_0_0_0,
    V1_1_0_0,
    V2_1_0_0,
    V2_3_0_0,
    V2_4_0_0,
    V3_7_0_0,
)
from .version import BrokerVersion


# =============================================================================
# Feature Version Map
# =============================================================================

FEATURE_VERSIONS: dict[str, BrokerVersion] = {
    # ApiVersions discovery and SASL handshake (0.10.0)
    "api_versions": V0_10_0_0,
    "sasl_handshake": V0_10_0_0,

    # Message format v2 (0.11.0)
    "record_headers": V0_11_0_0,
    "idempotent_producer": V0_11_0_0,
    "transactions": V0_11_0_0,

    # Admin and fetch improvements
    "create_partitions": V1_0_0_0,
    "fetch_sessions": V1_1_0_0,

    # Compression (2.1.0)
    "zstd_compression": V2_1_0_0,

    # Group membership (2.3.0 - 2.4.0)
    "static_membership": V2_3_0_0,
    "incremental_alter_configs": V2_3_0_0,
    "cooperative_rebalance": V2_4_0_0,

    # KIP-580 exponential retry backoff (3.7.0)
    "exponential_retry_backoff": V3_7_0_0,
}


def supports_feature(version: BrokerVersion, feature: str) -> bool:
    """
    Check if a broker at ``version`` supports a protocol feature.

    Args:
        version: The broker version in use.
        feature: Feature name from FEATURE_VERSIONS.

    Returns:
        True if the feature is known and ``version`` is at least the
        release that introduced it.
    """
    required_version = FEATURE_VERSIONS.get(feature)
    if required_version is None:
        return False

    return version.is_at_least(required_version)


def get_all_features() -> set[str]:
    """Get all defined feature names."""
    return set(FEATURE_VERSIONS.keys())


def get_features_for_version(version: BrokerVersion) -> set[str]:
    """Get all features supported by a specific version."""
    return {
        feature
        for feature, required in FEATURE_VERSIONS.items()
        if version.is_at_least(required)
    }
