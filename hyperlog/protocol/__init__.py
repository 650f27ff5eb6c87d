"""
Protocol module for broker communication.

This module provides:
- Broker versions and the released version registry
- Version string parsing and formatting
- Feature gates keyed on broker version
"""

from hyperlog.protocol.version import (
    BrokerVersion as BrokerVersion,
    is_at_least as is_at_least,
)
from hyperlog.protocol.parser import parse_version as parse_version
from hyperlog.protocol.features import (
    FEATURE_VERSIONS as FEATURE_VERSIONS,
    get_all_features as get_all_features,
    get_features_for_version as get_features_for_version,
    supports_feature as supports_feature,
)
from hyperlog.protocol.releases import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    MIN_VERSION as MIN_VERSION,
    MAX_VERSION as MAX_VERSION,
    DEFAULT_VERSION as DEFAULT_VERSION,
    V0_8_2_0 as V0_8_2_0,
    V0_8_2_1 as V0_8_2_1,
    V0_8_2_2 as V0_8_2_2,
    V0_9_0_0 as V0_9_0_0,
    V0_9_0_1 as V0_9_0_1,
    V0_10_0_0 as V0_10_0_0,
    V0_10_0_1 as V0_10_0_1,
    V0_10_1_0 as V0_10_1_0,
    V0_10_1_1 as V0_10_1_1,
    V0_10_2_0 as V0_10_2_0,
    V0_10_2_1 as V0_10_2_1,
    V0_10_2_2 as V0_10_2_2,
    V0_11_0_0 as V0_11_0_0,
    V0_11_0_1 as V0_11_0_1,
    V0_11_0_2 as V0_11_0_2,
    V1_0_0_0 as V1_0_0_0,
    V1_0_1_0 as V1_0_1_0,
    V1_0_2_0 as V1_0_2_0,
    V1_1_0_0 as V1_1_0_0,
    V1_1_1_0 as V1_1_1_0,
    V2_0_0_0 as V2_0_0_0,
    V2_0_1_0 as V2_0_1_0,
    V2_1_0_0 as V2_1_0_0,
    V2_1_1_0 as V2_1_1_0,
    V2_2_0_0 as V2_2_0_0,
    V2_2_1_0 as V2_2_1_0,
    V2_2_2_0 as V2_2_2_0,
    V2_3_0_0 as V2_3_0_0,
    V2_3_1_0 as V2_3_1_0,
    V2_4_0_0 as V2_4_0_0,
    V2_4_1_0 as V2_4_1_0,
    V2_5_0_0 as V2_5_0_0,
    V2_5_1_0 as V2_5_1_0,
    V2_6_0_0 as V2_6_0_0,
    V2_6_1_0 as V2_6_1_0,
    V2_6_2_0 as V2_6_2_0,
    V2_6_3_0 as V2_6_3_0,
    V2_7_0_0 as V2_7_0_0,
    V2_7_1_0 as V2_7_1_0,
    V2_7_2_0 as V2_7_2_0,
    V2_8_0_0 as V2_8_0_0,
    V2_8_1_0 as V2_8_1_0,
    V2_8_2_0 as V2_8_2_0,
    V3_0_0_0 as V3_0_0_0,
    V3_0_1_0 as V3_0_1_0,
    V3_0_2_0 as V3_0_2_0,
    V3_1_0_0 as V3_1_0_0,
    V3_1_1_0 as V3_1_1_0,
    V3_1_2_0 as V3_1_2_0,
    V3_2_0_0 as V3_2_0_0,
    V3_2_1_0 as V3_2_1_0,
    V3_2_2_0 as V3_2_2_0,
    V3_2_3_0 as V3_2_3_0,
    V3_3_0_0 as V3_3_0_0,
    V3_3_1_0 as V3_3_1_0,
    V3_3_2_0 as V3_3_2_0,
    V3_4_0_0 as V3_4_0_0,
    V3_4_1_0 as V3_4_1_0,
    V3_5_0_0 as V3_5_0_0,
    V3_5_1_0 as V3_5_1_0,
    V3_5_2_0 as V3_5_2_0,
    V3_6_0_0 as V3_6_0_0,
    V3_6_1_0 as V3_6_1_0,
    V3_6_2_0 as V3_6_2_0,
    V3_7_0_0 as V3_7_0_0,
    V3_7_1_0 as V3_7_1_0,
    V3_7_2_0 as V3_7_2_0,
    V3_8_0_0 as V3_8_0_0,
    V3_8_1_0 as V3_8_1_0,
    V3_9_0_0 as V3_9_0_0,
    V4_0_0_0 as V4_0_0_0,
)
