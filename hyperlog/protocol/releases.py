"""
Released broker versions.

Every broker release the client knows how to speak to, as named
constants, plus the supported range and the default used when no
(or an unparseable) broker version is configured.
"""

from .version import BrokerVersion, _make_version


V0_8_2_0 = _make_version(0, 8, 2, 0)
V0_8_2_1 = _make_version(0, 8, 2, 1)
V0_8_2_2 = _make_version(0, 8, 2, 2)
V0_9_0_0 = _make_version(0, 9, 0, 0)
V0_9_0_1 = _make_version(0, 9, 0, 1)
V0_10_0_0 = _make_version(0, 10, 0, 0)
V0_10_0_1 = _make_version(0, 10, 0, 1)
V0_10_1_0 = _make_version(0, 10, 1, 0)
V0_10_1_1 = _make_version(0, 10, 1, 1)
V0_10_2_0 = _make_version(0, 10, 2, 0)
V0_10_2_1 = _make_version(0, 10, 2, 1)
V0_10_2_2 = _make_version(0, 10, 2, 2)
V0_11_0_0 = _make_version(0, 11, 0, 0)
V0_11_0_1 = _make_version(0, 11, 0, 1)
V0_11_0_2 = _make_version(0, 11, 0, 2)
V1_0_0_0 = _make_version(1, 0, 0, 0)
V1_0_1_0 = _make_version(1, 0, 1, 0)
V1_0_2_0 = _make_version(1, 0, 2, 0)
V1_1_0_0 = _make_version(1, 1, 0, 0)
V1_1_1_0 = _make_version(1, 1, 1, 0)
V2_0_0_0 = _make_version(2, 0, 0, 0)
V2_0_1_0 = _make_version(2, 0, 1, 0)
V2_1_0_0 = _make_version(2, 1, 0, 0)
V2_1_1_0 = _make_version(2, 1, 1, 0)
V2_2_0_0 = _make_version(2, 2, 0, 0)
V2_2_1_0 = _make_version(2, 2, 1, 0)
V2_2_2_0 = _make_version(2, 2, 2, 0)
V2_3_0_0 = _make_version(2, 3, 0, 0)
V2_3_1_0 = _make_version(2, 3, 1, 0)
V2_4_0_0 = _make_version(2, 4, 0, 0)
V2_4_1_0 = _make_version(2, 4, 1, 0)
V2_5_0_0 = _make_version(2, 5, 0, 0)
V2_5_1_0 = _make_version(2, 5, 1, 0)
V2_6_0_0 = _make_version(2, 6, 0, 0)
V2_6_1_0 = _make_version(2, 6, 1, 0)
V2_6_2_0 = _make_version(2, 6, 2, 0)
V2_6_3_0 = _make_version(2, 6, 3, 0)
V2_7_0_0 = _make_version(2, 7, 0, 0)
V2_7_1_0 = _make_version(2, 7, 1, 0)
V2_7_2_0 = _make_version(2, 7, 2, 0)
V2_8_0_0 = _make_version(2, 8, 0, 0)
V2_8_1_0 = _make_version(2, 8, 1, 0)
V2_8_2_0 = _make_version(2, 8, 2, 0)
V3_0_0_0 = _make_version(3, 0, 0, 0)
V3_0_1_0 = _make_version(3, 0, 1, 0)
V3_0_2_0 = _make_version(3, 0, 2, 0)
V3_1_0_0 = _make_version(3, 1, 0, 0)
V3_1_1_0 = _make_version(3, 1, 1, 0)
V3_1_2_0 = _make_version(3, 1, 2, 0)
V3_2_0_0 = _make_version(3, 2, 0, 0)
V3_2_1_0 = _make_version(3, 2, 1, 0)
V3_2_2_0 = _make_version(3, 2, 2, 0)
V3_2_3_0 = _make_version(3, 2, 3, 0)
V3_3_0_0 = _make_version(3, 3, 0, 0)
V3_3_1_0 = _make_version(3, 3, 1, 0)
V3_3_2_0 = _make_version(3, 3, 2, 0)
V3_4_0_0 = _make_version(3, 4, 0, 0)
V3_4_1_0 = _make_version(3, 4, 1, 0)
V3_5_0_0 = _make_version(3, 5, 0, 0)
V3_5_1_0 = _make_version(3, 5, 1, 0)
V3_5_2_0 = _make_version(3, 5, 2, 0)
V3_6_0_0 = _make_version(3, 6, 0, 0)
V3_6_1_0 = _make_version(3, 6, 1, 0)
V3_6_2_0 = _make_version(3, 6, 2, 0)
V3_7_0_0 = _make_version(3, 7, 0, 0)
V3_7_1_0 = _make_version(3, 7, 1, 0)
V3_7_2_0 = _make_version(3, 7, 2, 0)
V3_8_0_0 = _make_version(3, 8, 0, 0)
V3_8_1_0 = _make_version(3, 8, 1, 0)
V3_9_0_0 = _make_version(3, 9, 0, 0)
V4_0_0_0 = _make_version(4, 0, 0, 0)


SUPPORTED_VERSIONS: tuple[BrokerVersion, ...] = (
    V0_8_2_0,
    V0_8_2_1,
    V0_8_2_2,
    V0_9_0_0,
    V0_9_0_1,
    V0_10_0_0,
    V0_10_0_1,
    V0_10_1_0,
    V0_10_1_1,
    V0_10_2_0,
    V0_10_2_1,
    V0_10_2_2,
    V0_11_0_0,
    V0_11_0_1,
    V0_11_0_2,
    V1_0_0_0,
    V1_0_1_0,
    V1_0_2_0,
    V1_1_0_0,
    V1_1_1_0,
    V2_0_0_0,
    V2_0_1_0,
    V2_1_0_0,
    V2_1_1_0,
    V2_2_0_0,
    V2_2_1_0,
    V2_2_2_0,
    V2_3_0_0,
    V2_3_1_0,
    V2_4_0_0,
    V2_4_1_0,
    V2_5_0_0,
    V2_5_1_0,
    V2_6_0_0,
    V2_6_1_0,
    V2_6_2_0,
    V2_6_3_0,
    V2_7_0_0,
    V2_7_1_0,
    V2_7_2_0,
    V2_8_0_0,
    V2_8_1_0,
    V2_8_2_0,
    V3_0_0_0,
    V3_0_1_0,
    V3_0_2_0,
    V3_1_0_0,
    V3_1_1_0,
    V3_1_2_0,
    V3_2_0_0,
    V3_2_1_0,
    V3_2_2_0,
    V3_2_3_0,
    V3_3_0_0,
    V3_3_1_0,
    V3_3_2_0,
    V3_4_0_0,
    V3_4_1_0,
    V3_5_0_0,
    V3_5_1_0,
    V3_5_2_0,
    V3_6_0_0,
    V3_6_1_0,
    V3_6_2_0,
    V3_7_0_0,
    V3_7_1_0,
    V3_7_2_0,
    V3_8_0_0,
    V3_8_1_0,
    V3_9_0_0,
    V4_0_0_0,
)

MIN_VERSION = V0_8_2_0
MAX_VERSION = V4_0_0_0
DEFAULT_VERSION = V2_1_0_0
