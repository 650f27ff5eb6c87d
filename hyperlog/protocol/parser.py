"""
Broker version parsing.

Two grammars are accepted, chosen by the leading character:

- Pre-1.0 releases: ``0.<minor>.<patch_family>.<patch>`` (``0.11.0.3``)
- Post-1.0 releases: ``<major>.<minor>.<patch_family>`` (``2.8.1``)
"""

from hyperlog.errors import InvalidVersionFormat

from .releases import DEFAULT_VERSION
from .version import BrokerVersion, _make_version


MIN_VERSION_LENGTH = 5

# Components are unsigned 64-bit integers.
MAX_COMPONENT = 2**64 - 1


def _split_numeric(value: str, field_count: int) -> list[int] | None:
    fields = value.split(".")
    if len(fields) != field_count:
        return None

    if not all(
        len(field) > 0 and field.isascii() and field.isdigit()
        for field in fields
    ):
        return None

    components = [int(field) for field in fields]
    if any(component > MAX_COMPONENT for component in components):
        return None

    return components


def parse_version(value: str) -> tuple[BrokerVersion, InvalidVersionFormat | None]:
    """
    Parse a broker version string.

    Args:
        value: Version text, e.g. ``"0.11.0.3"`` or ``"2.8.1"``.

    Returns:
        (version, None) on success. On failure, (DEFAULT_VERSION, error)
        so that callers ignoring the error still hold a usable version.
    """
    if len(value) < MIN_VERSION_LENGTH:
        return DEFAULT_VERSION, InvalidVersionFormat(value)

    if value[0] == "0":
        fields = _split_numeric(value, 4)
        if fields is None or not value.startswith("0."):
            return DEFAULT_VERSION, InvalidVersionFormat(value)

        _, minor, patch_family, patch = fields
        return _make_version(0, minor, patch_family, patch), None

    fields = _split_numeric(value, 3)
    if fields is None:
        return DEFAULT_VERSION, InvalidVersionFormat(value)

    major, minor, patch_family = fields
    return _make_version(major, minor, patch_family, 0), None
