"""
Broker Version.

An opaque, totally ordered version value identifying a broker release.
The client compares its configured broker version against the release
that introduced a protocol feature to decide which request/response
variants it may speak.

Key concepts:
- BrokerVersion: (major, minor, patch_family, patch) ordered tuple
- Versions are only created by this package (named release constants
  and parse_version()), never by literal construction
- Pre-1.0 releases carry four components (0.11.0.3), post-1.0 releases
  carry three (2.8.1) and keep patch at zero
"""

from dataclasses import dataclass, field


# Only _make_version() holds this key, so BrokerVersion(...) called
# from outside the package is rejected.
_FACTORY_KEY = object()


@dataclass(slots=True, frozen=True, order=True)
class BrokerVersion:
    """
    Version of an upstream broker release.

    Ordering, equality and hashing follow the components from most to
    least significant, so versions sort and can key dicts and sets.

    Attributes:
        components: (major, minor, patch_family, patch).
    """

    components: tuple[int, int, int, int]
    _key: object = field(default=None, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if self._key is not _FACTORY_KEY:
            raise TypeError(
                "BrokerVersion cannot be constructed directly, use the "
                "named release constants or parse_version()"
            )

        if len(self.components) != 4 or not all(
            isinstance(component, int)
            and not isinstance(component, bool)
            and component >= 0
            for component in self.components
        ):
            raise ValueError(
                f"BrokerVersion requires four non-negative integers, got {self.components!r}"
            )

    @property
    def major(self) -> int:
        return self.components[0]

    @property
    def minor(self) -> int:
        return self.components[1]

    @property
    def patch_family(self) -> int:
        return self.components[2]

    @property
    def patch(self) -> int:
        return self.components[3]

    def is_at_least(self, other: "BrokerVersion") -> bool:
        """
        Check if this version is greater than or equal to another.

            V1_0_0_0.is_at_least(V2_0_0_0)  # False
            V2_0_0_0.is_at_least(V1_0_0_0)  # True
            V2_0_0_0.is_at_least(V2_0_0_0)  # True

        Args:
            other: The version to compare against.

        Returns:
            True if this version is the same release or a newer one.
        """
        for ours, theirs in zip(self.components, other.components):
            if ours > theirs:
                return True

            elif ours < theirs:
                return False

        return True

    def __str__(self) -> str:
        major, minor, patch_family, patch = self.components

        if major == 0:
            return f"0.{minor}.{patch_family}.{patch}"

        return f"{major}.{minor}.{patch_family}"

    def __repr__(self) -> str:
        return "BrokerVersion({}, {}, {}, {})".format(*self.components)


def _make_version(
    major: int,
    minor: int,
    patch_family: int,
    patch: int,
) -> BrokerVersion:
    return BrokerVersion(
        (major, minor, patch_family, patch),
        _key=_FACTORY_KEY,
    )


def is_at_least(version: BrokerVersion, other: BrokerVersion) -> bool:
    """Check if ``version`` is the same release as ``other`` or newer."""
    return version.is_at_least(other)
