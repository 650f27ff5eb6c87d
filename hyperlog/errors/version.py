"""
Version-related exceptions for the hyperlog client.
"""


class InvalidVersionFormat(ValueError):
    """
    Raised when a broker version string does not match either the
    pre-1.0 (``0.11.0.3``) or post-1.0 (``2.8.1``) grammar.

    parse_version() returns this error alongside DEFAULT_VERSION rather
    than raising it, so callers that ignore the error still get a usable
    version.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid version `{value}`")
