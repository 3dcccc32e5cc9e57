"""Error taxonomy for cisakev.

Everything raised by the parsing layer derives from ``KEVError``.
Network and file errors are not wrapped; ``TransportError`` is a tuple
of their base classes so callers can still write
``except TransportError:``.
"""

from typing import Any

import requests

TransportError = (requests.RequestException, OSError)


class KEVError(Exception):
    """Base class for catalog parsing failures."""


class MalformedJSONError(KEVError, ValueError):
    """The payload is not valid JSON or has the wrong container shape."""


class MissingFieldError(KEVError, KeyError):
    """A required key is absent from the catalog or one of its entries.

    Attributes:
        key: The missing JSON key (camelCase, as it appears in the feed).
        index: Position of the offending entry in ``vulnerabilities``,
            or ``None`` when the key is missing at catalog level.
    """

    def __init__(self, key: str, index: int | None = None):
        self.key = key
        self.index = index
        super().__init__(key)

    def with_index(self, index: int) -> "MissingFieldError":
        """Return a copy of this error tagged with an entry index."""
        return MissingFieldError(self.key, index)

    def __str__(self) -> str:
        if self.index is None:
            return f"missing required field {self.key!r}"
        return f"missing required field {self.key!r} in vulnerabilities[{self.index}]"


class MalformedDateError(KEVError, ValueError):
    """A date or timestamp field could not be parsed.

    Attributes:
        key: The JSON key holding the bad value.
        value: The raw value found in the feed.
    """

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(f"field {key!r} is not a recognizable date: {value!r}")


class MalformedCountError(KEVError, ValueError):
    """The declared ``count`` is neither an integer nor numeric text."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"field 'count' is not an integer: {value!r}")
