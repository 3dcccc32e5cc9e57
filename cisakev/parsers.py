"""Field coercion helpers for the KEV feed.

Pure functions that turn raw JSON scalars into typed values.
No I/O or network calls — all inputs are in-memory data structures.
"""

import datetime as dt
import re
from typing import Any, Mapping

from .exceptions import MalformedCountError, MalformedDateError, MissingFieldError

# Value of ``knownRansomwareCampaignUse`` that marks ransomware use.
KNOWN_RANSOMWARE_USE = "Known"

_FRACTION_RE = re.compile(r"\.(\d+)")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def require(obj: Mapping[str, Any], key: str) -> Any:
    """Look up a required key.

    Args:
        obj: A decoded JSON object.
        key: The camelCase key to fetch.

    Returns:
        The raw value stored under ``key`` (which may be ``""``).

    Raises:
        MissingFieldError: if ``key`` is absent.
    """
    try:
        return obj[key]
    except KeyError:
        raise MissingFieldError(key) from None


def _to_datetime(text: str) -> dt.datetime:
    # fromisoformat only understands "Z" and six-digit fractions on
    # recent interpreters; the feed emits e.g. "2024-03-26T14:00:11.6316Z".
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text)
    return dt.datetime.fromisoformat(text)


def parse_timestamp(value: Any, key: str = "dateReleased") -> dt.datetime:
    """Parse an ISO-8601 timestamp, keeping its time zone.

    Args:
        value: Raw JSON value.
        key: Source key, reported on failure.

    Returns:
        A ``datetime``; aware when the text carries an offset.

    Raises:
        MalformedDateError: if the value is not a parsable timestamp.
    """
    if not isinstance(value, str) or not value.strip():
        raise MalformedDateError(key, value)
    try:
        return _to_datetime(value.strip())
    except ValueError as exc:
        raise MalformedDateError(key, value) from exc


def parse_date(value: Any, key: str) -> dt.date:
    """Parse a calendar date, dropping any time-of-day or offset.

    Accepts ``YYYY-MM-DD`` as well as full ISO-8601 timestamps.

    Args:
        value: Raw JSON value.
        key: Source key, reported on failure.

    Returns:
        A ``date``.

    Raises:
        MalformedDateError: if the value is not a recognizable date.
    """
    if not isinstance(value, str) or not value.strip():
        raise MalformedDateError(key, value)
    text = value.strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return _to_datetime(text).date()
    except ValueError as exc:
        raise MalformedDateError(key, value) from exc


def parse_count(value: Any) -> int:
    """Normalize the declared entry count to an integer.

    The feed has published ``count`` both as a number and as text.

    Args:
        value: Raw JSON value.

    Returns:
        The count as ``int``.

    Raises:
        MalformedCountError: on booleans, non-numeric text or other types.
    """
    if isinstance(value, bool):
        raise MalformedCountError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    # ASCII digits only; int() alone also takes "1_000" and non-Latin digits.
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise MalformedCountError(value)


def parse_known_ransomware(value: Any) -> bool:
    """Map ``knownRansomwareCampaignUse`` to a boolean.

    ``"Known"`` (exact, case-sensitive) is True. Everything else,
    including ``"Unknown"``, ``""`` and ``"known"``, is False.
    """
    return value == KNOWN_RANSOMWARE_USE
