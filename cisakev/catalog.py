"""The parsed CISA Known Exploited Vulnerabilities catalog.

Example::

    catalog = Catalog.load()
    ransomware = sorted(
        (v for v in catalog if v.known_ransomware_campaign_use),
        key=lambda v: v.date_added,
    )
"""

import datetime as dt
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator

import requests

from .config import ClientConfig
from .downloaders import CISA_KEV_URL, fetch_text, read_text, requests_session
from .exceptions import MalformedJSONError, MissingFieldError
from .parsers import parse_count, parse_timestamp, require
from .vulnerability import Vulnerability


@dataclass(frozen=True)
class Catalog:
    """One snapshot of the KEV feed.

    Attributes:
        title: Catalog title.
        catalog_version: Opaque version string.
        date_released: When the catalog was last updated.
        count: Entry count as declared by the feed. Not checked against
            ``len(vulnerabilities)``.
        vulnerabilities: Entries in feed order.
    """

    title: str
    catalog_version: str
    date_released: dt.datetime
    count: int
    vulnerabilities: tuple[Vulnerability, ...] = ()

    URL = CISA_KEV_URL

    def __post_init__(self) -> None:
        if not isinstance(self.vulnerabilities, tuple):
            object.__setattr__(self, "vulnerabilities", tuple(self.vulnerabilities))

    @property
    def version(self) -> str:
        return self.catalog_version

    @property
    def vulns(self) -> tuple[Vulnerability, ...]:
        return self.vulnerabilities

    @property
    def size(self) -> int:
        return self.count

    @property
    def length(self) -> int:
        return self.count

    @classmethod
    def request(
        cls,
        session: requests.Session | None = None,
        config: ClientConfig | None = None,
    ) -> str:
        """Download the raw catalog JSON.

        Args:
            session: Optional session to reuse; one is created and closed
                otherwise.
            config: Transport settings; defaults to ``ClientConfig()``.

        Returns:
            The response body.

        Raises:
            requests.RequestException: on any transport failure.
        """
        config = config or ClientConfig()
        if session is not None:
            return fetch_text(session, config.url, config.timeout, config.retries)
        with requests_session(config.user_agent) as s:
            return fetch_text(s, config.url, config.timeout, config.retries)

    @classmethod
    def load(
        cls,
        session: requests.Session | None = None,
        config: ClientConfig | None = None,
    ) -> "Catalog":
        """Download and parse the current catalog.

        Note:
            Performs an HTTP request to the configured URL.
        """
        return cls.parse(cls.request(session=session, config=config))

    @classmethod
    def open(cls, path: str | Path) -> "Catalog":
        """Parse a previously downloaded catalog file.

        Raises:
            FileNotFoundError: if the file doesn't exist.
        """
        return cls.parse(read_text(path))

    @classmethod
    def parse(cls, contents: str | bytes) -> "Catalog":
        """Parse the catalog JSON.

        Args:
            contents: The complete JSON document.

        Returns:
            A fully built ``Catalog``.

        Raises:
            MalformedJSONError: if ``contents`` is not a JSON object, or
                ``vulnerabilities`` is not an array.
            MissingFieldError: if a required key is missing; entry-level
                errors carry the entry index.
            MalformedDateError: if a date or timestamp is unparsable.
            MalformedCountError: if ``count`` is not an integer.
        """
        try:
            data = json.loads(contents)
        except ValueError as exc:
            raise MalformedJSONError(f"catalog is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedJSONError(f"catalog must be a JSON object, got {type(data).__name__}")

        title = require(data, "title")
        catalog_version = require(data, "catalogVersion")
        date_released = parse_timestamp(require(data, "dateReleased"), "dateReleased")
        count = parse_count(require(data, "count"))

        entries = require(data, "vulnerabilities")
        if not isinstance(entries, list):
            raise MalformedJSONError("'vulnerabilities' must be a JSON array")

        vulnerabilities = []
        for i, entry in enumerate(entries):
            try:
                vulnerabilities.append(Vulnerability.from_json(entry))
            except MissingFieldError as exc:
                raise exc.with_index(i) from None

        return cls(
            title=title,
            catalog_version=catalog_version,
            date_released=date_released,
            count=count,
            vulnerabilities=tuple(vulnerabilities),
        )

    def each(self, visitor: Callable[[Vulnerability], Any] | None = None) -> Iterable[Vulnerability] | None:
        """Enumerate the vulnerabilities in feed order.

        Args:
            visitor: Called once per vulnerability when given.

        Returns:
            ``None`` when a visitor is given, otherwise the ordered entries,
            which can be iterated any number of times.
        """
        if visitor is None:
            return self.vulnerabilities
        for vuln in self.vulnerabilities:
            visitor(vuln)
        return None

    def __iter__(self) -> Iterator[Vulnerability]:
        return iter(self.vulnerabilities)

    def to_text(self) -> str:
        """Return the title and release time, e.g. ``"Title (2024-03-26 ...)"``."""
        return f"{self.title} ({self.date_released})"

    def __str__(self) -> str:
        return self.to_text()
