"""Transport helpers for the KEV feed.

All network and file I/O is isolated here — the rest of the package
works with in-memory text. Errors from ``requests`` and the filesystem
propagate unchanged.
"""

import logging
from pathlib import Path

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

CISA_KEV_URL = "https://www.cisa.gov/sites/default/files/feeds/known_exploited_vulnerabilities.json"

DEFAULT_HTTP_TIMEOUT = (10.0, 120.0)  # (connect, read)
DEFAULT_USER_AGENT = "cisakev/0.1.0 (+https://www.cisa.gov/known-exploited-vulnerabilities-catalog)"


def requests_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create a requests session with the headers the feed expects.

    No authentication is sent; the feed is public.

    Args:
        user_agent: Value for the ``User-Agent`` header.

    Returns:
        Configured ``requests.Session``.
    """
    s = requests.Session()
    s.headers.update(
        {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
    )
    return s


def _get_text(session: requests.Session, url: str, timeout: tuple[float, float]) -> str:
    logger.debug("GET %s", url)
    r = session.get(url, timeout=timeout)
    r.raise_for_status()
    logger.debug("Received %d bytes from %s", len(r.content), url)
    return r.text


def fetch_text(
    session: requests.Session,
    url: str = CISA_KEV_URL,
    timeout: tuple[float, float] = DEFAULT_HTTP_TIMEOUT,
    retries: int = 1,
) -> str:
    """Fetch a URL and return the response body as text.

    A single attempt is made unless ``retries`` is greater than one, in
    which case ``requests`` errors are retried with exponential backoff
    and the last one is re-raised.

    Args:
        session: Requests session.
        url: URL to fetch.
        timeout: ``(connect, read)`` timeout in seconds.
        retries: Total number of attempts.

    Returns:
        Decoded response body.

    Raises:
        requests.RequestException: on connection, TLS or HTTP status errors.
    """
    if retries <= 1:
        return _get_text(session, url, timeout)

    retrying = Retrying(
        stop=stop_after_attempt(retries),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception_type(requests.RequestException),
        reraise=True,
    )
    return retrying(_get_text, session, url, timeout)


def read_text(path: str | Path) -> str:
    """Read a previously saved feed from disk.

    Args:
        path: File to read.

    Returns:
        File contents decoded as UTF-8.

    Raises:
        FileNotFoundError: if the file doesn't exist.
        PermissionError: if the file can't be read.
    """
    path = Path(path)
    logger.debug("Reading KEV catalog from %s", path)
    return path.read_text(encoding="utf-8")
