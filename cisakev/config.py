"""Client configuration using Pydantic.

Controls where the feed is fetched from and how patient the transport
is. Parsing itself has no configuration.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .downloaders import CISA_KEV_URL, DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT


class ClientConfig(BaseModel):
    """Validated transport configuration.

    Example YAML::

        url: https://mirror.example.org/known_exploited_vulnerabilities.json
        connect_timeout: 5
        read_timeout: 60
        retries: 3

    Attributes:
        url: Feed location.
        connect_timeout: Seconds to wait for the TCP/TLS handshake.
        read_timeout: Seconds to wait for the response body.
        retries: Total attempts per request; ``1`` means no retry.
        user_agent: ``User-Agent`` header sent with the request.
    """

    url: str = CISA_KEV_URL
    connect_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT[0], gt=0.0)
    read_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT[1], gt=0.0)
    retries: int = Field(default=1, ge=1, le=10)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must be an http(s) URL")
        return v

    @property
    def timeout(self) -> tuple[float, float]:
        """``(connect, read)`` tuple as accepted by ``requests``."""
        return (self.connect_timeout, self.read_timeout)


def load_config(path: Path) -> ClientConfig:
    """Load client configuration from a YAML or JSON file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated ``ClientConfig`` instance.

    Raises:
        FileNotFoundError: if the file doesn't exist.
        pydantic.ValidationError: if content fails validation.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    raw: Any
    if suffix in (".yaml", ".yml"):
        raw = yaml.safe_load(content) or {}
    elif suffix == ".json":
        raw = json.loads(content)
    else:
        try:
            raw = yaml.safe_load(content) or {}
        except yaml.YAMLError:
            raw = json.loads(content)

    return ClientConfig.model_validate(raw)


def find_config() -> Path | None:
    """Find a configuration file in the working directory.

    Returns:
        Path of the first existing ``cisakev.yaml``, ``cisakev.yml`` or
        ``cisakev.json``, or ``None``.
    """
    for name in ("cisakev.yaml", "cisakev.yml", "cisakev.json"):
        if Path(name).exists():
            return Path(name)
    return None
