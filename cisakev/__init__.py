"""cisakev — typed access to the CISA Known Exploited Vulnerabilities catalog.

Parses the published KEV JSON feed into immutable ``Catalog`` and
``Vulnerability`` values that can be iterated, filtered and sorted.
"""

from .catalog import Catalog
from .config import ClientConfig, find_config, load_config
from .exceptions import (
    KEVError,
    MalformedCountError,
    MalformedDateError,
    MalformedJSONError,
    MissingFieldError,
    TransportError,
)
from .vulnerability import Vulnerability

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ClientConfig",
    "KEVError",
    "MalformedCountError",
    "MalformedDateError",
    "MalformedJSONError",
    "MissingFieldError",
    "TransportError",
    "Vulnerability",
    "find_config",
    "load_config",
]
