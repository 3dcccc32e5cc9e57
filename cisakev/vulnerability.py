"""A single entry of the KEV catalog."""

import datetime as dt
from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import MalformedJSONError
from .parsers import parse_date, parse_known_ransomware, require


@dataclass(frozen=True)
class Vulnerability:
    """One known-exploited vulnerability.

    Attributes:
        cve_id: The CVE identifier (e.g., CVE-2024-12345).
        vendor_project: Vendor or project name.
        product: Affected product.
        vulnerability_name: Short vulnerability title.
        date_added: Date the entry was added to the catalog.
        short_description: One-paragraph description.
        required_action: Remediation required of federal agencies.
        due_date: Remediation deadline.
        known_ransomware_campaign_use: True when CISA lists the entry as
            ``"Known"`` to be used in ransomware campaigns.
        notes: Free-form notes, usually reference URLs; may be empty.
    """

    cve_id: str
    vendor_project: str
    product: str
    vulnerability_name: str
    date_added: dt.date
    short_description: str
    required_action: str
    due_date: dt.date
    known_ransomware_campaign_use: bool
    notes: str

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Vulnerability":
        """Build a vulnerability from one element of the feed's array.

        Args:
            obj: Decoded JSON object with camelCase keys.

        Returns:
            A new ``Vulnerability``.

        Raises:
            MalformedJSONError: if ``obj`` is not a JSON object.
            MissingFieldError: if any required key is absent.
            MalformedDateError: if ``dateAdded`` or ``dueDate`` is unparsable.
        """
        if not isinstance(obj, Mapping):
            raise MalformedJSONError(f"vulnerability entry must be an object, got {type(obj).__name__}")

        return cls(
            cve_id=require(obj, "cveID"),
            vendor_project=require(obj, "vendorProject"),
            product=require(obj, "product"),
            vulnerability_name=require(obj, "vulnerabilityName"),
            date_added=parse_date(require(obj, "dateAdded"), "dateAdded"),
            short_description=require(obj, "shortDescription"),
            required_action=require(obj, "requiredAction"),
            due_date=parse_date(require(obj, "dueDate"), "dueDate"),
            known_ransomware_campaign_use=parse_known_ransomware(require(obj, "knownRansomwareCampaignUse")),
            notes=require(obj, "notes"),
        )

    def __str__(self) -> str:
        return self.cve_id
