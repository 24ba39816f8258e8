"""In-memory index of parsed PEN registry entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

from pen.config import DISPLAY_DATE_FORMAT
from pen.identifiers import LeafNumber, resolve_leaf, to_query
from pen.models import Entry, IdentifierPrefix


@dataclass
class Registry:
    """The parsed Private Enterprise Numbers list.

    Header fields are filled in while the first lines are parsed; entries
    are added afterwards. Once parsing returns the registry is only read.
    All lookups are linear scans and return None when nothing matches.
    """

    entries: list[Entry] = field(default_factory=list)
    title: str = ""
    section: str = ""
    source_uri: str = ""
    last_updated: date | None = None
    prefix: IdentifierPrefix | None = None
    parse_time: timedelta = field(default_factory=timedelta)

    @property
    def oid_prefix(self) -> str:
        """Dotted OID prefix, or "" before the header is parsed."""
        return self.prefix.oid if self.prefix else ""

    def __len__(self) -> int:
        return len(self.entries)

    def count(self) -> int:
        """Return the number of stored entries."""
        return len(self.entries)

    def insert(self, entry: Entry) -> bool:
        """Add an entry unless its number is already present.

        Args:
            entry: The entry to add

        Returns:
            True if the entry was added, False for a duplicate
        """
        if self._find_leaf(LeafNumber(entry.number)) is not None:
            return False
        self.entries.append(entry)
        return True

    def _find_leaf(self, query: Any) -> Entry | None:
        number = resolve_leaf(to_query(query), self.oid_prefix)
        if number is None:
            return None
        for entry in self.entries:
            if entry.number == number:
                return entry
        return None

    def find_by_identifier(self, identifier: Any) -> Entry | None:
        """Find an entry by any supported identifier form.

        Accepts a leaf number (int), its decimal text, a dotted OID string,
        a sequence of integer arcs, or an ObjectIdentifier. Sequences must
        carry this registry's OID prefix.

        Args:
            identifier: The identifier to look up

        Returns:
            The matching entry, or None
        """
        return self._find_leaf(identifier)

    def find_by_path(self, path: str) -> Entry | None:
        """Find an entry by its slash-delimited identifier (caseless)."""
        if self.prefix is None:
            return None
        path = path.lower()
        for entry in self.entries:
            if entry.iri(self.prefix).lower() == path:
                return entry
        return None

    def find_by_email(self, address: str) -> Entry | None:
        """Find an entry by email address.

        Matching is caseless and treats "&" (used in the source file to
        obscure addresses) the same as "@".
        """
        address = _normalize_email(address)
        for entry in self.entries:
            for email in entry.emails:
                if _normalize_email(email) == address:
                    return entry
        return None

    def find_by_contact(self, name: str) -> Entry | None:
        """Find an entry by contact name, ignoring case and spaces."""
        name = _normalize_name(name)
        for entry in self.entries:
            if _normalize_name(entry.contact) == name:
                return entry
        return None

    def oid_of(self, entry: Entry) -> str:
        """Return the dotted OID of an entry under this registry's prefix."""
        return entry.oid(self.prefix)

    def iri_of(self, entry: Entry) -> str:
        """Return the path identifier of an entry under this registry's prefix."""
        return entry.iri(self.prefix)

    def uri(self) -> str:
        """Return the source URI text, or "" if none was parsed."""
        return self.source_uri

    def header(self) -> dict[str, dict[str, Any]]:
        """Return the parser and prefix details for display.

        Returns:
            Mapping with "Parser" and "Prefix" sections
        """
        millis = int(self.parse_time.total_seconds() * 1000)
        return {
            "Parser": {
                "Title": self.title,
                "Source": self.uri(),
                "Section": self.section,
                "Entries": self.count(),
                "Duration": f"{millis} ms. (~{millis // 1000} sec.)",
                "LastUpdated": (
                    self.last_updated.strftime(DISPLAY_DATE_FORMAT)
                    if self.last_updated
                    else ""
                ),
            },
            "Prefix": {
                "OID": self.oid_prefix,
                "IRI": self.prefix.iri if self.prefix else "",
                "ASN": f"{{{self.prefix.asn()}}}" if self.prefix else "",
            },
        }


def _normalize_email(address: str) -> str:
    return address.replace("&", "@").lower()


def _normalize_name(name: str) -> str:
    return name.replace(" ", "").lower()
