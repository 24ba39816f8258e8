"""Data models for the PEN registry."""

from dataclasses import dataclass, field


class PrefixNotSetError(Exception):
    """Raised when an identifier is rendered before the header prefix is known."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(
            f"Cannot build identifier for entry {number}: no identifier prefix parsed"
        )


@dataclass(frozen=True)
class IdentifierPrefix:
    """OID and IRI roots shared by every entry of one registry."""

    oid: str
    """Dotted-numeric form, e.g. 1.3.6.1.4.1"""

    iri: str
    """Slash-delimited form, e.g. /iso/org/dod/internet/private/enterprise"""

    @property
    def arcs(self) -> tuple[int, ...]:
        """Numeric arcs of the OID prefix."""
        return tuple(int(arc) for arc in self.oid.split("."))

    @property
    def names(self) -> tuple[str, ...]:
        """Arc names taken from the IRI prefix."""
        return tuple(name for name in self.iri.split("/") if name)

    def asn(self) -> str:
        """Return the ASN.1 value notation of the prefix arcs.

        Names and numbers are paired positionally; arcs without a name
        are rendered as bare numbers.

        Returns:
            Notation such as "iso(1) org(3) dod(6)"
        """
        names = self.names
        parts = []
        for i, arc in enumerate(self.arcs):
            parts.append(f"{names[i]}({arc})" if i < len(names) else str(arc))
        return " ".join(parts)


@dataclass(frozen=True)
class Entry:
    """A single enterprise registration.

    Each entry spans four lines in the source file::

        Decimal
        | Organization
        | | Contact
        | | | Email
    """

    number: int
    organization: str = ""
    contact: str = ""
    emails: tuple[str, ...] = field(default_factory=tuple)

    def _require(self, prefix: IdentifierPrefix | None) -> IdentifierPrefix:
        if prefix is None:
            raise PrefixNotSetError(self.number)
        return prefix

    def oid(self, prefix: IdentifierPrefix | None) -> str:
        """Return the dotted OID of this entry under the given prefix."""
        return f"{self._require(prefix).oid}.{self.number}"

    def iri(self, prefix: IdentifierPrefix | None) -> str:
        """Return the slash-delimited path identifier under the given prefix."""
        return f"{self._require(prefix).iri}/{self.number}"

    def asn(self, prefix: IdentifierPrefix | None) -> str:
        """Return the ASN.1 value notation under the given prefix."""
        return f"{{{self._require(prefix).asn()} {self.number}}}"

    def emails_text(self) -> str:
        """Return the email addresses joined by commas."""
        return ",".join(self.emails)

    def to_dict(self, prefix: IdentifierPrefix | None) -> dict[str, str]:
        """Return the displayable fields of this entry.

        Args:
            prefix: Identifier prefix of the owning registry

        Returns:
            Mapping of field label to text value
        """
        return {
            "Organization": self.organization,
            "Contact": self.contact,
            "Decimal": str(self.number),
            "Emails": self.emails_text(),
            "OID": self.oid(prefix),
            "IRI": self.iri(prefix),
            "ASN": self.asn(prefix),
        }
