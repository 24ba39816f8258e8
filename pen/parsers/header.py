"""Extraction of registry metadata from the fixed header block.

The first ten lines of the PEN file look like this (line numbers on the left)::

     1
     2  PRIVATE ENTERPRISE NUMBERS
     3
     4  (last updated 2024-05-22)
     5
     6  SMI Network Management Private Enterprise Codes:
     7
     8  Prefix: iso.org.dod.internet.private.enterprise (1.3.6.1.4.1)
     9
    10  This file is https://www.iana.org/assignments/enterprise-numbers.txt

Only the even lines carry data. Each of them has a rule in HEADER_RULES.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import urlparse

from pen.config import PEN_DATE_FORMAT, PREFIX_LABEL_LENGTH, validate_oid
from pen.logging_config import logger
from pen.models import IdentifierPrefix
from pen.parsers.errors import HeaderFieldError

if TYPE_CHECKING:
    from pen.registry import Registry


def parse_title(line: str) -> str:
    return line


def parse_last_updated(line: str) -> date:
    """Parse the bracketed "(last updated YYYY-MM-DD)" line.

    Raises:
        ValueError: If no date can be read from the line
    """
    if len(line) <= 1:
        raise ValueError("line too short")

    tokens = line[1:-1].split()
    if not tokens:
        raise ValueError("no date found")

    try:
        return datetime.strptime(tokens[-1], PEN_DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"'{tokens[-1]}' is not a YYYY-MM-DD date") from e


def parse_section(line: str) -> str:
    """Drop the trailing colon of the section line."""
    if len(line) <= 1:
        raise ValueError("line too short")
    return line[:-1]


def parse_prefix(line: str) -> IdentifierPrefix:
    """Parse the "Prefix: <dotted names> (<dotted numbers>)" line.

    Raises:
        ValueError: If the line does not carry both prefix forms
    """
    if len(line) < PREFIX_LABEL_LENGTH:
        raise ValueError("line too short to contain the prefix label")

    tokens = line[PREFIX_LABEL_LENGTH:].split()
    if len(tokens) < 2:
        raise ValueError("expected a path prefix and a bracketed OID prefix")

    path, bracketed = tokens[0], tokens[1]
    if len(path) <= 2 or len(bracketed) <= 2:
        raise ValueError("prefix token too short")

    oid = bracketed[1:-1]
    validate_oid(oid)
    return IdentifierPrefix(oid=oid, iri="/" + path.replace(".", "/"))


def parse_source_uri(line: str) -> str:
    """Take the last token of the line as the source URI.

    Raises:
        ValueError: If the token is not an absolute URI
    """
    if len(line) <= 1:
        raise ValueError("line too short")

    tokens = line.split()
    if not tokens:
        raise ValueError("no URI found")

    token = tokens[-1]
    parsed = urlparse(token)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"'{token}' is not an absolute URI")
    return parsed.geturl()


@dataclass(frozen=True)
class HeaderRule:
    """How one header line maps onto a registry field."""

    field: str
    parse: Callable[[str], Any]


PREFIX_OFFSET = 8

HEADER_RULES: dict[int, HeaderRule] = {
    2: HeaderRule("title", parse_title),
    4: HeaderRule("last_updated", parse_last_updated),
    6: HeaderRule("section", parse_section),
    PREFIX_OFFSET: HeaderRule("prefix", parse_prefix),
    10: HeaderRule("source_uri", parse_source_uri),
}


def extract_header(registry: Registry, line: str, line_number: int) -> None:
    """Apply the header rule for a line, if its position has one.

    Args:
        registry: Registry whose header fields are populated
        line: The raw header line
        line_number: 1-indexed position of the line in the file

    Raises:
        HeaderFieldError: If the line fails its rule
    """
    rule = HEADER_RULES.get(line_number)
    if rule is None:
        return

    try:
        value = rule.parse(line)
    except ValueError as e:
        raise HeaderFieldError(line_number, rule.field, line, str(e)) from e

    setattr(registry, rule.field, value)
    logger.debug("Header line %d: %s = %r", line_number, rule.field, value)


def require_prefix(registry: Registry) -> None:
    """Check that the header block supplied the identifier prefix.

    Raises:
        HeaderFieldError: If no prefix line was parsed
    """
    if registry.prefix is None:
        raise HeaderFieldError(
            PREFIX_OFFSET, "prefix", "", "header block has no prefix line"
        )
