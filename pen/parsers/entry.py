"""Assembly of one registry entry from its four source lines."""

from __future__ import annotations

from pen.models import Entry
from pen.parsers.errors import (
    EntryMarkerError,
    MalformedEntryError,
    TruncatedEntryError,
)
from pen.parsers.lines import LineCursor, is_entry_start, trim_leading_whitespace

# Lines following the marker: organization, contact, email
BODY_LINES = 3


def split_emails(line: str) -> tuple[str, ...]:
    """Split an email line into addresses.

    Spaces are removed and empty items (from doubled or trailing commas)
    are dropped.
    """
    return tuple(
        address for address in line.replace(" ", "").split(",") if address
    )


def assemble_entry(marker: str, cursor: LineCursor, *, strict: bool = True) -> Entry:
    """Build an Entry from a marker line and the three lines after it.

    Args:
        marker: The all-digit line that opened the entry
        cursor: Cursor positioned on the marker line
        strict: Reject truncated entries and entries whose body runs into
            the next marker. When False, missing lines are left empty and
            body lines are taken as-is.

    Returns:
        The assembled Entry

    Raises:
        EntryMarkerError: If the marker does not convert to an integer
        TruncatedEntryError: If input ends early (strict only)
        MalformedEntryError: If a body line is an entry marker (strict only)
    """
    marker_line = cursor.line_number
    try:
        number = int(marker)
    except ValueError as e:
        raise EntryMarkerError(marker_line, f"invalid entry number: {e}") from e

    body: list[str] = []
    for _ in range(BODY_LINES):
        line = cursor.next_line()
        if line is None:
            if strict:
                raise TruncatedEntryError(
                    marker_line,
                    f"entry {number} ends after {len(body)} of {BODY_LINES} lines",
                )
            break
        if strict and is_entry_start(line):
            raise MalformedEntryError(
                cursor.line_number,
                f"entry {number} runs into the next entry marker {line!r}",
            )
        body.append(trim_leading_whitespace(line))

    body.extend([""] * (BODY_LINES - len(body)))
    organization, contact, emails = body

    return Entry(
        number=number,
        organization=organization,
        contact=contact,
        emails=split_emails(emails),
    )
