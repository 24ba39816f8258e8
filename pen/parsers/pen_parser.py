"""Parser for the IANA Private Enterprise Numbers text file."""

from __future__ import annotations

import io
import time
from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path

import requests

from pen.config import HEADER_LINES, HTTP_TIMEOUT, PEN_URL
from pen.logging_config import logger
from pen.parsers.entry import assemble_entry
from pen.parsers.header import extract_header, require_prefix
from pen.parsers.lines import LineCursor, is_blank, is_entry_start
from pen.registry import Registry


def download_pen(dest: Path, url: str = PEN_URL) -> Path:
    """Download the PEN registry file.

    Args:
        dest: Where to write the file
        url: Location of the registry file

    Returns:
        The path the file was written to

    Raises:
        requests.HTTPError: If download fails
    """
    response = requests.get(url, timeout=HTTP_TIMEOUT)
    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        raise requests.HTTPError(f"Failed to download PEN registry from {url}: {e}") from e

    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "w", encoding="utf-8", newline="\n") as f:
        f.write(response.text)
    return dest


def parse_lines(lines: Iterable[str], *, strict: bool = True) -> Registry:
    """Parse registry lines into a Registry.

    Lines 1-10 are the header block. After that every all-digit line opens
    a four-line entry. Blank lines are skipped everywhere and any other
    line outside an entry is ignored. Entries whose number was already seen
    are dropped.

    Args:
        lines: Lines of the registry file, consumed once
        strict: Reject truncated or overlapping entries (see assemble_entry)

    Returns:
        The populated Registry

    Raises:
        HeaderFieldError: If a header line is malformed or the prefix is missing
        EntryError: If an entry cannot be assembled
    """
    started = time.perf_counter()
    registry = Registry()
    cursor = LineCursor(lines)

    for line in cursor:
        if is_blank(line):
            continue

        if cursor.line_number <= HEADER_LINES:
            extract_header(registry, line, cursor.line_number)
            continue

        if is_entry_start(line):
            entry = assemble_entry(line, cursor, strict=strict)
            if not registry.insert(entry):
                logger.debug("Ignoring duplicate entry %d", entry.number)

    require_prefix(registry)

    registry.parse_time = timedelta(seconds=time.perf_counter() - started)
    logger.info(
        "Parsed %d entries from %d lines in %.3fs",
        registry.count(),
        cursor.line_number,
        registry.parse_time.total_seconds(),
    )
    return registry


def parse_text(text: str, *, strict: bool = True) -> Registry:
    """Parse registry content held in memory."""
    return parse_lines(io.StringIO(text), strict=strict)


def parse_file(path: Path | str, *, strict: bool = True) -> Registry:
    """Parse a downloaded registry file.

    Args:
        path: Location of the registry text file
        strict: See parse_lines

    Returns:
        The populated Registry

    Raises:
        OSError: If the file cannot be read
        PenParseError: If the content is malformed
    """
    # undecodable bytes become U+FFFD instead of aborting the parse
    with open(path, encoding="utf-8", errors="replace") as f:
        return parse_lines(f, strict=strict)
