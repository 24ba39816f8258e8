"""Line classification and a forward-only line cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def is_blank(line: str) -> bool:
    """Return True if the raw line is empty (no trimming applied)."""
    return len(line) == 0


def is_entry_start(line: str) -> bool:
    """Check if a line starts a new entry.

    Entry markers consist solely of ASCII digits; the empty string is not
    a marker.

    Args:
        line: Raw line text

    Returns:
        True if the line is a non-empty run of ASCII digits
    """
    return bool(line) and all("0" <= ch <= "9" for ch in line)


def has_prefix(line: str, s: str) -> bool:
    return line.startswith(s)


def contains(line: str, s: str) -> bool:
    return s in line


def trim_leading_whitespace(line: str) -> str:
    """Strip leading space characters only (tabs are kept)."""
    return line.lstrip(" ")


class LineCursor:
    """Forward-only cursor over the lines of a registry file.

    Trailing CR/LF characters are removed from each line; everything else,
    including trailing spaces, is kept.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.line_number = 0
        """1-indexed number of the last line returned (0 before the first)."""

    def next_line(self) -> str | None:
        """Return the next line, or None at end of input."""
        raw = next(self._lines, None)
        if raw is None:
            return None
        self.line_number += 1
        return raw.rstrip("\r\n")

    def __iter__(self) -> LineCursor:
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line
