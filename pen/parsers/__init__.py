"""Line-oriented parsing of the PEN registry file."""

from pen.parsers.errors import (
    EntryError,
    EntryMarkerError,
    HeaderFieldError,
    MalformedEntryError,
    PenParseError,
    TruncatedEntryError,
)
from pen.parsers.pen_parser import download_pen, parse_file, parse_lines, parse_text

__all__ = [
    "EntryError",
    "EntryMarkerError",
    "HeaderFieldError",
    "MalformedEntryError",
    "PenParseError",
    "TruncatedEntryError",
    "download_pen",
    "parse_file",
    "parse_lines",
    "parse_text",
]
