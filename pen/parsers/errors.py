"""Errors raised while parsing a PEN registry file."""


class PenParseError(Exception):
    """Base class for fatal parse failures."""


class HeaderFieldError(PenParseError):
    """Raised when a header line fails its extraction rule."""

    def __init__(self, offset: int, field: str, line: str, reason: str) -> None:
        """Initialize the error.

        Args:
            offset: 1-indexed line number of the header line
            field: Name of the registry field the line populates
            line: The offending line
            reason: Why the line was rejected
        """
        self.offset = offset
        self.field = field
        self.line = line
        self.reason = reason
        super().__init__(
            f"Unable to set {field} from header line {offset} ({line!r}): {reason}"
        )


class EntryError(PenParseError):
    """Base class for failures while assembling one entry."""

    def __init__(self, line_number: int, msg: str) -> None:
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {msg}")


class EntryMarkerError(EntryError):
    """Raised when an all-digit marker line does not convert to an integer."""


class TruncatedEntryError(EntryError):
    """Raised when input ends before an entry has all of its lines."""


class MalformedEntryError(EntryError):
    """Raised when an entry body line is actually the start of another entry."""
