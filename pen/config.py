"""Shared configuration for the PEN registry parser."""

import re

# Canonical location of the IANA Private Enterprise Numbers file
PEN_URL = "https://www.iana.org/assignments/enterprise-numbers.txt"

# HTTP timeout in seconds (the file is several megabytes)
HTTP_TIMEOUT = 30

# Date format IANA uses in the "(last updated ...)" header line
PEN_DATE_FORMAT = "%Y-%m-%d"

# Date format used when presenting the last-updated value
DISPLAY_DATE_FORMAT = "%a %b %d %Y"

# Number of leading lines that make up the header block
HEADER_LINES = 10

# Length of the "Prefix: " label on the prefix header line
PREFIX_LABEL_LENGTH = 8

# Dotted-numeric OID, e.g. 1.3.6.1.4.1
OID_PATTERN = re.compile(r"^\d+(\.\d+)*$")


def validate_oid(oid: str) -> None:
    """Validate dotted-numeric OID format.

    Args:
        oid: OID string to validate

    Raises:
        ValueError: If the OID is not dot-separated digits
    """
    if not OID_PATTERN.match(oid):
        raise ValueError(
            f"Invalid OID format: '{oid}'. Expected dotted digits (e.g., 1.3.6.1.4.1)"
        )
