"""Parser and lookup index for the IANA Private Enterprise Numbers registry."""

__version__ = "0.1.0"
