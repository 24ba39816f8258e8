"""Shared test fixtures for PEN parser tests."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pen.parsers import parse_file, parse_lines
from pen.registry import Registry


# Shared fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

HEADER = [
    "",
    "PRIVATE ENTERPRISE NUMBERS",
    "",
    "(last updated 2024-05-22)",
    "",
    "SMI Network Management Private Enterprise Codes:",
    "",
    "Prefix: iso.org.dod.internet.private.enterprise (1.3.6.1.4.1)",
    "",
    "This file is https://www.iana.org/assignments/enterprise-numbers.txt",
]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def header_lines() -> list[str]:
    """Return a copy of a well-formed ten-line header block."""
    return list(HEADER)


@pytest.fixture
def sample_registry() -> Registry:
    """Registry parsed from the sample enterprise-numbers file."""
    return parse_file(FIXTURES_DIR / "enterprise-numbers.txt")


@pytest.fixture
def build_registry():
    """Factory fixture to parse a header plus the given entry lines.

    Usage:
        def test_example(build_registry):
            registry = build_registry(["99", "  Org", "    Name", "      a&b.c"])
    """

    def _build(entry_lines: list[str], strict: bool = True) -> Registry:
        return parse_lines(HEADER + entry_lines, strict=strict)

    return _build


@pytest.fixture
def mock_http_response():
    """Factory fixture to create mock HTTP responses.

    Usage:
        def test_example(mock_http_response):
            response = mock_http_response("registry text")
            # response.text == "registry text"
            # response.raise_for_status() does nothing
    """

    def _create_response(text: str) -> Mock:
        response = Mock()
        response.text = text
        response.raise_for_status = Mock()
        return response

    return _create_response
