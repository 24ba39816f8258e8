"""Tests for header block extraction."""

from datetime import date

import pytest

from pen.models import IdentifierPrefix
from pen.parsers.errors import HeaderFieldError
from pen.parsers.header import (
    HEADER_RULES,
    extract_header,
    require_prefix,
    parse_last_updated,
    parse_prefix,
    parse_section,
    parse_source_uri,
)
from pen.registry import Registry


class TestParseLastUpdated:
    """Tests for parse_last_updated."""

    def test_bracketed_date(self) -> None:
        assert parse_last_updated("(last updated 2024-05-22)") == date(2024, 5, 22)

    def test_too_short(self) -> None:
        with pytest.raises(ValueError, match="too short"):
            parse_last_updated("(")

    def test_nothing_inside_brackets(self) -> None:
        with pytest.raises(ValueError, match="no date"):
            parse_last_updated("( )")

    def test_invalid_date(self) -> None:
        with pytest.raises(ValueError, match="not a YYYY-MM-DD date"):
            parse_last_updated("(last updated 2024-02-30)")

    def test_wrong_shape(self) -> None:
        with pytest.raises(ValueError, match="not a YYYY-MM-DD date"):
            parse_last_updated("(last updated 22/05/2024)")


class TestParseSection:
    """Tests for parse_section."""

    def test_drops_trailing_character(self) -> None:
        line = "SMI Network Management Private Enterprise Codes:"
        assert parse_section(line) == "SMI Network Management Private Enterprise Codes"

    def test_too_short(self) -> None:
        with pytest.raises(ValueError):
            parse_section(":")


class TestParsePrefix:
    """Tests for parse_prefix."""

    def test_standard_prefix(self) -> None:
        prefix = parse_prefix(
            "Prefix: iso.org.dod.internet.private.enterprise (1.3.6.1.4.1)"
        )
        assert prefix == IdentifierPrefix(
            oid="1.3.6.1.4.1",
            iri="/iso/org/dod/internet/private/enterprise",
        )

    def test_single_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="expected a path prefix"):
            parse_prefix("Prefix: iso.org.dod.internet.private.enterprise")

    def test_short_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="too short"):
            parse_prefix("Prefix: iso.org.dod ()")

    def test_line_shorter_than_label(self) -> None:
        with pytest.raises(ValueError, match="prefix label"):
            parse_prefix("Prefix")

    def test_non_numeric_oid_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid OID format"):
            parse_prefix("Prefix: iso.org.dod (one.three)")


class TestParseSourceUri:
    """Tests for parse_source_uri."""

    def test_last_token_is_uri(self) -> None:
        line = "This file is https://www.iana.org/assignments/enterprise-numbers.txt"
        assert (
            parse_source_uri(line)
            == "https://www.iana.org/assignments/enterprise-numbers.txt"
        )

    def test_relative_reference_rejected(self) -> None:
        with pytest.raises(ValueError, match="not an absolute URI"):
            parse_source_uri("This file is enterprise-numbers.txt")

    def test_too_short(self) -> None:
        with pytest.raises(ValueError):
            parse_source_uri("x")

    def test_whitespace_only_line(self) -> None:
        with pytest.raises(ValueError, match="no URI found"):
            parse_source_uri("   ")


class TestExtractHeader:
    """Tests for extract_header offset dispatch."""

    def test_rules_cover_even_offsets(self) -> None:
        assert sorted(HEADER_RULES) == [2, 4, 6, 8, 10]

    def test_offset_1_is_ignored(self) -> None:
        registry = Registry()
        extract_header(registry, "PRIVATE ENTERPRISE NUMBERS", 1)
        assert registry.title == ""

    def test_offset_2_sets_title(self) -> None:
        registry = Registry()
        extract_header(registry, "PRIVATE ENTERPRISE NUMBERS", 2)
        assert registry.title == "PRIVATE ENTERPRISE NUMBERS"

    def test_offset_9_is_ignored(self) -> None:
        """A URI-looking line one position early is not read."""
        registry = Registry()
        extract_header(registry, "This file is https://example.com/pen", 9)
        assert registry.source_uri == ""

    def test_offset_10_sets_source_uri(self) -> None:
        registry = Registry()
        extract_header(registry, "This file is https://example.com/pen", 10)
        assert registry.source_uri == "https://example.com/pen"
        assert registry.uri() == "https://example.com/pen"

    def test_offset_11_is_ignored(self) -> None:
        registry = Registry()
        extract_header(registry, "This file is https://example.com/pen", 11)
        assert registry.source_uri == ""

    def test_offset_8_sets_prefix(self) -> None:
        registry = Registry()
        extract_header(registry, "Prefix: iso.org.dod (1.3.6)", 8)
        assert registry.prefix == IdentifierPrefix(oid="1.3.6", iri="/iso/org/dod")
        assert registry.oid_prefix == "1.3.6"

    def test_failure_names_offset_and_field(self) -> None:
        registry = Registry()
        with pytest.raises(HeaderFieldError) as exc_info:
            extract_header(registry, "Prefix: only-one-token", 8)

        error = exc_info.value
        assert error.offset == 8
        assert error.field == "prefix"
        assert error.line == "Prefix: only-one-token"
        assert "header line 8" in str(error)
        assert registry.prefix is None

    def test_whitespace_only_uri_line_names_offset(self) -> None:
        registry = Registry()
        with pytest.raises(HeaderFieldError) as exc_info:
            extract_header(registry, "   ", 10)

        assert exc_info.value.offset == 10
        assert exc_info.value.field == "source_uri"


class TestRequirePrefix:
    """Tests for require_prefix."""

    def test_prefix_present(self) -> None:
        registry = Registry(prefix=IdentifierPrefix(oid="1.3.6", iri="/iso/org/dod"))
        require_prefix(registry)  # Should not raise

    def test_prefix_missing(self) -> None:
        with pytest.raises(HeaderFieldError) as exc_info:
            require_prefix(Registry())

        assert exc_info.value.offset == 8
        assert exc_info.value.field == "prefix"
