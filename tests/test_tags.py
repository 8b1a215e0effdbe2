# tests/test_tags.py
"""Tests for tag encoding and LIKE pattern helpers."""

from promptvault.services.tags import (
    contains_pattern,
    decode_tags,
    encode_tags,
    escape_like,
    tag_element_pattern,
)


class TestEncodeTags:
    """Tests for encode_tags()."""

    def test_empty_set_encodes_to_empty_string(self):
        assert encode_tags([]) == ""
        assert encode_tags(None) == ""

    def test_compact_json_array(self):
        assert encode_tags(["python", "sql"]) == '["python","sql"]'

    def test_non_ascii_kept_verbatim(self):
        assert encode_tags(["编程", "翻译"]) == '["编程","翻译"]'

    def test_duplicates_dropped_order_kept(self):
        assert encode_tags(["b", "a", "b"]) == '["b","a"]'


class TestDecodeTags:
    """Tests for decode_tags()."""

    def test_empty_values(self):
        assert decode_tags("") == []
        assert decode_tags(None) == []

    def test_json_array(self):
        assert decode_tags('["python","编程"]') == ["python", "编程"]

    def test_legacy_comma_separated(self):
        """Non-JSON text is split on commas and trimmed."""
        assert decode_tags("python, sql ,,go") == ["python", "sql", "go"]

    def test_non_string_array_falls_back(self):
        assert decode_tags("[1,2]") == ["[1", "2]"]


class TestLikePatterns:
    """Tests for LIKE escaping and patterns."""

    def test_escape_like(self):
        assert escape_like("100%_done") == "100\\%\\_done"

    def test_escape_like_escapes_escape_char(self):
        assert escape_like("a\\b") == "a\\\\b"

    def test_contains_pattern(self):
        assert contains_pattern("code") == "%code%"

    def test_tag_element_pattern(self):
        """Matches the quoted tag as a JSON array element."""
        assert tag_element_pattern("python") == '%"python"%'
        assert tag_element_pattern("编程") == '%"编程"%'
