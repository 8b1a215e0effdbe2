# tests/test_taxonomy.py
"""Tests for the category keyword taxonomy."""

from promptvault.taxonomy import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    categorize_tags,
    tag_matches_keyword,
    tags_in_category,
)


class TestTaxonomyShape:
    """Tests for the category table itself."""

    def test_fifteen_categories(self):
        assert len(CATEGORIES) == 15
        assert set(CATEGORIES) == set(CATEGORY_KEYWORDS)

    def test_every_category_has_keywords(self):
        for category, keywords in CATEGORY_KEYWORDS.items():
            assert keywords, category


class TestTagMatchesKeyword:
    """Tests for tag_matches_keyword()."""

    def test_tag_contains_keyword(self):
        assert tag_matches_keyword("代码审查", "代码")

    def test_keyword_contains_tag(self):
        assert tag_matches_keyword("prog", "programming")

    def test_case_insensitive(self):
        assert tag_matches_keyword("Machine AI", "ai")
        assert tag_matches_keyword("ui", "UI")

    def test_unrelated(self):
        assert not tag_matches_keyword("质量", "代码")


class TestCategorizeTags:
    """Tests for tags_in_category() and categorize_tags()."""

    def test_single_category(self):
        assert categorize_tags(["translate"]) == ["language"]

    def test_multiple_categories(self):
        result = categorize_tags(["编程", "翻译"])
        assert result == ["language", "programming"]

    def test_empty_tag_matches_every_category(self):
        """An empty tag is contained in every keyword."""
        assert categorize_tags([""]) == list(CATEGORIES)

    def test_whitespace_tag_matches_nothing(self):
        assert categorize_tags(["  "]) == []

    def test_unknown_category(self):
        assert not tags_in_category(["编程"], "unknown")
