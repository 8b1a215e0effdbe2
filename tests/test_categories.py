# tests/test_categories.py
"""Tests for category counts and category listings."""

from promptvault.models import Prompt, now_iso
from promptvault.services import prompt_service
from promptvault.services.category_service import get_category_counts, get_prompts_by_category
from promptvault.taxonomy import CATEGORIES


class TestGetCategoryCounts:
    """Tests for get_category_counts()."""

    def test_empty_store_lists_every_category(self, db):
        counts = get_category_counts(db)

        assert list(counts) == list(CATEGORIES)
        assert all(count == 0 for count in counts.values())

    def test_counts_by_keyword(self, db):
        prompt_service.create_prompt(db, name="a", content="c", tags=["编程", "代码审查"])
        prompt_service.create_prompt(db, name="b", content="c", tags=["translate"])
        prompt_service.create_prompt(db, name="c", content="c", tags=["programming"])
        prompt_service.create_prompt(db, name="d", content="c")

        counts = get_category_counts(db)

        # Two matching tags on one prompt still count once
        assert counts["programming"] == 2
        assert counts["language"] == 1
        assert counts["business"] == 0

    def test_prompt_in_several_categories(self, db):
        prompt_service.create_prompt(db, name="a", content="c", tags=["编程", "翻译"])

        counts = get_category_counts(db)

        assert counts["programming"] == 1
        assert counts["language"] == 1

    def test_empty_tag_counts_everywhere(self, db):
        prompt_service.create_prompt(db, name="blank", content="c", tags=[""])

        counts = get_category_counts(db)

        assert counts == {category: 1 for category in CATEGORIES}

    def test_legacy_comma_tags_counted(self, db):
        now = now_iso()
        db.add(Prompt(name="legacy", tags="翻译, 其他", created_at=now, updated_at=now))
        db.commit()

        assert get_category_counts(db)["language"] == 1


class TestGetPromptsByCategory:
    """Tests for get_prompts_by_category()."""

    def test_matches_category_identifier_as_tag(self, db):
        tagged = prompt_service.create_prompt(db, name="a", content="c", tags=["programming"])
        prompt_service.create_prompt(db, name="b", content="c", tags=["编程"])

        prompts = get_prompts_by_category(db, "programming")

        assert [p.id for p in prompts] == [tagged]

    def test_keyword_tags_not_listed(self, db):
        """Counts use keywords; listings use the identifier, so they can differ."""
        prompt_service.create_prompt(db, name="a", content="c", tags=["编程"])

        assert get_category_counts(db)["programming"] == 1
        assert get_prompts_by_category(db, "programming") == []

    def test_display_order(self, db):
        first = prompt_service.create_prompt(db, name="a", content="c", tags=["tools"])
        second = prompt_service.create_prompt(db, name="b", content="c", tags=["tools", "x"])
        prompt_service.toggle_pin(db, first)

        prompts = get_prompts_by_category(db, "tools")

        assert [p.id for p in prompts] == [first, second]
        assert prompts[0].content == "c"
