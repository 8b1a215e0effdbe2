# promptvault/taxonomy.py
"""
Prompt Category Taxonomy

Fixed set of display categories used by the sidebar. Each category lists
bilingual (Chinese/English) keywords. A prompt belongs to a category when
one of its tags contains a keyword or is contained by one, ignoring case.
A prompt may belong to several categories.
"""

CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "work": ("职业", "工作", "职场", "career", "job"),
    "business": ("商业", "商务", "business", "marketing", "销售"),
    "tools": ("工具", "tool", "效率", "productivity"),
    "language": ("语言", "翻译", "language", "translate", "英语"),
    "office": ("办公", "office", "文档", "excel", "ppt"),
    "general": ("通用", "general", "日常", "常用"),
    "writing": ("写作", "文案", "writing", "content", "创作"),
    "programming": ("编程", "代码", "programming", "code", "开发"),
    "emotion": ("情感", "心理", "emotion", "情绪"),
    "education": ("教育", "学习", "education", "teaching", "培训"),
    "creative": ("创意", "创新", "creative", "设计思维"),
    "academic": ("学术", "研究", "academic", "论文"),
    "design": ("设计", "UI", "UX", "design", "视觉"),
    "tech": ("技术", "科技", "tech", "AI", "人工智能"),
    "entertainment": ("娱乐", "游戏", "entertainment", "fun"),
}

CATEGORIES: tuple[str, ...] = tuple(CATEGORY_KEYWORDS)


def tag_matches_keyword(tag: str, keyword: str) -> bool:
    """Bidirectional, case-insensitive substring match."""
    tag_lower = tag.lower()
    keyword_lower = keyword.lower()
    return keyword_lower in tag_lower or tag_lower in keyword_lower


def tags_in_category(tags: list[str], category: str) -> bool:
    """Whether any tag matches any keyword of the category."""
    keywords = CATEGORY_KEYWORDS.get(category, ())
    return any(
        tag_matches_keyword(tag, keyword)
        for tag in tags
        for keyword in keywords
    )


def categorize_tags(tags: list[str]) -> list[str]:
    """All categories a tag set belongs to, in taxonomy order."""
    return [category for category in CATEGORIES if tags_in_category(tags, category)]
