# promptvault/services/tags.py
"""
Tag encoding and LIKE pattern helpers.

Tags are stored on the prompt row as a compact JSON array. Rows written by
older versions may hold comma-separated text instead; decode_tags() reads
both. Membership filters match a JSON-encoded element as a substring of the
stored text.
"""

import json

LIKE_ESCAPE = "\\"


def encode_tags(tags: list[str] | None) -> str:
    """Serialize a tag set. Empty set -> "" ; duplicates dropped, order kept."""
    if not tags:
        return ""
    unique = list(dict.fromkeys(tags))
    return json.dumps(unique, ensure_ascii=False, separators=(",", ":"))


def decode_tags(raw: str | None) -> list[str]:
    """
    Parse the stored tag text.

    Falls back to comma splitting when the text is not a JSON array of
    strings. Never raises.
    """
    if not raw:
        return []

    try:
        parsed = json.loads(raw)
    except ValueError:
        parsed = None

    if isinstance(parsed, list) and all(isinstance(t, str) for t in parsed):
        return parsed

    return [part.strip() for part in raw.split(",") if part.strip()]


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so they match literally (use with LIKE_ESCAPE)."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(text: str) -> str:
    return f"%{escape_like(text)}%"


def tag_element_pattern(tag: str) -> str:
    """LIKE pattern matching `tag` as a whole element of the stored JSON array."""
    element = json.dumps(tag, ensure_ascii=False)
    return f"%{escape_like(element)}%"
