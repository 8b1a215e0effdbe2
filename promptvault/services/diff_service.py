# promptvault/services/diff_service.py
"""
Word-level diff between two versions of the same prompt.

Removed words are wrapped in <span class="diff-remove">, added words in
<span class="diff-add">. All text is HTML-escaped and tokens are joined by
single spaces.
"""

import html
from difflib import SequenceMatcher

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.exceptions import StorageError, VersionNotFoundError
from promptvault.models import PromptVersion
from promptvault.schemas.prompts import DiffResponse, VersionResponse

REMOVED_CLASS = "diff-remove"
ADDED_CLASS = "diff-add"


def _wrap(words: list[str], css_class: str) -> list[str]:
    return [f'<span class="{css_class}">{html.escape(word)}</span>' for word in words]


def render_word_diff(left: str, right: str) -> str:
    """Render the word diff of two texts as an HTML fragment."""
    left_words = left.split()
    right_words = right.split()

    tokens: list[str] = []
    matcher = SequenceMatcher(a=left_words, b=right_words, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            tokens.extend(html.escape(word) for word in left_words[i1:i2])
            continue
        if tag in ("replace", "delete"):
            tokens.extend(_wrap(left_words[i1:i2], REMOVED_CLASS))
        if tag in ("replace", "insert"):
            tokens.extend(_wrap(right_words[j1:j2], ADDED_CLASS))

    return " ".join(tokens)


def _load_version(db: Session, prompt_id: int, version_id: int) -> PromptVersion:
    try:
        version = (
            db.query(PromptVersion)
            .filter(PromptVersion.id == version_id, PromptVersion.prompt_id == prompt_id)
            .first()
        )
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get version: {e}") from e

    if version is None:
        raise VersionNotFoundError(version_id, prompt_id)
    return version


def diff_versions(db: Session, prompt_id: int, left_id: int, right_id: int) -> DiffResponse:
    """
    Diff two versions of a prompt.

    Raises VersionNotFoundError if either version is missing or belongs to
    another prompt.
    """
    left = _load_version(db, prompt_id, left_id)
    right = _load_version(db, prompt_id, right_id)

    return DiffResponse(
        left_version=VersionResponse.model_validate(left),
        right_version=VersionResponse.model_validate(right),
        diff_html=render_word_diff(left.content, right.content),
    )
