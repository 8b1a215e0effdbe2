# promptvault/services/category_service.py
"""
Category counts and category listings for prompts.

Counting uses the keyword taxonomy against decoded tags. Listing by
category matches the category identifier itself as a tag element, not the
keyword list, so the two can disagree for the same category.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.exceptions import StorageError
from promptvault.models import Prompt
from promptvault.schemas.prompts import PromptResponse
from promptvault.services.prompt_service import display_order, live_prompt_query, to_prompt_response
from promptvault.services.tags import LIKE_ESCAPE, decode_tags, tag_element_pattern
from promptvault.taxonomy import CATEGORIES, categorize_tags

logger = logging.getLogger(__name__)


def get_category_counts(db: Session) -> dict[str, int]:
    """
    Count prompts per category.

    Every category is present in the result, with 0 when nothing matches.
    """
    try:
        rows = db.query(Prompt.tags).filter(Prompt.tags.isnot(None), Prompt.tags != "").all()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get category counts: {e}") from e

    counts = {category: 0 for category in CATEGORIES}
    for row in rows:
        for category in categorize_tags(decode_tags(row.tags)):
            counts[category] += 1

    return counts


def get_prompts_by_category(db: Session, category: str) -> list[PromptResponse]:
    """Prompts carrying a tag equal to the category identifier, in display order."""
    query = live_prompt_query(db).filter(
        Prompt.tags.like(tag_element_pattern(category), escape=LIKE_ESCAPE)
    )
    try:
        rows = display_order(query).all()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get prompts by category: {e}") from e

    return [to_prompt_response(prompt, live) for prompt, live in rows]
