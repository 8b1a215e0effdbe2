# promptvault/services/search_service.py
"""
Search over prompts.

Provides:
- Case-insensitive substring search over name, source, notes, tags and
  live content (engine-default LIKE collation)
- Tag filter (any of the requested tags, matched as JSON array elements)
- Source filter (any of the requested sources, exact match)
- Tag and source vocabularies across all prompts for filter UIs
"""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.exceptions import StorageError
from promptvault.models import Prompt, PromptVersion
from promptvault.schemas.search import SearchResponse
from promptvault.services.prompt_service import display_order, live_prompt_query, to_prompt_response
from promptvault.services.tags import LIKE_ESCAPE, contains_pattern, decode_tags, tag_element_pattern

logger = logging.getLogger(__name__)


class SearchService:
    """Service for searching and filtering prompts."""

    def __init__(self, db: Session):
        """Initialize search service with a store session."""
        self.db = db

    def search(
        self,
        query: str = "",
        tags: list[str] | None = None,
        sources: list[str] | None = None,
    ) -> SearchResponse:
        """
        Search prompts with conjunctive filters.

        Args:
            query: Substring to find in name, source, notes, tags or content.
                Empty matches everything.
            tags: Keep prompts carrying at least one of these tags
            sources: Keep prompts whose source equals one of these

        Returns:
            SearchResponse with matches (pinned first, then most recently
            updated) and the full tag/source vocabularies.
        """
        base_query = live_prompt_query(self.db)

        if query:
            pattern = contains_pattern(query)
            base_query = base_query.filter(
                or_(
                    Prompt.name.like(pattern, escape=LIKE_ESCAPE),
                    Prompt.source.like(pattern, escape=LIKE_ESCAPE),
                    Prompt.notes.like(pattern, escape=LIKE_ESCAPE),
                    Prompt.tags.like(pattern, escape=LIKE_ESCAPE),
                    PromptVersion.content.like(pattern, escape=LIKE_ESCAPE),
                )
            )

        if tags:
            base_query = base_query.filter(
                or_(*[Prompt.tags.like(tag_element_pattern(tag), escape=LIKE_ESCAPE) for tag in tags])
            )

        if sources:
            base_query = base_query.filter(Prompt.source.in_(sources))

        try:
            rows = display_order(base_query).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to search prompts: {e}") from e

        prompts = [to_prompt_response(prompt, live) for prompt, live in rows]

        logger.debug(
            f"Search query={query!r} tags={tags} sources={sources} -> {len(prompts)} results"
        )

        return SearchResponse(
            prompts=prompts,
            total=len(prompts),
            tags=self.get_all_tags(),
            sources=self.get_all_sources(),
        )

    def get_all_tags(self) -> list[str]:
        """Distinct tags across every prompt, sorted."""
        try:
            rows = (
                self.db.query(Prompt.tags)
                .filter(Prompt.tags.isnot(None), Prompt.tags != "")
                .distinct()
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to get tags: {e}") from e

        all_tags: set[str] = set()
        for row in rows:
            all_tags.update(decode_tags(row.tags))
        return sorted(all_tags)

    def get_all_sources(self) -> list[str]:
        """Distinct non-empty sources across every prompt, sorted."""
        try:
            rows = (
                self.db.query(Prompt.source)
                .filter(Prompt.source.isnot(None), Prompt.source != "")
                .distinct()
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to get sources: {e}") from e

        return sorted(row.source for row in rows)
