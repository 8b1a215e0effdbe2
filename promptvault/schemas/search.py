# promptvault/schemas/search.py
"""
Schemas for search and vocabulary endpoints.

GET /v1/prompts/search - Substring search with tag/source filters
"""

from pydantic import BaseModel, Field

from promptvault.schemas.prompts import PromptResponse


class SearchResponse(BaseModel):
    """Response from the search endpoint."""

    prompts: list[PromptResponse] = Field(default_factory=list, description="Matching prompts, pinned first")
    total: int = Field(..., description="Number of matching prompts")
    tags: list[str] = Field(default_factory=list, description="Tag vocabulary across all prompts")
    sources: list[str] = Field(default_factory=list, description="Source vocabulary across all prompts")
