# promptvault/routers/catalog.py
"""
Vocabulary and category endpoints for filter UIs.

GET /v1/tags                           - All distinct tags, sorted
GET /v1/sources                        - All distinct sources, sorted
GET /v1/categories                     - Prompt count per category
GET /v1/categories/{category}/prompts  - Prompts tagged with the category id
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from promptvault.database import get_db
from promptvault.schemas.prompts import PromptResponse
from promptvault.services.category_service import get_category_counts, get_prompts_by_category
from promptvault.services.search_service import SearchService

router = APIRouter(prefix="/v1", tags=["catalog"])


@router.get("/tags", response_model=list[str])
def list_tags(db: Session = Depends(get_db)) -> list[str]:
    return SearchService(db).get_all_tags()


@router.get("/sources", response_model=list[str])
def list_sources(db: Session = Depends(get_db)) -> list[str]:
    return SearchService(db).get_all_sources()


@router.get("/categories", response_model=dict[str, int])
def category_counts(db: Session = Depends(get_db)) -> dict[str, int]:
    """Every category is listed, with 0 when no prompt matches."""
    return get_category_counts(db)


@router.get("/categories/{category}/prompts", response_model=list[PromptResponse])
def prompts_by_category(category: str, db: Session = Depends(get_db)) -> list[PromptResponse]:
    return get_prompts_by_category(db, category)
