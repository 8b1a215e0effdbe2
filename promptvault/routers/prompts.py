# promptvault/routers/prompts.py
"""
Prompt and version endpoints.

GET    /v1/prompts                      - List prompts, pinned first
GET    /v1/prompts/search               - Search with tag/source filters
POST   /v1/prompts                      - Create a prompt (version 1.0.0)
GET    /v1/prompts/{id}                 - One prompt with live content
PUT    /v1/prompts/{id}                 - Update, optionally as a new version
DELETE /v1/prompts/{id}                 - Delete a prompt and its versions
POST   /v1/prompts/{id}/pin             - Toggle the pinned flag
GET    /v1/prompts/{id}/versions        - Version history, newest first
POST   /v1/prompts/{id}/rollback        - Make a historical version live again
GET    /v1/prompts/{id}/versions/diff   - Word diff between two versions
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from promptvault.database import get_db
from promptvault.schemas.prompts import (
    DiffResponse,
    PromptCreate,
    PromptCreated,
    PromptResponse,
    PromptUpdate,
    RollbackRequest,
    VersionResponse,
)
from promptvault.schemas.search import SearchResponse
from promptvault.services import prompt_service
from promptvault.services.diff_service import diff_versions
from promptvault.services.rollback_service import rollback_to_version
from promptvault.services.search_service import SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/prompts", tags=["prompts"])


# -----------------------------------------------------------------------------
# Collection
# -----------------------------------------------------------------------------


@router.get("", response_model=list[PromptResponse])
def list_prompts(db: Session = Depends(get_db)) -> list[PromptResponse]:
    return prompt_service.list_prompts(db)


@router.get("/search", response_model=SearchResponse)
def search_prompts(
    q: str = Query("", description="Substring to find in name, source, notes, tags or content"),
    tags: list[str] | None = Query(None, description="Keep prompts carrying any of these tags (repeatable)"),
    sources: list[str] | None = Query(None, description="Keep prompts from any of these sources (repeatable)"),
    db: Session = Depends(get_db),
) -> SearchResponse:
    """
    Search prompts.

    Filters are conjunctive: a prompt must match the query (if any), carry
    at least one requested tag (if any) and come from one of the requested
    sources (if any).
    """
    return SearchService(db).search(query=q, tags=tags, sources=sources)


@router.post("", response_model=PromptCreated, status_code=status.HTTP_201_CREATED)
def create_prompt(request: PromptCreate, db: Session = Depends(get_db)) -> PromptCreated:
    prompt_id = prompt_service.create_prompt(
        db,
        name=request.name,
        content=request.content,
        source=request.source,
        notes=request.notes,
        tags=request.tags,
    )
    return PromptCreated(id=prompt_id)


# -----------------------------------------------------------------------------
# Single prompt
# -----------------------------------------------------------------------------


@router.get("/{prompt_id}", response_model=PromptResponse)
def get_prompt(prompt_id: int, db: Session = Depends(get_db)) -> PromptResponse:
    return prompt_service.get_prompt(db, prompt_id)


@router.put("/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_prompt(prompt_id: int, request: PromptUpdate, db: Session = Depends(get_db)) -> None:
    prompt_service.update_prompt(
        db,
        prompt_id,
        name=request.name,
        content=request.content,
        source=request.source,
        notes=request.notes,
        tags=request.tags,
        save_as_version=request.save_as_version,
        version_type=request.version_type,
    )


@router.delete("/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prompt(prompt_id: int, db: Session = Depends(get_db)) -> None:
    prompt_service.delete_prompt(db, prompt_id)


@router.post("/{prompt_id}/pin", status_code=status.HTTP_204_NO_CONTENT)
def toggle_pin(prompt_id: int, db: Session = Depends(get_db)) -> None:
    prompt_service.toggle_pin(db, prompt_id)


# -----------------------------------------------------------------------------
# Versions
# -----------------------------------------------------------------------------


@router.get("/{prompt_id}/versions", response_model=list[VersionResponse])
def get_prompt_versions(prompt_id: int, db: Session = Depends(get_db)) -> list[VersionResponse]:
    return prompt_service.get_prompt_versions(db, prompt_id)


@router.post("/{prompt_id}/rollback", status_code=status.HTTP_204_NO_CONTENT)
def rollback(prompt_id: int, request: RollbackRequest, db: Session = Depends(get_db)) -> None:
    result = rollback_to_version(db, prompt_id, request.version_id, request.version_type)
    logger.debug(f"Rollback created version {result.new_version_id} ({result.to_version})")


@router.get("/{prompt_id}/versions/diff", response_model=DiffResponse)
def diff(
    prompt_id: int,
    left: int = Query(..., description="Older version id"),
    right: int = Query(..., description="Newer version id"),
    db: Session = Depends(get_db),
) -> DiffResponse:
    return diff_versions(db, prompt_id, left, right)
