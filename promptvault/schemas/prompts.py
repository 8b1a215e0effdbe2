# promptvault/schemas/prompts.py
"""
Schemas for prompt and version endpoints.

GET    /v1/prompts                          - List prompts with live content
POST   /v1/prompts                          - Create a prompt
PUT    /v1/prompts/{id}                     - Update (optionally as a new version)
GET    /v1/prompts/{id}/versions            - Version history, newest first
POST   /v1/prompts/{id}/rollback            - Roll back to a historical version
GET    /v1/prompts/{id}/versions/diff       - Word diff between two versions
"""

from pydantic import BaseModel, ConfigDict, Field

from promptvault.models import VersionBump


class PromptCreate(BaseModel):
    """Request to create a prompt."""

    name: str = Field(..., description="Display title")
    source: str | None = Field(None, description="Where the prompt came from")
    notes: str | None = Field(None, description="Free-text annotation")
    tags: list[str] = Field(default_factory=list, description="Tag set (order irrelevant)")
    content: str = Field(..., description="Initial content, stored as version 1.0.0")


class PromptUpdate(BaseModel):
    """Request to update a prompt."""

    name: str
    source: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    content: str
    save_as_version: bool = Field(False, description="Insert a new version instead of editing the live one")
    version_type: str = Field(
        VersionBump.PATCH.value,
        description="Bump kind for a new version: patch, minor or major",
    )


class PromptCreated(BaseModel):
    id: int


class PromptResponse(BaseModel):
    """A prompt with its live version's content and version string."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    source: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    pinned: bool = False
    content: str = ""
    version: str = "1.0.0"
    created_at: str
    updated_at: str
    current_version_id: int | None = None


class VersionResponse(BaseModel):
    """One content snapshot in a prompt's history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    prompt_id: int
    version: str
    content: str
    created_at: str
    parent_version_id: int | None = None


class RollbackRequest(BaseModel):
    """Request to roll back to a historical version."""

    version_id: int = Field(..., description="Version whose content becomes live again")
    version_type: str = Field(VersionBump.PATCH.value, description="Bump kind for the new version")


class DiffResponse(BaseModel):
    """Word-level diff between two versions of the same prompt."""

    left_version: VersionResponse
    right_version: VersionResponse
    diff_html: str
