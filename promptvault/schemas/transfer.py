# promptvault/schemas/transfer.py
"""
Schemas for export/import.

GET  /v1/export - Full snapshot of prompts, versions and settings
POST /v1/import - Destructive replace from a snapshot

The field names match export files written by the desktop app.
"""

from pydantic import BaseModel, Field

from promptvault.schemas.prompts import VersionResponse


class PromptWithVersions(BaseModel):
    """A prompt row plus its complete version history."""

    id: int
    name: str
    source: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    pinned: bool = False
    created_at: str
    updated_at: str
    current_version_id: int | None = None
    versions: list[VersionResponse] = Field(default_factory=list)


class ExportData(BaseModel):
    """Snapshot of the whole store."""

    prompts: list[PromptWithVersions] = Field(default_factory=list)
    settings: dict[str, str] = Field(default_factory=dict)
    export_time: str = Field(..., description="When the snapshot was taken (ISO-8601)")
