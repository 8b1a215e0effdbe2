# promptvault/schemas/__init__.py
"""
Pydantic schemas for API request/response validation.
"""

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
from promptvault.schemas.settings import SettingUpdate, SettingValue
from promptvault.schemas.transfer import ExportData, PromptWithVersions

__all__ = [
    "PromptCreate",
    "PromptCreated",
    "PromptUpdate",
    "PromptResponse",
    "VersionResponse",
    "RollbackRequest",
    "DiffResponse",
    # Search schemas
    "SearchResponse",
    # Settings schemas
    "SettingValue",
    "SettingUpdate",
    # Transfer schemas
    "PromptWithVersions",
    "ExportData",
]
