# promptvault/schemas/settings.py
"""
Schemas for settings endpoints.

GET /v1/settings/{key} - Read a setting
PUT /v1/settings/{key} - Upsert a setting
"""

from pydantic import BaseModel, Field


class SettingValue(BaseModel):
    """A setting as returned by GET (value is null when the key is unset)."""

    key: str
    value: str | None = None


class SettingUpdate(BaseModel):
    value: str = Field(..., description="New value (stored as text)")
