# promptvault/models.py
"""
PromptVault Database Models

Tables:
- Prompt: named artifact with tags, provenance and pin state
- PromptVersion: immutable content snapshot in a prompt's history
- Setting: process-wide key/value settings (retention threshold, ...)

Table and column names match store files written by the desktop app,
so an existing prompts.db can be opened as-is.
"""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from promptvault.database import Base


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class VersionBump(str, Enum):
    """Which component of MAJOR.MINOR.PATCH a new version increments."""
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

INITIAL_VERSION = "1.0.0"
VERSION_CLEANUP_THRESHOLD_KEY = "version_cleanup_threshold"


def now_iso() -> str:
    """Current UTC time as a sortable ISO-8601 string with timezone."""
    return datetime.now(UTC).isoformat(timespec="microseconds")


# -----------------------------------------------------------------------------
# Prompt
# -----------------------------------------------------------------------------

class Prompt(Base):
    """
    A named text artifact.

    Content and version string are not stored here; they live on the
    PromptVersion referenced by current_version_id.
    """
    __tablename__ = "prompts"
    __table_args__ = (
        Index("idx_prompts_updated_at", "updated_at"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    source = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)  # JSON array, "" for no tags
    pinned = Column(Boolean, default=False, nullable=False)
    created_at = Column(Text, nullable=False, default=now_iso)
    updated_at = Column(Text, nullable=False, default=now_iso)

    # Weak reference, no FK: set after the first version is inserted
    current_version_id = Column(Integer, nullable=True)

    versions = relationship(
        "PromptVersion",
        back_populates="prompt",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


# -----------------------------------------------------------------------------
# Version
# -----------------------------------------------------------------------------

class PromptVersion(Base):
    """
    One immutable content snapshot.

    parent_version_id points at the version this one supersedes. For a
    rollback it points at the version that was rolled back to.
    """
    __tablename__ = "versions"
    __table_args__ = (
        Index("idx_versions_prompt_id", "prompt_id"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    prompt_id = Column(
        Integer,
        ForeignKey("prompts.id", ondelete="CASCADE"),
        nullable=False,
    )
    version = Column(Text, nullable=False)  # MAJOR.MINOR.PATCH
    content = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False, default=now_iso)
    parent_version_id = Column(Integer, nullable=True)

    prompt = relationship("Prompt", back_populates="versions")


# -----------------------------------------------------------------------------
# Setting
# -----------------------------------------------------------------------------

class Setting(Base):
    """Key/value settings shared by the whole store."""
    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
