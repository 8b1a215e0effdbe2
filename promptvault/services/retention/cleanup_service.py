# promptvault/services/retention/cleanup_service.py
"""
Size-bounded version retention.

After every version-producing mutation the prompt's history is trimmed to
the configured threshold, oldest first. The live version is never selected.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from promptvault.config import get_settings
from promptvault.models import VERSION_CLEANUP_THRESHOLD_KEY, Prompt, PromptVersion, Setting
from promptvault.services import settings_service

logger = logging.getLogger(__name__)


def parse_threshold(raw: str | None, default: int | None = None) -> int:
    """
    Parse a stored threshold value.

    Missing or unparseable values fall back to the default; values below 1
    are clamped to 1 so the live version always survives.
    """
    if default is None:
        default = get_settings().DEFAULT_VERSION_CLEANUP_THRESHOLD

    try:
        value = int((raw or "").strip())
    except ValueError:
        return default

    return max(value, 1)


def get_cleanup_threshold(db: Session) -> int:
    """Current max number of versions kept per prompt."""
    setting = db.get(Setting, VERSION_CLEANUP_THRESHOLD_KEY)
    return parse_threshold(setting.value if setting else None)


def set_cleanup_threshold(db: Session, threshold: int) -> None:
    """
    Change the retention threshold.

    Raises ValueError if threshold is below 1. Existing histories are trimmed
    on the next version-producing mutation, not immediately.
    """
    if threshold < 1:
        raise ValueError("Cleanup threshold must be at least 1")
    settings_service.set_setting(db, VERSION_CLEANUP_THRESHOLD_KEY, str(threshold))


def cleanup_old_versions(db: Session, prompt_id: int) -> int:
    """
    Delete the oldest versions of a prompt beyond the threshold.

    Runs inside the caller's transaction (no commit). Returns the number of
    versions removed.
    """
    threshold = get_cleanup_threshold(db)

    count = (
        db.query(func.count(PromptVersion.id))
        .filter(PromptVersion.prompt_id == prompt_id)
        .scalar()
    ) or 0

    if count <= threshold:
        return 0

    to_delete = count - threshold
    current_version_id = (
        db.query(Prompt.current_version_id).filter(Prompt.id == prompt_id).scalar()
    )

    query = db.query(PromptVersion.id).filter(PromptVersion.prompt_id == prompt_id)
    if current_version_id is not None:
        query = query.filter(PromptVersion.id != current_version_id)

    stale_ids = [
        row.id
        for row in query.order_by(PromptVersion.created_at.asc(), PromptVersion.id.asc())
        .limit(to_delete)
        .all()
    ]

    if not stale_ids:
        return 0

    removed = (
        db.query(PromptVersion)
        .filter(PromptVersion.id.in_(stale_ids))
        .delete(synchronize_session=False)
    )

    logger.info(
        f"[RETENTION] Prompt {prompt_id}: removed {removed} old versions (threshold={threshold})",
        extra={"prompt_id": prompt_id, "removed": removed},
    )
    return removed
