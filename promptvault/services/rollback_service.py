# promptvault/services/rollback_service.py
"""
Rollback of a prompt to a historical version.

A rollback never rewrites history: it inserts a new version carrying the
target's content, with parent_version_id pointing at the target, and makes
it live. Retention cleanup then runs as for any other new version.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.exceptions import StorageError, VersionNotFoundError
from promptvault.logging_config import log_operation
from promptvault.models import Prompt, PromptVersion, VersionBump, now_iso
from promptvault.services.prompt_service import current_version_string
from promptvault.services.retention import cleanup_old_versions
from promptvault.services.versioning import bump_version

logger = logging.getLogger(__name__)


@dataclass
class RollbackResult:
    """Result of a rollback operation."""

    prompt_id: int
    target_version_id: int
    new_version_id: int
    from_version: str
    to_version: str
    versions_removed: int = 0


def rollback_to_version(
    db: Session,
    prompt_id: int,
    version_id: int,
    version_type: str | VersionBump = VersionBump.PATCH,
) -> RollbackResult:
    """
    Make the content of `version_id` live again as a new version.

    Raises VersionNotFoundError if the version does not exist or belongs to
    another prompt.
    """
    now = now_iso()

    with log_operation("rollback", prompt_id=prompt_id, version_id=version_id):
        try:
            target = (
                db.query(PromptVersion)
                .filter(PromptVersion.id == version_id, PromptVersion.prompt_id == prompt_id)
                .first()
            )
            if target is None:
                raise VersionNotFoundError(version_id, prompt_id)

            prompt = db.get(Prompt, prompt_id)

            from_version = current_version_string(db, prompt_id)
            to_version = bump_version(from_version, version_type)

            restored = PromptVersion(
                prompt_id=prompt_id,
                version=to_version,
                content=target.content,
                created_at=now,
                parent_version_id=target.id,
            )
            db.add(restored)
            db.flush()

            prompt.current_version_id = restored.id
            prompt.updated_at = now
            db.flush()

            removed = cleanup_old_versions(db, prompt_id)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to rollback: {e}") from e
        except VersionNotFoundError:
            db.rollback()
            raise

    logger.info(
        f"[ROLLBACK] Prompt {prompt_id} rolled back to version {version_id} "
        f"({from_version} -> {to_version})",
        extra={"prompt_id": prompt_id, "version_id": restored.id},
    )

    return RollbackResult(
        prompt_id=prompt_id,
        target_version_id=version_id,
        new_version_id=restored.id,
        from_version=from_version,
        to_version=to_version,
        versions_removed=removed,
    )
