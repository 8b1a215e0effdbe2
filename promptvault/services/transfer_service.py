# promptvault/services/transfer_service.py
"""
Export and import of the whole store.

Export snapshots every prompt with its full version history plus every
setting. Import is a destructive replace that keeps the snapshot's ids and
runs as one transaction: on any failure the store is left as it was.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.exceptions import StorageError
from promptvault.logging_config import log_operation
from promptvault.models import Prompt, PromptVersion, Setting, now_iso
from promptvault.schemas.transfer import ExportData, PromptWithVersions
from promptvault.services.prompt_service import get_prompt_versions
from promptvault.services.settings_service import list_settings
from promptvault.services.tags import decode_tags, encode_tags

logger = logging.getLogger(__name__)


def export_all(db: Session) -> ExportData:
    """Snapshot prompts (ordered by id) with versions (newest first) and settings."""
    with log_operation("export"):
        try:
            prompts = db.query(Prompt).order_by(Prompt.id).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to export data: {e}") from e

        exported = [
            PromptWithVersions(
                id=prompt.id,
                name=prompt.name,
                source=prompt.source,
                notes=prompt.notes,
                tags=decode_tags(prompt.tags),
                pinned=bool(prompt.pinned),
                created_at=prompt.created_at,
                updated_at=prompt.updated_at,
                current_version_id=prompt.current_version_id,
                versions=get_prompt_versions(db, prompt.id),
            )
            for prompt in prompts
        ]

        data = ExportData(
            prompts=exported,
            settings=list_settings(db),
            export_time=now_iso(),
        )

    logger.info(
        f"[TRANSFER] Exported {len(exported)} prompts",
        extra={"prompts": len(exported), "settings": len(data.settings)},
    )
    return data


def import_all(db: Session, data: ExportData) -> None:
    """
    Replace every prompt and version with the snapshot's, then upsert settings.

    All-or-nothing: any failure rolls back to the prior state and raises
    StorageError.
    """
    version_count = sum(len(p.versions) for p in data.prompts)

    with log_operation("import", prompts=len(data.prompts), versions=version_count):
        try:
            db.query(PromptVersion).delete(synchronize_session=False)
            db.query(Prompt).delete(synchronize_session=False)
            db.expunge_all()

            for item in data.prompts:
                db.add(
                    Prompt(
                        id=item.id,
                        name=item.name,
                        source=item.source,
                        notes=item.notes,
                        tags=encode_tags(item.tags),
                        pinned=item.pinned,
                        created_at=item.created_at,
                        updated_at=item.updated_at,
                        current_version_id=item.current_version_id,
                    )
                )
            db.flush()

            for item in data.prompts:
                for version in item.versions:
                    db.add(
                        PromptVersion(
                            id=version.id,
                            prompt_id=version.prompt_id,
                            version=version.version,
                            content=version.content,
                            created_at=version.created_at,
                            parent_version_id=version.parent_version_id,
                        )
                    )
            db.flush()

            for key, value in data.settings.items():
                db.merge(Setting(key=key, value=value))

            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to import data: {e}") from e

    logger.info(
        f"[TRANSFER] Imported {len(data.prompts)} prompts, {version_count} versions",
        extra={"prompts": len(data.prompts), "versions": version_count},
    )
