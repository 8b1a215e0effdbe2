# promptvault/services/prompt_service.py
"""
Prompt and version persistence.

Each function takes an explicit Session and performs one logical mutation.
Multi-statement mutations (create, versioned update) commit once at the end
and roll back on any failure, so readers never see a prompt pointing at an
uncommitted version.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from promptvault.exceptions import PromptNotFoundError, StorageError
from promptvault.logging_config import log_operation
from promptvault.models import INITIAL_VERSION, Prompt, PromptVersion, VersionBump, now_iso
from promptvault.schemas.prompts import PromptResponse, VersionResponse
from promptvault.services.retention import cleanup_old_versions
from promptvault.services.tags import decode_tags, encode_tags
from promptvault.services.versioning import bump_version

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Read helpers
# -----------------------------------------------------------------------------


def live_prompt_query(db: Session) -> Query:
    """Prompts joined to their live version."""
    return (
        db.query(Prompt, PromptVersion)
        .outerjoin(PromptVersion, PromptVersion.id == Prompt.current_version_id)
    )


def display_order(query: Query) -> Query:
    """Pinned first, then most recently updated."""
    return query.order_by(Prompt.pinned.desc(), Prompt.updated_at.desc(), Prompt.id.desc())


def to_prompt_response(prompt: Prompt, live: PromptVersion | None) -> PromptResponse:
    return PromptResponse(
        id=prompt.id,
        name=prompt.name,
        source=prompt.source,
        notes=prompt.notes,
        tags=decode_tags(prompt.tags),
        pinned=bool(prompt.pinned),
        content=live.content if live else "",
        version=live.version if live else INITIAL_VERSION,
        created_at=prompt.created_at,
        updated_at=prompt.updated_at,
        current_version_id=prompt.current_version_id,
    )


def current_version_string(db: Session, prompt_id: int) -> str:
    """Version string of the live version, 1.0.0 if there is none."""
    version = (
        db.query(PromptVersion.version)
        .join(Prompt, Prompt.current_version_id == PromptVersion.id)
        .filter(Prompt.id == prompt_id)
        .scalar()
    )
    return version or INITIAL_VERSION


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------


def list_prompts(db: Session) -> list[PromptResponse]:
    """All prompts with live content, pinned first then by updated_at desc."""
    try:
        rows = display_order(live_prompt_query(db)).all()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get prompts: {e}") from e
    return [to_prompt_response(prompt, live) for prompt, live in rows]


def get_prompt(db: Session, prompt_id: int) -> PromptResponse:
    try:
        row = live_prompt_query(db).filter(Prompt.id == prompt_id).first()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get prompt: {e}") from e

    if row is None:
        raise PromptNotFoundError(prompt_id)
    return to_prompt_response(*row)


def get_prompt_versions(db: Session, prompt_id: int) -> list[VersionResponse]:
    """All versions of a prompt, newest first. Empty for unknown prompts."""
    try:
        versions = (
            db.query(PromptVersion)
            .filter(PromptVersion.prompt_id == prompt_id)
            .order_by(PromptVersion.created_at.desc(), PromptVersion.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get versions: {e}") from e
    return [VersionResponse.model_validate(v) for v in versions]


# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------


def create_prompt(
    db: Session,
    name: str,
    content: str,
    source: str | None = None,
    notes: str | None = None,
    tags: list[str] | None = None,
) -> int:
    """
    Create a prompt with its initial 1.0.0 version.

    The prompt row, the version row and the current_version_id back-fill
    are committed together. Returns the new prompt id.
    """
    now = now_iso()

    with log_operation("create_prompt"):
        try:
            prompt = Prompt(
                name=name,
                source=source,
                notes=notes,
                tags=encode_tags(tags),
                pinned=False,
                created_at=now,
                updated_at=now,
            )
            db.add(prompt)
            db.flush()

            version = PromptVersion(
                prompt_id=prompt.id,
                version=INITIAL_VERSION,
                content=content,
                created_at=now,
                parent_version_id=None,
            )
            db.add(version)
            db.flush()

            prompt.current_version_id = version.id
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to create prompt: {e}") from e

    logger.info(f"[PROMPTS] Created prompt {prompt.id} '{name}'", extra={"prompt_id": prompt.id})
    return prompt.id


def update_prompt(
    db: Session,
    prompt_id: int,
    name: str,
    content: str,
    source: str | None = None,
    notes: str | None = None,
    tags: list[str] | None = None,
    save_as_version: bool = False,
    version_type: str | VersionBump = VersionBump.PATCH,
) -> PromptVersion | None:
    """
    Update a prompt's fields and content.

    Metadata (name, source, notes, tags, updated_at) is always written.
    Without save_as_version the live version's content is overwritten in
    place. With it, a new version is inserted whose parent is the previous
    live version, the prompt is repointed and retention cleanup runs.

    Returns the live version after the update.
    """
    now = now_iso()

    with log_operation("update_prompt", prompt_id=prompt_id):
        try:
            prompt = db.get(Prompt, prompt_id)
            if prompt is None:
                raise PromptNotFoundError(prompt_id)

            prompt.name = name
            prompt.source = source
            prompt.notes = notes
            prompt.tags = encode_tags(tags)
            prompt.updated_at = now

            if save_as_version:
                new_version = bump_version(current_version_string(db, prompt_id), version_type)
                live = PromptVersion(
                    prompt_id=prompt_id,
                    version=new_version,
                    content=content,
                    created_at=now,
                    parent_version_id=prompt.current_version_id,
                )
                db.add(live)
                db.flush()

                prompt.current_version_id = live.id
                db.flush()
                cleanup_old_versions(db, prompt_id)
            else:
                live = db.get(PromptVersion, prompt.current_version_id) if prompt.current_version_id else None
                if live is not None:
                    live.content = content

            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to update prompt: {e}") from e
        except PromptNotFoundError:
            db.rollback()
            raise

    if save_as_version:
        logger.info(
            f"[PROMPTS] Prompt {prompt_id} saved as version {live.version}",
            extra={"prompt_id": prompt_id, "version_id": live.id},
        )
    return live


def delete_prompt(db: Session, prompt_id: int) -> bool:
    """
    Delete a prompt and all of its versions atomically.

    Idempotent: returns False (no error) when the prompt does not exist.
    """
    with log_operation("delete_prompt", prompt_id=prompt_id):
        try:
            db.query(PromptVersion).filter(PromptVersion.prompt_id == prompt_id).delete()
            rows_affected = db.query(Prompt).filter(Prompt.id == prompt_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to delete prompt: {e}") from e

    logger.info(f"[PROMPTS] Deleted prompt {prompt_id} (rows affected: {rows_affected})")
    return rows_affected > 0


def toggle_pin(db: Session, prompt_id: int) -> bool:
    """
    Flip the pinned flag and bump updated_at.

    Returns False (no error) when the prompt does not exist.
    """
    try:
        prompt = db.get(Prompt, prompt_id)
        if prompt is None:
            return False

        prompt.pinned = not prompt.pinned
        prompt.updated_at = now_iso()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Failed to toggle pin: {e}") from e

    logger.info(f"[PROMPTS] Prompt {prompt_id} pinned={prompt.pinned}", extra={"prompt_id": prompt_id})
    return True
