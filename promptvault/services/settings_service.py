# promptvault/services/settings_service.py
"""
Key/value settings stored alongside prompts.

The only well-known key is version_cleanup_threshold, seeded at
initialization and read by the retention cleanup.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptvault.config import get_settings
from promptvault.exceptions import StorageError
from promptvault.models import VERSION_CLEANUP_THRESHOLD_KEY, Setting

logger = logging.getLogger(__name__)


def default_settings() -> dict[str, str]:
    """Settings inserted on first initialization."""
    return {
        VERSION_CLEANUP_THRESHOLD_KEY: str(get_settings().DEFAULT_VERSION_CLEANUP_THRESHOLD),
    }


def ensure_default_settings(db: Session) -> None:
    """Insert default settings that are absent. Existing values are left alone."""
    try:
        for key, value in default_settings().items():
            if db.get(Setting, key) is None:
                db.add(Setting(key=key, value=value))
                logger.info(f"Seeded default setting {key}={value}")
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Failed to initialize settings: {e}") from e


def get_setting(db: Session, key: str) -> str | None:
    try:
        setting = db.get(Setting, key)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to get setting: {e}") from e
    return setting.value if setting else None


def set_setting(db: Session, key: str, value: str) -> None:
    """Upsert a setting."""
    try:
        db.merge(Setting(key=key, value=value))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Failed to set setting: {e}") from e

    logger.info(f"Setting updated: {key}={value}")


def list_settings(db: Session) -> dict[str, str]:
    try:
        rows = db.query(Setting).order_by(Setting.key).all()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to list settings: {e}") from e
    return {row.key: row.value for row in rows}
