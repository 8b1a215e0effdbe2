# promptvault/database.py
"""
Store engine, session factory and schema initialization.

Each public operation receives an explicit Session. The API opens one
session per request via get_db(); the CLI and scripts open their own.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from promptvault.config import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    # Versions cascade with their prompt
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def create_store_engine(database_url: str, echo: bool = False) -> Engine:
    """Build an engine for a store URL (normally a SQLite file)."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            future=True,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _set_sqlite_pragmas)
        return engine

    return create_engine(database_url, future=True, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        future=True,
    )


def init_db(engine: Engine) -> None:
    """
    Create tables and indexes if they don't exist, then seed default settings.

    Safe to call on every start against an existing store.
    """
    from promptvault import models  # noqa: F401
    from promptvault.services.settings_service import ensure_default_settings

    Base.metadata.create_all(bind=engine)

    db = Session(bind=engine, future=True)
    try:
        ensure_default_settings(db)
    finally:
        db.close()

    logger.info(f"Store initialized: {engine.url}")


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Engine for the configured store file."""
    return create_store_engine(get_settings().database_url)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    return create_session_factory(get_engine())


def get_db():
    """
    FastAPI dependency that gives you a store session and cleans it up after.
    """
    db: Session = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
