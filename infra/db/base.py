# infra/db/base.py
from __future__ import annotations
import logging
import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

DB_URL_ENV = "PM_DB_URL"

Base = declarative_base()

SessionLocal = sessionmaker(autoflush=False, autocommit=False)

_engine: Optional[Engine] = None


def db_url() -> str:
    """``PM_DB_URL`` if set, else the SQLite file under the user data dir."""
    override = os.getenv(DB_URL_ENV)
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"


def get_engine() -> Engine:
    """Create the engine on first use and bind ``SessionLocal`` to it."""
    global _engine
    if _engine is None:
        url = db_url()
        logger.info("Using database at: %s", url)
        _engine = create_engine(url, echo=False, future=True)
        SessionLocal.configure(bind=_engine)
    return _engine


def init_db() -> Engine:
    """Bring the configured database up to the latest schema revision."""
    from infra.migrate import run_migrations

    run_migrations(db_url())
    return get_engine()
