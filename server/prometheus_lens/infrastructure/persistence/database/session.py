# server/prometheus_lens/infrastructure/persistence/database/session.py
from __future__ import annotations

"""SQLAlchemy engine/session setup + FastAPI dependency + schema init guard."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from prometheus_lens.core.config import settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None

_schema_lock = threading.Lock()
_schema_ready = False


def init_engine() -> Engine:
    """
    Create a singleton SQLAlchemy Engine, with dialect-aware connect_args.
    - PostgreSQL: pass connect_timeout
    - SQLite: share in-memory DB across connections (StaticPool), disable same-thread
      check, enforce foreign keys (ON DELETE SET NULL)
    """
    global _engine
    if _engine is not None:
        return _engine

    url = make_url(settings.DATABASE_URL)
    backend = url.get_backend_name()  # e.g. "postgresql", "sqlite"
    kwargs: dict = dict(future=True, pool_pre_ping=True)
    connect_args: dict = {}

    if backend.startswith("postgresql") or backend == "postgres":
        # psycopg accepts connect_timeout (seconds)
        connect_args["connect_timeout"] = int(settings.DB_CONNECT_TIMEOUT)
    elif backend.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        db_name = (url.database or "").strip()
        if db_name in ("", ":memory:"):
            kwargs["poolclass"] = StaticPool

    _engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, **kwargs)

    if backend.startswith("sqlite"):
        @event.listens_for(_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
            dbapi_connection.execute("PRAGMA foreign_keys=ON")

    return _engine


def init_sessionmaker() -> sessionmaker:
    """Create (once) and return the SessionLocal factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=init_engine(),
            future=True,
            autoflush=True,
            expire_on_commit=False,
        )
    return _SessionLocal


def init_db() -> None:
    """
    Crée les tables si besoin, au plus une fois par process.

    create_all(checkfirst) est idempotent : deux requêtes concurrentes qui
    arrivent avant le premier succès ne cassent rien (le verrou les sérialise).
    En cas d'échec le drapeau reste à False : la requête suivante retente.
    """
    global _schema_ready
    if _schema_ready:
        return
    with _schema_lock:
        if _schema_ready:
            return
        from prometheus_lens.infrastructure.persistence.database.base import Base

        logger.info("Initialisation du schéma (asset_folders, assets)...")
        Base.metadata.create_all(bind=init_engine(), checkfirst=True)
        _schema_ready = True
        logger.info("Schéma prêt.")


def get_session() -> Session:
    """Return a new Session (caller is responsible for closing it)."""
    return init_sessionmaker()()


@contextmanager
def get_sync_session() -> Iterator[Session]:
    """Context manager: `with get_sync_session() as s:`"""
    init_db()
    s = get_session()
    try:
        yield s
    finally:
        s.close()


# FastAPI dependency (auto-close)
def get_db() -> Iterator[Session]:
    """
    Usage:
        def endpoint(db: Session = Depends(get_db)): ...
    """
    init_db()
    db = get_session()
    try:
        yield db
    finally:
        db.close()
