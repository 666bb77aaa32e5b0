"""SQLAlchemy engine and session management."""

from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from colstore.entity.base import Base

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite only honours ON DELETE CASCADE with this set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_db(database_url: str) -> Engine:
    """Create the engine, register entities and create missing tables."""
    global _engine, _session_factory
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    _engine = create_engine(database_url, connect_args=connect_args)
    if database_url.startswith("sqlite"):
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
    _session_factory = sessionmaker(bind=_engine, expire_on_commit=False)
    # Importing the entity modules registers their tables on Base.metadata
    import colstore.entity  # noqa: F401
    Base.metadata.create_all(_engine)
    logger.debug("Database initialized url={}", _engine.url.render_as_string(hide_password=True))
    return _engine


def dispose_db() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_db() -> Iterator[Session]:
    if _session_factory is None:
        raise RuntimeError("Database is not initialized, call init_db() first")
    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
