"""
Database configuration - SQLAlchemy 2.x (sync)

Balance mutations rely on row-level exclusivity:
- PostgreSQL: SELECT ... FOR UPDATE, lock waits bounded by lock_timeout
- SQLite: no row locks, so every transaction starts with BEGIN IMMEDIATE
  and holds the database write lock until commit/rollback
"""

from typing import Any, Dict

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from jobpay.infrastructure.settings import Settings, get_settings


def _engine_kwargs(settings: Settings) -> Dict[str, Any]:
    if settings.is_sqlite:
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.LOCK_TIMEOUT_SECONDS,
            },
        }

    lock_timeout_ms = int(settings.LOCK_TIMEOUT_SECONDS * 1000)
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
        "connect_args": {"options": f"-c lock_timeout={lock_timeout_ms}"},
    }


def _install_sqlite_locking(engine: Engine) -> None:
    """Take over transaction control from pysqlite and begin IMMEDIATE."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        # Disable pysqlite's own BEGIN so the "begin" hook below is the only one
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine for the configured DATABASE_URL."""
    engine = create_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        **_engine_kwargs(settings),
    )
    if settings.is_sqlite:
        _install_sqlite_locking(engine)
    return engine


settings = get_settings()

engine = create_db_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models - SQLAlchemy 2.x style"""
    pass


def get_db():
    """
    Dependency to get database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
