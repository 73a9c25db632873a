import os
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from core import config

# Base class for all models
Base = declarative_base()


def make_engine(database_url: str = None):
    """Build an engine for the given URL (defaults to the configured one).

    In-memory SQLite shares a single connection so every session sees the
    same tables.
    """
    url = database_url or config.DATABASE_URL

    if url.startswith("sqlite"):
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        path = url.split("sqlite:///", 1)[-1]
        folder = os.path.dirname(path)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(url)


def make_session_factory(database_url: str = None, create_tables: bool = True):
    """Return a session factory bound to a fresh engine.

    Objects stay usable after their session closes (expire_on_commit=False),
    which is what the record store hands back to callers.
    """
    bind = make_engine(database_url)
    if create_tables:
        init_db(bind)
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=bind,
    )


def init_db(bind=None):
    """Create all tables that don't exist yet."""
    # Import models so their tables are registered on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# Create engine
engine = make_engine()

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@contextmanager
def get_db_context(session_factory=None):
    """
    Context manager for database sessions.
    Rolls back on error and always closes the session.

    Usage:
        with get_db_context() as db:
            result = db.query(Model).all()
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
